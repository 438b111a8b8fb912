"""
Shape Kinds
===========
The set of shapes is closed: a circle and a triangle. Each is looked up by
its ``KEY``; the table is read-only.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from shapearea.model.circle import Circle
from shapearea.model.shape import Shape
from shapearea.model.triangle import Triangle

SHAPE_KINDS: Mapping[str, type[Shape]] = MappingProxyType({
    Circle.KEY: Circle,
    Triangle.KEY: Triangle,
})


def create_shape(kind: str, *measurements: float) -> Shape:
    """
    Build a shape of the given kind from its measurements.

    Args:
        kind: ``"circle"`` or ``"triangle"``.
        measurements: Lengths passed to the shape's constructor.

    Raises:
        KeyError: Unknown kind.
        InvalidMeasurementError: The lengths do not describe a valid shape.
    """
    try:
        shape_cls = SHAPE_KINDS[kind]
    except KeyError:
        raise KeyError(f"Unknown shape kind '{kind}', expected one of {list_keys()}") from None
    return shape_cls(*measurements)


def list_keys() -> list[str]:
    return list(SHAPE_KINDS)
