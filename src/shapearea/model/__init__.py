"""
The MODEL layer contains the shapes and their validation rules.
It performs no I/O; it deals with measurements and areas only.
"""
from shapearea.model.shape import InvalidMeasurementError, Shape
from shapearea.model.circle import Circle
from shapearea.model.triangle import RightTriangleCheck, Triangle
from shapearea.model.registry import SHAPE_KINDS, create_shape, list_keys

__all__ = [
    "Circle",
    "InvalidMeasurementError",
    "RightTriangleCheck",
    "SHAPE_KINDS",
    "Shape",
    "Triangle",
    "create_shape",
    "list_keys",
]
