from __future__ import annotations

import math
from typing import Sequence

from shapearea.config import CIRCLE_MEASUREMENTS
from shapearea.model.shape import Shape
from shapearea.utils import is_positive_finite


class Circle(Shape):
    """
    Circle described by its radius.
    """
    KEY = "circle"

    def __init__(self, radius: float) -> None:
        """
        Initialize the circle.

        Args:
            radius: Radius of the circle, in (0, MAX_MEASUREMENT].
        """
        super().__init__([radius])

    @property
    def radius(self) -> float:
        """Radius of the circle."""
        return float(self._measurements[0])

    def is_valid(self, values: Sequence[float]) -> bool:
        """Exactly one length, 0 < radius <= MAX_MEASUREMENT."""
        return len(values) == CIRCLE_MEASUREMENTS and bool(is_positive_finite(values[0]))

    def calculate_area(self) -> float:
        """
        Calculate the area of the circle, pi * r^2.

        Returns:
            Area of the circle. ``inf`` if squaring the radius overflows.
        """
        r = self.radius
        return math.pi * r * r
