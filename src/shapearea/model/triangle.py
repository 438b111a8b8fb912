from __future__ import annotations

from enum import StrEnum
import logging
import math
from typing import Sequence

import numpy as np

from shapearea.config import TRIANGLE_MEASUREMENTS
from shapearea.model.shape import Shape
from shapearea.utils import is_positive_finite

logger = logging.getLogger(__name__)


class RightTriangleCheck(StrEnum):
    YES = "yes"
    NO = "no"
    # Squares of the sides overflow the float range
    UNDETERMINED = "undetermined"


class Triangle(Shape):
    """
    Triangle described by the lengths of its three sides.

    The sides are stored in the order they were given.
    """
    KEY = "triangle"

    def __init__(self, side_a: float, side_b: float, side_c: float) -> None:
        """
        Initialize the triangle.

        Args:
            side_a: Length of side A.
            side_b: Length of side B.
            side_c: Length of side C.
        """
        super().__init__([side_a, side_b, side_c])

    def is_valid(self, values: Sequence[float]) -> bool:
        """
        Check that the lengths describe a non-degenerate triangle.

        Every side must lie in (0, MAX_MEASUREMENT] and the sum of any two
        sides must be strictly greater than the third one.

        Args:
            values: Candidate side lengths.

        Returns:
            True if the lengths describe a valid triangle, False otherwise.
        """
        if len(values) != TRIANGLE_MEASUREMENTS:
            return False
        a, b, c = values
        if not all(is_positive_finite(side) for side in (a, b, c)):
            return False
        # Sums of sides near MAX_MEASUREMENT overflow to inf, which still compares correctly
        with np.errstate(over="ignore"):
            return bool(a + b > c and a + c > b and b + c > a)

    def calculate_area(self) -> float:
        """
        Calculate the area of the triangle using Heron's formula.

        Returns:
            Area of the triangle. ``inf`` if an intermediate product overflows.
        """
        a, b, c = self._measurements.tolist()
        p = (a + b + c) / 2
        return math.sqrt(p * (p - a) * (p - b) * (p - c))

    def is_right_triangle(self) -> RightTriangleCheck:
        """
        Check whether the triangle has a right angle (exact comparison of squares).

        Returns:
            YES or NO, or UNDETERMINED when the squares overflow the float range.
        """
        hypotenuse, leg_1, leg_2 = np.sort(self._measurements)[::-1]

        with np.errstate(over="ignore"):
            hypotenuse_sqr = hypotenuse * hypotenuse
            legs_sqr = leg_1 * leg_1 + leg_2 * leg_2

        if np.isinf(hypotenuse_sqr) or np.isinf(legs_sqr):
            logger.debug(f"Right angle check of {self!r} is undetermined: squares overflow.")
            return RightTriangleCheck.UNDETERMINED

        if hypotenuse_sqr == legs_sqr:
            return RightTriangleCheck.YES
        return RightTriangleCheck.NO
