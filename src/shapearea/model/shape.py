from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np

from shapearea.utils import is_number

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class InvalidMeasurementError(ValueError):
    """Raised when a set of measurements does not describe an existing shape."""


class Shape(ABC):
    """
    Abstract base class for shapes described by a set of lengths
    (radius of a circle, sides of a triangle, ...).

    The measurements are validated on every assignment, so an instance never
    holds a set that fails ``is_valid``. Callers get a read-only view of them.
    """

    def __init__(self, measurements: Iterable[float]) -> None:
        """
        Initialize the shape through the validated measurement setter.

        Args:
            measurements: Lengths describing the shape.

        Raises:
            InvalidMeasurementError: The lengths do not describe a valid shape.
        """
        self.measurements = measurements

    def __repr__(self) -> str:
        """String representation of the shape."""
        return f"{self.__class__.__name__}(measurements={self._measurements.tolist()})"

    @property
    def measurements(self) -> npt.NDArray[np.float64]:
        """Read-only view of the measurements describing the shape."""
        return self._measurements.view()

    @measurements.setter
    def measurements(self, values: Iterable[float]) -> None:
        candidate = self._to_array(values)
        if not self.is_valid(candidate):
            msg = f"{self.__class__.__name__} measurements are invalid: {candidate.tolist()}"
            logger.error(msg)
            raise InvalidMeasurementError(msg)

        candidate.flags.writeable = False
        self._measurements = candidate
        logger.debug(f"{self.__class__.__name__} measurements set to {candidate.tolist()}")

    @property
    def number_of_measurements(self) -> int:
        """Number of lengths describing the shape."""
        return len(self._measurements)

    @property
    def area(self) -> float:
        """Area of the shape, recomputed on every access."""
        return self.calculate_area()

    @abstractmethod
    def calculate_area(self) -> float:
        """Calculate the area of the shape from its (valid) measurements."""
        pass

    @abstractmethod
    def is_valid(self, values: Sequence[float]) -> bool:
        """
        Check whether the lengths describe an existing shape.

        Must not modify the shape; it runs before any assignment.

        Args:
            values: Candidate measurements.

        Returns:
            True if the lengths describe a valid shape, False otherwise.
        """
        pass

    def _to_array(self, values: Iterable[float]) -> npt.NDArray[np.float64]:
        """Convert the input to a flat float array, rejecting anything that is not a number."""
        name = self.__class__.__name__
        try:
            items = list(values)
        except TypeError as e:
            msg = f"{name} measurements must be a sequence of numbers, got {type(values).__name__}"
            logger.error(msg)
            raise InvalidMeasurementError(msg) from e

        for item in items:
            if not is_number(item):
                msg = f"{name} measurement must be a number, got {item!r}"
                logger.error(msg)
                raise InvalidMeasurementError(msg)

        try:
            return np.array(items, dtype=np.float64)
        except OverflowError as e:
            # Integers beyond the float range
            msg = f"{name} measurements exceed the float range: {items}"
            logger.error(msg)
            raise InvalidMeasurementError(msg) from e
