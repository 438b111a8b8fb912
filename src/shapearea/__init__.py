"""Area of simple shapes with validated measurements."""

__version__ = "0.1.0"

import logging

from shapearea.logging_config import LOGGER_NAME, setup_logging
from shapearea.model import (
    Circle,
    InvalidMeasurementError,
    RightTriangleCheck,
    SHAPE_KINDS,
    Shape,
    Triangle,
    create_shape,
    list_keys,
)

# Silent unless the application configures logging
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "Circle",
    "InvalidMeasurementError",
    "RightTriangleCheck",
    "SHAPE_KINDS",
    "Shape",
    "Triangle",
    "create_shape",
    "list_keys",
    "setup_logging",
]
