"""
Global Constants
================
Central registry for the numeric limits shared by all shapes.

Exports:
    MAX_MEASUREMENT (float): Largest finite float a measurement may take.
    CIRCLE_MEASUREMENTS (int): Number of measurements describing a circle.
    TRIANGLE_MEASUREMENTS (int): Number of measurements describing a triangle.
"""
import sys

MAX_MEASUREMENT: float = sys.float_info.max

CIRCLE_MEASUREMENTS: int = 1
TRIANGLE_MEASUREMENTS: int = 3
