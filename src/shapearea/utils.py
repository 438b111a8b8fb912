from __future__ import annotations

from numbers import Real

from shapearea.config import MAX_MEASUREMENT


def is_number(value: object) -> bool:
    """True for real numbers, excluding bools."""
    return isinstance(value, Real) and not isinstance(value, bool)

def is_positive_finite(value: float) -> bool:
    """Check that a length lies in (0, MAX_MEASUREMENT]. NaN and infinities fail."""
    return 0.0 < value <= MAX_MEASUREMENT
