from __future__ import annotations

import math

import pytest

from shapearea import Circle, InvalidMeasurementError
from shapearea.config import MAX_MEASUREMENT


def test_circle_area_of_radius_two() -> None:
    circle = Circle(2.0)
    assert math.isclose(circle.area, 12.566370614359172)
    assert circle.radius == 2.0
    assert circle.number_of_measurements == 1


@pytest.mark.parametrize("radius", [0.5, 1, 3.25, 1e-300, 1e100])
def test_circle_area_matches_pi_r_squared(radius: float) -> None:
    assert Circle(radius).area == pytest.approx(math.pi * radius * radius)


@pytest.mark.parametrize("radius", [0, 0.0, -1.0, -1e-12, math.nan, math.inf, -math.inf])
def test_circle_rejects_invalid_radius(radius: float) -> None:
    with pytest.raises(InvalidMeasurementError):
        Circle(radius)


@pytest.mark.parametrize("radius", ["2.0", None, True, [2.0]])
def test_circle_rejects_non_numeric_radius(radius: object) -> None:
    with pytest.raises(InvalidMeasurementError):
        Circle(radius)  # type: ignore[arg-type]


def test_circle_accepts_max_measurement_and_area_overflows_to_inf() -> None:
    circle = Circle(MAX_MEASUREMENT)
    assert circle.radius == MAX_MEASUREMENT
    assert circle.area == math.inf


def test_circle_area_overflow_for_large_radius() -> None:
    assert Circle(1e200).area == math.inf


def test_circle_reassignment_updates_area() -> None:
    circle = Circle(1.0)
    circle.measurements = [3.0]
    assert circle.radius == 3.0
    assert math.isclose(circle.area, 9.0 * math.pi)


@pytest.mark.parametrize("values", [[], [1.0, 2.0], [-3.0], [math.nan]])
def test_circle_failed_reassignment_keeps_previous_radius(values: list[float]) -> None:
    circle = Circle(1.5)
    with pytest.raises(InvalidMeasurementError):
        circle.measurements = values
    assert circle.measurements.tolist() == [1.5]
    assert math.isclose(circle.area, math.pi * 2.25)


def test_circle_is_valid_is_pure() -> None:
    circle = Circle(1.0)
    assert circle.is_valid([5.0])
    assert not circle.is_valid([5.0, 1.0])
    assert not circle.is_valid([0.0])
    assert circle.radius == 1.0
