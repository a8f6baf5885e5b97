import pytest

from domains.forecast.temperature import (
    TEMPERATURE_DESCRIPTIONS,
    UNKNOWN_TEMPERATURE_RANGE,
    TemperatureRange,
    describe_temperature,
)


@pytest.mark.parametrize(
    ("temperature", "expected"),
    [
        (12, "very cold"),
        (20, "very cold"),
        (45, "cold"),
        (55, "moderate"),
        (70, "warm"),
        (90, "hot"),
        (100, "very hot"),
        (120, "very hot"),
    ],
)
def test_describe_temperature_inside_ranges(temperature, expected):
    assert describe_temperature(temperature) == expected


@pytest.mark.parametrize(
    ("temperature", "expected"),
    [
        (32, "very cold"),
        (40, "cold"),
        (50, "cold"),
        (60, "moderate"),
        (80, "warm"),
        (95, "hot"),
    ],
)
def test_shared_boundaries_resolve_to_first_listed_range(temperature, expected):
    assert describe_temperature(temperature) == expected


@pytest.mark.parametrize("temperature", [10, 11, 121, -5])
def test_describe_temperature_outside_all_ranges(temperature):
    assert describe_temperature(temperature) == UNKNOWN_TEMPERATURE_RANGE


def test_ranges_are_listed_in_ascending_order():
    lower_bounds = [temperature_range.min for temperature_range, _ in TEMPERATURE_DESCRIPTIONS]
    assert lower_bounds == sorted(lower_bounds)
    assert len(TEMPERATURE_DESCRIPTIONS) == 6


def test_temperature_range_is_inclusive():
    temperature_range = TemperatureRange(40, 60)
    assert temperature_range.contains(40)
    assert temperature_range.contains(60)
    assert not temperature_range.contains(61)
