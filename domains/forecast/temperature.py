from typing import NamedTuple

UNKNOWN_TEMPERATURE_RANGE = "unknown temperature range"


class TemperatureRange(NamedTuple):
    min: int
    max: int

    def contains(self, temperature: int) -> bool:
        return self.min <= temperature <= self.max


# Evaluated top to bottom; the first matching range wins on shared boundaries.
TEMPERATURE_DESCRIPTIONS: tuple[tuple[TemperatureRange, str], ...] = (
    (TemperatureRange(12, 32), "very cold"),
    (TemperatureRange(32, 50), "cold"),
    (TemperatureRange(40, 60), "moderate"),
    (TemperatureRange(60, 80), "warm"),
    (TemperatureRange(80, 95), "hot"),
    (TemperatureRange(95, 120), "very hot"),
)


def describe_temperature(temperature: int) -> str:
    for temperature_range, description in TEMPERATURE_DESCRIPTIONS:
        if temperature_range.contains(temperature):
            return description
    return UNKNOWN_TEMPERATURE_RANGE
