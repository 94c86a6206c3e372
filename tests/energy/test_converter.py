# tests/energy/test_converter.py

import pytest

from kepler_source.core.exceptions import EmptyReadingError
from kepler_source.energy.converter import convert_joules_to_kwh


@pytest.mark.parametrize(
    "joules, interval_seconds, expected",
    [
        (1000, 300, 9.259259259259259e-07),
        (1000, 60, 4.62962962962963e-06),
        (372, 300, 3.4444444444444444e-07),
    ],
)
def test_convert_joules_to_kwh(joules, interval_seconds, expected):
    assert convert_joules_to_kwh(joules, interval_seconds) == expected


def test_convert_matches_formula_for_fractional_readings():
    joules, seconds = 12.75, 30.0
    assert convert_joules_to_kwh(joules, seconds) == joules / seconds / 3600 / 1000


def test_convert_zero_joules_is_empty_reading():
    with pytest.raises(EmptyReadingError, match="energy consumption is 0"):
        convert_joules_to_kwh(0, 300)
