# src/kepler_source/energy/converter.py
"""
Converts Kepler energy readings from Joules to kilowatt-hours.
"""

from ..core.exceptions import EmptyReadingError

SECONDS_PER_HOUR = 3600
WATTS_PER_KILOWATT = 1000


def convert_joules_to_kwh(joules: float, interval_seconds: float) -> float:
    """
    Converts a reading in Joules taken over `interval_seconds` into kWh.

    A Joule is one Watt-second: dividing by the elapsed seconds gives the
    average power in Watts, dividing by 3600 gives Watt-hours and dividing
    by 1000 gives kilowatt-hours.

    Raises:
        EmptyReadingError: If the reading is exactly zero. Kepler reports no
            consumption the same way it reports missing data, so a zero is
            never recorded as a metric.
    """
    if joules == 0:
        raise EmptyReadingError("energy consumption is 0")

    return joules / interval_seconds / SECONDS_PER_HOUR / WATTS_PER_KILOWATT
