"""
Period arithmetic — calendar frequency <-> simulation weeks.

The simulation steps in whole weeks. Monthly schedules are spaced by the
fractional 52/12 weeks and rounded only when compared against a week index,
so their cadence drifts the way calendar months do (4, 9, 13, 17, 22, 26, ...).
"""

from __future__ import annotations

from core.schema import Frequency
from core.utils import round_half_away

WEEKS_PER_MONTH = 52 / 12

_PERIODS_PER_YEAR = {
    Frequency.WEEKLY: 52,
    Frequency.BIWEEKLY: 26,
    Frequency.MONTHLY: 12,
}

_WEEKS_PER_PERIOD = {
    Frequency.WEEKLY: 1.0,
    Frequency.BIWEEKLY: 2.0,
    Frequency.MONTHLY: WEEKS_PER_MONTH,
}


def periods_per_year(frequency: Frequency) -> int:
    """Number of schedule periods in a year. Raises ValueError for anything but a Frequency value."""
    return _PERIODS_PER_YEAR[Frequency(frequency)]


def weeks_per_period(frequency: Frequency) -> float:
    """Fractional weeks between payments (monthly is ~4.333, never rounded here)."""
    return _WEEKS_PER_PERIOD[Frequency(frequency)]


def horizon_to_weeks(months: int) -> int:
    """Last simulated week index for a horizon of `months` calendar months."""
    return round_half_away(months * WEEKS_PER_MONTH)
