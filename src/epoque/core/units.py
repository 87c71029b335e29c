"""Unit table shared by duration parsing and relative-time breakdown.

All magnitudes are fixed millisecond constants. A month is always 30 days
and a year is always 365 days, whatever the calendar dates involved, so
parsing "1 month" and breaking down 2,592,000,000 ms agree with each other.
"""

from typing import NamedTuple

# Unit magnitudes (all values in milliseconds)
MILLISECOND = 1
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

MIN_PRECISION = 1
MAX_PRECISION = 7
DEFAULT_PRECISION = 1


class TimeUnit(NamedTuple):
    """A named unit of the breakdown ladder.

    Attributes:
        name: Singular unit name, e.g. "hour"
        milliseconds: Fixed size of the unit in milliseconds

    """

    name: str
    milliseconds: int

    def label(self, count: int) -> str:
        """Return the unit name pluralized for count."""
        return self.name if count == 1 else f"{self.name}s"


# Display ladder, largest first. Weeks are parsed but folded into days here.
BREAKDOWN_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit("year", YEAR),
    TimeUnit("month", MONTH),
    TimeUnit("day", DAY),
    TimeUnit("hour", HOUR),
    TimeUnit("minute", MINUTE),
    TimeUnit("second", SECOND),
    TimeUnit("millisecond", MILLISECOND),
)

# Lowercase unit token -> magnitude. "m" is minutes, never months.
UNIT_TABLE: dict[str, int] = {
    "year": YEAR,
    "years": YEAR,
    "y": YEAR,
    "month": MONTH,
    "months": MONTH,
    "week": WEEK,
    "weeks": WEEK,
    "w": WEEK,
    "day": DAY,
    "days": DAY,
    "d": DAY,
    "hour": HOUR,
    "hours": HOUR,
    "h": HOUR,
    "minute": MINUTE,
    "minutes": MINUTE,
    "min": MINUTE,
    "m": MINUTE,
    "second": SECOND,
    "seconds": SECOND,
    "sec": SECOND,
    "s": SECOND,
    "millisecond": MILLISECOND,
    "milliseconds": MILLISECOND,
    "ms": MILLISECOND,
}


def lookup_unit(token: str) -> int | None:
    """Return the magnitude for a unit token (case-insensitive), or None."""
    return UNIT_TABLE.get(token.lower())


def clamp_precision(precision: int) -> int:
    """Clamp precision into [MIN_PRECISION, MAX_PRECISION]."""
    return max(MIN_PRECISION, min(MAX_PRECISION, precision))
