"""Human-readable duration parsing.

Converts strings such as "2 hours", "1 day 5 hours 30 minutes", "2h 30m",
"90s" or "2 hours ago" into a signed count of milliseconds. A string that
is just an integer ("7200000") is taken as milliseconds directly.
"""

import logging
import re
from decimal import Decimal

from epoque.core.exceptions import UnknownUnitError, UnparseableError
from epoque.core.units import lookup_unit

logger = logging.getLogger(__name__)

# Trailing "ago" carries no meaning for the magnitude
_AGO_SUFFIX = re.compile(r"\s*\bago$", re.IGNORECASE)

_BARE_NUMBER = re.compile(r"[+-]?\d+")

# <number><optional whitespace><unit>; the unit is a maximal run of letters
_QUANTITY = re.compile(r"(\d+(?:\.\d*)?|\.\d+)\s*([a-zA-Z]+)")


def parse_duration(text: str) -> int:
    """Parse a human-readable duration into milliseconds.

    Args:
        text: Duration string, e.g. "1.5 hours", "2h 30m", "7200000".

    Returns:
        Duration in whole milliseconds. Fractional milliseconds produced by
        decimal multipliers are truncated.

    Raises:
        UnknownUnitError: A number is followed by an unrecognised unit.
        UnparseableError: The string is neither an integer nor contains any
            number/unit pair.

    Examples:
        >>> parse_duration("1 day 5 hours")
        106200000
        >>> parse_duration("2 hours ago")
        7200000

    """
    cleaned = _AGO_SUFFIX.sub("", text.strip()).strip()

    if _BARE_NUMBER.fullmatch(cleaned):
        return int(cleaned)

    total = Decimal(0)
    matched = False
    for match in _QUANTITY.finditer(cleaned):
        value, unit = match.groups()
        magnitude = lookup_unit(unit)
        if magnitude is None:
            raise UnknownUnitError(unit.lower(), text)
        total += Decimal(value) * magnitude
        matched = True

    if not matched:
        raise UnparseableError(text)

    milliseconds = int(total)
    logger.debug("Parsed duration %r as %d ms", text, milliseconds)
    return milliseconds
