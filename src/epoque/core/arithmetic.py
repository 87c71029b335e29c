"""Timestamp arithmetic: base timestamp plus or minus a duration."""

import logging

from epoque.core.duration import parse_duration

logger = logging.getLogger(__name__)

ADD = 1
REMOVE = -1


def apply_duration(base: int, delta: int, sign: int) -> int:
    """Shift a timestamp by a duration.

    Args:
        base: Base timestamp, epoch milliseconds
        delta: Duration in milliseconds
        sign: ADD (+1) or REMOVE (-1)

    Returns:
        base + sign * delta

    Raises:
        ValueError: If sign is neither +1 nor -1.

    """
    if sign not in (ADD, REMOVE):
        raise ValueError(f"sign must be +1 or -1, got {sign}")
    return base + sign * delta


def add_duration(base: int, delta: int) -> int:
    return apply_duration(base, delta, ADD)


def remove_duration(base: int, delta: int) -> int:
    return apply_duration(base, delta, REMOVE)


def shift_timestamp(base: int, text: str, *, add: bool = True) -> tuple[int, int]:
    """Parse a duration string and apply it to a base timestamp.

    Args:
        base: Base timestamp, epoch milliseconds
        text: Human-readable duration, e.g. "2 hours"
        add: True to add the duration, False to remove it

    Returns:
        Tuple of (duration in ms, new timestamp).

    Raises:
        DurationError: If text cannot be parsed.

    """
    delta = parse_duration(text)
    shifted = apply_duration(base, delta, ADD if add else REMOVE)
    logger.debug("Shifted %d by %s%d ms -> %d", base, "+" if add else "-", delta, shifted)
    return delta, shifted
