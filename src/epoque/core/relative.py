"""Relative time formatting ("2 hours ago", "in 3 days 5 hours")."""

from dataclasses import dataclass
from typing import NamedTuple

from epoque.core.units import BREAKDOWN_UNITS, DEFAULT_PRECISION, TimeUnit, clamp_precision

JUST_NOW = "just now"


class TimePart(NamedTuple):
    """One step of a breakdown: how many of a given unit."""

    count: int
    unit: TimeUnit

    def render(self) -> str:
        """Render as "<count> <unit>", pluralized when count != 1."""
        return f"{self.count} {self.unit.label(self.count)}"


@dataclass(frozen=True)
class RelativeTime:
    """Result of formatting a timestamp relative to a reference time.

    Attributes:
        parts: Rendered units, most significant first (empty for "just now")
        is_future: True when the target lies after the reference time
        text: Rendered phrase, e.g. "2 hours ago" or "in 3 days"

    """

    parts: tuple[TimePart, ...]
    is_future: bool
    text: str

    def __str__(self) -> str:
        return self.text


def breakdown(milliseconds: int) -> list[TimePart]:
    """Greedily decompose a non-negative millisecond count over the unit ladder.

    Every unit of the ladder is present in the result, zero counts included.

    Args:
        milliseconds: Non-negative duration in milliseconds

    Returns:
        One TimePart per ladder unit, largest unit first.

    Raises:
        ValueError: If milliseconds is negative.

    """
    if milliseconds < 0:
        raise ValueError(f"breakdown requires a non-negative duration, got {milliseconds}")

    parts: list[TimePart] = []
    remaining = milliseconds
    for unit in BREAKDOWN_UNITS:
        count, remaining = divmod(remaining, unit.milliseconds)
        parts.append(TimePart(count, unit))
    return parts


def format_relative(target: int, now: int, precision: int = DEFAULT_PRECISION) -> RelativeTime:
    """Format an epoch timestamp relative to a reference time.

    Args:
        target: Timestamp to describe, epoch milliseconds
        now: Reference timestamp, epoch milliseconds
        precision: Number of non-zero units to show; clamped to [1, 7]

    Returns:
        RelativeTime with the most significant non-zero units.

    Examples:
        >>> format_relative(0, 7_200_000).text
        '2 hours ago'
        >>> format_relative(9_000_000, 0, precision=2).text
        'in 2 hours 30 minutes'

    """
    delta = now - target
    if delta == 0:
        return RelativeTime(parts=(), is_future=False, text=JUST_NOW)

    is_future = delta < 0
    significant = [part for part in breakdown(abs(delta)) if part.count > 0]
    shown = tuple(significant[: clamp_precision(precision)])

    if not shown:
        return RelativeTime(parts=(), is_future=is_future, text=JUST_NOW)

    phrase = " ".join(part.render() for part in shown)
    text = f"in {phrase}" if is_future else f"{phrase} ago"
    return RelativeTime(parts=shown, is_future=is_future, text=text)


def humanize(target: int, now: int, precision: int = DEFAULT_PRECISION) -> str:
    """Return only the rendered phrase of format_relative()."""
    return format_relative(target, now, precision).text
