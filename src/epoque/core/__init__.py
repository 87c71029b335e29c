"""Core engine: duration parsing, relative time formatting, arithmetic.

Usage:
    from epoque.core import format_relative, parse_duration

    delta = parse_duration("1 day 5 hours")
    format_relative(target, now, precision=2).text
"""

from epoque.core.arithmetic import apply_duration, shift_timestamp
from epoque.core.duration import parse_duration
from epoque.core.relative import RelativeTime, TimePart, breakdown, format_relative, humanize

__all__ = [
    "apply_duration",
    "breakdown",
    "format_relative",
    "humanize",
    "parse_duration",
    "shift_timestamp",
    "RelativeTime",
    "TimePart",
]
