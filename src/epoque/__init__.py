"""epoque: convert, format and shift Unix epoch timestamps."""

from epoque.core import (
    RelativeTime,
    apply_duration,
    format_relative,
    humanize,
    parse_duration,
)

__version__ = "0.1.0"

__all__ = [
    "apply_duration",
    "format_relative",
    "humanize",
    "parse_duration",
    "RelativeTime",
    "__version__",
]
