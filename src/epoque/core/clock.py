"""Wall-clock access and calendar rendering of epoch timestamps."""

import time
from datetime import UTC, datetime, timedelta

# Year is padded separately; glibc %Y does not zero-pad years below 1000
DATETIME_FORMAT = "%m-%d %H:%M:%S"
OUT_OF_RANGE = "out of range"

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def now_ms() -> int:
    """Return the current time as epoch milliseconds.

    Read once per invocation and passed explicitly to everything that needs
    a reference time, so decisions and displayed output agree.
    """
    return time.time_ns() // 1_000_000


def format_datetime(epoch_ms: int, *, utc: bool) -> str:
    """Format epoch milliseconds as "YYYY-MM-DD HH:MM:SS".

    Args:
        epoch_ms: Timestamp in epoch milliseconds (may be negative)
        utc: True for UTC, False for the host's local time zone

    Returns:
        Formatted timestamp, or "out of range" if datetime cannot
        represent it.

    """
    try:
        moment = _EPOCH + timedelta(milliseconds=epoch_ms)
        if not utc:
            moment = moment.astimezone()
    except (OverflowError, OSError, ValueError):
        return OUT_OF_RANGE
    return f"{moment.year:04d}-{moment.strftime(DATETIME_FORMAT)}"
