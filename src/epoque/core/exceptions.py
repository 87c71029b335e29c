"""Exception hierarchy for epoque.

Every error is terminal for an invocation. The CLI catches EpoqueError,
prints the message to stderr and exits with code 1.
"""

__all__ = [
    "EpoqueError",
    "DurationError",
    "UnknownUnitError",
    "UnparseableError",
    "UsageError",
    "InvalidTimestampError",
    "InvalidPrecisionError",
    "MissingTimeValueError",
    "ConfigError",
]


class EpoqueError(Exception):
    """Base exception for all epoque errors."""


class DurationError(EpoqueError):
    """Raised when a duration string cannot be converted to milliseconds.

    Attributes:
        text: The duration string as supplied by the caller.

    """

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class UnknownUnitError(DurationError):
    """Raised when a number is followed by a unit not in the unit table.

    Attributes:
        unit: The offending unit token, lowercased.
        text: The duration string as supplied by the caller.

    """

    def __init__(self, unit: str, text: str = "") -> None:
        super().__init__(f"Unknown time unit: {unit}", text)
        self.unit = unit


class UnparseableError(DurationError):
    """Raised when a duration string holds no number and no number/unit pair."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Unable to parse time string: {text}", text)


class UsageError(EpoqueError):
    """Raised when command-line arguments are malformed."""


class InvalidTimestampError(UsageError):
    """Raised when an epoch argument is not a valid integer.

    Attributes:
        value: The rejected argument.

    """

    def __init__(self, value: str) -> None:
        super().__init__(f'Invalid epoch timestamp "{value}"')
        self.value = value


class InvalidPrecisionError(UsageError):
    """Raised when a precision argument is not an integer in [1, 7].

    Attributes:
        value: The rejected argument.

    """

    def __init__(self, value: str) -> None:
        super().__init__(f'Invalid precision "{value}" (must be 1-7)')
        self.value = value


class MissingTimeValueError(UsageError):
    """Raised when --add or --remove is not followed by a duration.

    Attributes:
        flag: The flag missing its value.

    """

    def __init__(self, flag: str) -> None:
        super().__init__(f"{flag} requires a time value")
        self.flag = flag


class ConfigError(EpoqueError):
    """Raised when environment configuration is invalid."""
