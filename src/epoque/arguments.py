"""Command-line argument scanning for timeago.

Flags and positionals may appear in any order:

    timeago 1700000000000 3
    timeago --add "2 hours" 1700000000000 -p 3
    timeago -p 2 --remove=30m 1700000000000

The scanner makes one left-to-right pass. Its state says what the next
token must be: any token, the value of --add/--remove, or the value of
-p/--precision.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from epoque.core.exceptions import (
    InvalidPrecisionError,
    InvalidTimestampError,
    MissingTimeValueError,
    UsageError,
)
from epoque.core.units import MAX_PRECISION, MIN_PRECISION

ADD_FLAG = "--add"
REMOVE_FLAG = "--remove"
PRECISION_FLAGS = ("-p", "--precision")
PLAIN_FLAG = "--plain"
PRETTY_FLAG = "--pretty"
VERBOSE_FLAGS = ("-v", "--verbose")
# --help is handled by typer; -h stays here so dash-led values such as "-5h"
# are not split into short options
HELP_FLAG = "-h"

KNOWN_FLAGS = frozenset(
    {ADD_FLAG, REMOVE_FLAG, PLAIN_FLAG, PRETTY_FLAG, HELP_FLAG, *PRECISION_FLAGS, *VERBOSE_FLAGS}
)

_INTEGER = re.compile(r"[+-]?\d+")


class Operation(Enum):
    """What an invocation asks for."""

    SHOW_NOW = "now"
    CONVERT = "convert"
    ADD = "add"
    REMOVE = "remove"


class _State(Enum):
    ANY = "any"
    DURATION = "duration"
    PRECISION = "precision"


@dataclass(frozen=True)
class Invocation:
    """Validated result of scanning the command line.

    Attributes:
        operation: Requested operation
        duration: Duration text for ADD/REMOVE, None otherwise
        epoch: Epoch timestamp argument, None to use the current time
        precision: Precision argument, None to use the configured default
        output: "pretty" or "plain" when forced by a flag, None otherwise
        verbose: Enable debug logging
        show_help: -h was given; everything else is ignored

    """

    operation: Operation
    duration: str | None = None
    epoch: int | None = None
    precision: int | None = None
    output: str | None = None
    verbose: bool = False
    show_help: bool = False


def parse_epoch(value: str) -> int:
    """Validate an epoch argument.

    Raises:
        InvalidTimestampError: If value is not a base-10 integer.

    """
    if not _INTEGER.fullmatch(value.strip()):
        raise InvalidTimestampError(value)
    return int(value)


def parse_precision(value: str) -> int:
    """Validate a precision argument.

    Raises:
        InvalidPrecisionError: If value is not an integer in [1, 7].

    """
    if not _INTEGER.fullmatch(value.strip()):
        raise InvalidPrecisionError(value)
    precision = int(value)
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise InvalidPrecisionError(value)
    return precision


def _is_flag(token: str) -> bool:
    return token.split("=", 1)[0] in KNOWN_FLAGS


def scan_arguments(args: list[str]) -> Invocation:
    """Classify command-line tokens into an Invocation.

    Args:
        args: Tokens after the program name.

    Returns:
        Validated Invocation.

    Raises:
        MissingTimeValueError: --add/--remove without a following duration.
        InvalidTimestampError: The epoch positional is not an integer.
        InvalidPrecisionError: The precision is not an integer in [1, 7].
        UsageError: Unknown flags, conflicting operations, or too many
            positionals.

    """
    state = _State.ANY
    pending_flag = ""
    operation: Operation | None = None
    duration: str | None = None
    precision_text: str | None = None
    output: str | None = None
    verbose = False
    positionals: list[str] = []

    def set_operation(flag: str) -> None:
        nonlocal operation
        if operation is not None:
            raise UsageError(f"{flag} cannot be combined with {ADD_FLAG} or {REMOVE_FLAG}")
        operation = Operation.ADD if flag == ADD_FLAG else Operation.REMOVE

    def set_precision(flag: str, value: str) -> None:
        nonlocal precision_text
        if precision_text is not None:
            raise UsageError(f"{flag} given more than once")
        precision_text = value

    for token in args:
        if state is _State.DURATION:
            if _is_flag(token):
                raise MissingTimeValueError(pending_flag)
            duration = token
            state = _State.ANY
            continue

        if state is _State.PRECISION:
            if _is_flag(token):
                raise InvalidPrecisionError("")
            set_precision(pending_flag, token)
            state = _State.ANY
            continue

        if token == HELP_FLAG:
            return Invocation(operation=Operation.SHOW_NOW, show_help=True)

        name, has_value, value = token.partition("=")
        if name in (ADD_FLAG, REMOVE_FLAG):
            set_operation(name)
            if has_value:
                if not value.strip():
                    raise MissingTimeValueError(name)
                duration = value
            else:
                pending_flag = name
                state = _State.DURATION
        elif name in PRECISION_FLAGS:
            if has_value:
                set_precision(name, value)
            else:
                pending_flag = name
                state = _State.PRECISION
        elif token == PLAIN_FLAG:
            output = "plain"
        elif token == PRETTY_FLAG:
            output = "pretty"
        elif token in VERBOSE_FLAGS:
            verbose = True
        elif token.startswith("-") and not _INTEGER.fullmatch(token):
            raise UsageError(f"Unknown option: {token}")
        else:
            positionals.append(token)

    if state is _State.DURATION:
        raise MissingTimeValueError(pending_flag)
    if state is _State.PRECISION:
        raise InvalidPrecisionError("")

    if len(positionals) > 2 or (len(positionals) == 2 and precision_text is not None):
        raise UsageError(f"Unexpected argument: {positionals[-1]}")

    epoch = parse_epoch(positionals[0]) if positionals else None
    if len(positionals) == 2:
        precision_text = positionals[1]
    precision = parse_precision(precision_text) if precision_text is not None else None

    if operation is None:
        operation = Operation.CONVERT if epoch is not None else Operation.SHOW_NOW

    return Invocation(
        operation=operation,
        duration=duration,
        epoch=epoch,
        precision=precision,
        output=output,
        verbose=verbose,
    )
