"""timeago command line interface.

Modes:
- `timeago`: current time as epoch, UTC and local time
- `timeago <EPOCH> [PRECISION]`: relative time for a timestamp
- `timeago --add <TIME> [EPOCH] [PRECISION]`: shift a timestamp forward
- `timeago --remove <TIME> [EPOCH] [PRECISION]`: shift a timestamp back

On a terminal the output is a block of labelled lines. When stdout is piped
only the result is printed, so the command composes in shell scripts:

Example:
    $ timeago --add "2 hours" 1700000000000 | xargs timeago -p 2
"""

import logging

import typer

from epoque.arguments import Invocation, Operation, scan_arguments
from epoque.cli_utils import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    _error,
    _hint,
    _is_interactive,
    _setup_logging,
    console,
)
from epoque.core.arithmetic import shift_timestamp
from epoque.core.clock import format_datetime, now_ms
from epoque.core.config import load_config
from epoque.core.exceptions import ConfigError, DurationError, UsageError
from epoque.core.relative import RelativeTime, format_relative

logger = logging.getLogger(__name__)

HELP_HINT = "Run 'timeago --help' for usage information"

app = typer.Typer(
    name="timeago",
    help="Convert epoch timestamps to human-readable relative time",
    add_completion=False,
    rich_markup_mode="rich",
)


def _print_field(label: str, value: object) -> None:
    console.print(f"{label}: {value}", markup=False)


def _print_calendar(epoch_ms: int) -> None:
    _print_field("UTC", format_datetime(epoch_ms, utc=True))
    _print_field("Local", format_datetime(epoch_ms, utc=False))


def _print_relative(result: RelativeTime, precision: int) -> None:
    _print_field("Precision", precision)
    _print_field("Time until" if result.is_future else "Time ago", result.text)


def _use_pretty_output(output: str) -> bool:
    if output == "pretty":
        return True
    if output == "plain":
        return False
    return _is_interactive()


def _show_now(now: int, pretty: bool) -> None:
    if not pretty:
        console.print(str(now))
        return
    console.print("Current Time:", style="bold")
    _print_field("Epoch", now)
    _print_calendar(now)


def _show_epoch(epoch: int, now: int, precision: int, pretty: bool) -> None:
    result = format_relative(epoch, now, precision)
    if not pretty:
        console.print(result.text)
        return
    _print_field("Epoch", epoch)
    _print_calendar(epoch)
    _print_relative(result, precision)


def _show_shift(invocation: Invocation, now: int, precision: int, pretty: bool) -> None:
    add = invocation.operation is Operation.ADD
    base = invocation.epoch if invocation.epoch is not None else now
    # scan_arguments guarantees a duration for ADD/REMOVE
    delta, shifted = shift_timestamp(base, invocation.duration or "", add=add)

    if not pretty:
        console.print(str(shifted))
        return
    _print_field("Base Timestamp", base)
    _print_field("Time Added" if add else "Time Removed", f"{delta} ms")
    _print_field("New Timestamp", shifted)
    _print_calendar(shifted)
    _print_relative(format_relative(shifted, now, precision), precision)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": ["--help"],
    },
)
def timeago(ctx: typer.Context) -> None:
    """Convert epoch timestamps to human-readable relative time.

    [bold]Usage:[/bold]
      timeago                                      Show the current time
      timeago <EPOCH> [PRECISION]                  Relative time for a timestamp
      timeago --add <TIME> [EPOCH] [PRECISION]     Add time to a timestamp
      timeago --remove <TIME> [EPOCH] [PRECISION]  Remove time from a timestamp

    [bold]Options:[/bold]
      --add <TIME>          Add a duration (base defaults to now)
      --remove <TIME>       Remove a duration (base defaults to now)
      -p, --precision <N>   Number of time units to display (1-7, default: 1)
      --plain / --pretty    Force bare-value or labelled output
      -v, --verbose         Enable debug logging
      -h, --help            Show this message and exit

    [bold]Time formats:[/bold]
      "2 hours", "30 minutes", "1 day 5 hours", "2h 30m", "90s", "1.5 hours"
      "2 hours ago" (the 'ago' is ignored); plain numbers are milliseconds
      Units: years/y, months, weeks/w, days/d, hours/h, minutes/min/m,
      seconds/sec/s, milliseconds/ms

    [bold]Notes:[/bold]
      EPOCH is a Unix timestamp in milliseconds.
      Months are 30 days and years are 365 days.
      When output is piped only the result is printed.
      EPOQUE_PRECISION and EPOQUE_OUTPUT set defaults.
    """
    try:
        invocation = scan_arguments(list(ctx.args))
    except UsageError as e:
        _error(str(e))
        _hint(HELP_HINT)
        raise typer.Exit(code=EXIT_ERROR) from None

    if invocation.show_help:
        # The rich help formatter prints directly and returns an empty string
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
        raise typer.Exit(code=EXIT_SUCCESS)

    _setup_logging(verbose=invocation.verbose)
    logger.debug("Invocation: %s", invocation)

    try:
        config = load_config()
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    pretty = _use_pretty_output(invocation.output or config.output)
    precision = (
        invocation.precision if invocation.precision is not None else config.default_precision
    )
    now = now_ms()

    try:
        if invocation.operation is Operation.SHOW_NOW:
            _show_now(now, pretty)
        elif invocation.operation is Operation.CONVERT:
            # CONVERT always carries an epoch
            _show_epoch(invocation.epoch or 0, now, precision, pretty)
        else:
            _show_shift(invocation, now, precision, pretty)
    except DurationError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None


def main() -> None:
    """Console script entry point."""
    app()
