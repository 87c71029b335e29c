"""Shared CLI helpers: exit codes, consoles, logging setup, TTY probe."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

EXIT_SUCCESS = 0
EXIT_ERROR = 1

# Shared consoles for output; soft_wrap keeps each value on one line
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging to stderr through rich.

    Args:
        verbose: Log at DEBUG level.
        quiet: Log only errors.

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logging.getLogger().setLevel(level)


def _is_interactive() -> bool:
    """Return True when stdout is attached to a terminal."""
    return sys.stdout.isatty()


def _error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def _hint(message: str) -> None:
    """Print a dimmed follow-up line to stderr."""
    err_console.print(f"[dim]{escape(message)}[/dim]")
