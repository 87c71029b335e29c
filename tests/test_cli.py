"""Tests for the timeago command.

Integration tests using CliRunner. The clock is pinned with a patch on
epoque.cli.now_ms and the TTY probe with a patch on epoque.cli._is_interactive.
"""

import re
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from epoque.cli import app
from epoque.core.units import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR

runner = CliRunner()

FIXED_NOW = 1_700_000_000_000
DATETIME = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"


@pytest.fixture(autouse=True)
def fixed_clock() -> Iterator[MagicMock]:
    """Pin the wall clock for every CLI invocation."""
    with patch("epoque.cli.now_ms", return_value=FIXED_NOW) as mock_now:
        yield mock_now


@pytest.fixture
def tty() -> Iterator[MagicMock]:
    """Pretend stdout is an interactive terminal."""
    with patch("epoque.cli._is_interactive", return_value=True) as mock_tty:
        yield mock_tty


# =============================================================================
# Help
# =============================================================================


class TestHelp:
    """Tests for -h/--help."""

    @pytest.mark.parametrize("flag", ["--help", "-h"])
    def test_help(self, flag: str) -> None:
        result = runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert "--add" in result.output
        assert "--remove" in result.output
        assert "precision" in result.output.lower()

    def test_help_after_other_arguments(self) -> None:
        result = runner.invoke(app, ["1700000000000", "-h"])

        assert result.exit_code == 0
        assert "--remove" in result.output


# =============================================================================
# Current time
# =============================================================================


class TestShowNow:
    """No arguments: current time."""

    def test_labelled(self, tty: MagicMock) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Current Time:" in result.output
        assert f"Epoch: {FIXED_NOW}" in result.output
        assert "UTC: 2023-11-14 22:13:20" in result.output
        assert re.search(rf"Local: {DATETIME}", result.output)

    def test_piped(self) -> None:
        with patch("epoque.cli._is_interactive", return_value=False):
            result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert result.output.strip() == str(FIXED_NOW)


# =============================================================================
# Epoch conversion
# =============================================================================


class TestConvert:
    """timeago <EPOCH> [PRECISION]."""

    def test_past_default_precision(self, tty: MagicMock) -> None:
        result = runner.invoke(app, [str(FIXED_NOW - 7_200_000)])

        assert result.exit_code == 0
        assert f"Epoch: {FIXED_NOW - 7_200_000}" in result.output
        assert re.search(rf"UTC: {DATETIME}", result.output)
        assert "Precision: 1" in result.output
        assert "Time ago: 2 hours ago" in result.output

    def test_precision_three(self, tty: MagicMock) -> None:
        past = FIXED_NOW - (2 * 3_600_000 + 30 * 60_000 + 45_000)

        result = runner.invoke(app, [str(past), "3"])

        assert result.exit_code == 0
        assert "Precision: 3" in result.output
        assert "Time ago: 2 hours 30 minutes 45 seconds ago" in result.output

    def test_precision_flag(self, tty: MagicMock) -> None:
        past = FIXED_NOW - (2 * 3_600_000 + 30 * 60_000)

        result = runner.invoke(app, ["-p", "2", str(past)])

        assert result.exit_code == 0
        assert "Time ago: 2 hours 30 minutes ago" in result.output

    def test_future(self, tty: MagicMock) -> None:
        result = runner.invoke(app, [str(FIXED_NOW + 3 * 3_600_000)])

        assert result.exit_code == 0
        assert "Time until: in 3 hours" in result.output

    def test_now_is_just_now(self, tty: MagicMock) -> None:
        result = runner.invoke(app, [str(FIXED_NOW)])

        assert "Time ago: just now" in result.output

    def test_negative_epoch(self, tty: MagicMock) -> None:
        result = runner.invoke(app, ["-1000"])

        assert result.exit_code == 0
        assert "UTC: 1969-12-31 23:59:59" in result.output

    def test_piped_prints_phrase(self) -> None:
        result = runner.invoke(app, [str(FIXED_NOW - 7_200_000)])

        assert result.exit_code == 0
        assert result.output.strip() == "2 hours ago"

    def test_invalid_epoch(self) -> None:
        result = runner.invoke(app, ["invalid"])

        assert result.exit_code == 1
        assert 'Invalid epoch timestamp "invalid"' in result.output
        assert "--help" in result.output

    @pytest.mark.parametrize("precision", ["invalid", "0", "8"])
    def test_invalid_precision(self, precision: str) -> None:
        result = runner.invoke(app, [str(FIXED_NOW), precision])

        assert result.exit_code == 1
        assert "Invalid precision" in result.output


# =============================================================================
# --add / --remove
# =============================================================================


class TestAdd:
    """timeago --add <TIME> [EPOCH] [PRECISION]."""

    def test_current_time(self, tty: MagicMock) -> None:
        result = runner.invoke(app, ["--add", "2 hours"])

        assert result.exit_code == 0
        assert f"Base Timestamp: {FIXED_NOW}" in result.output
        assert "Time Added: 7200000 ms" in result.output
        assert f"New Timestamp: {FIXED_NOW + 7_200_000}" in result.output
        assert "Time until: in 2 hours" in result.output

    def test_specific_timestamp(self, tty: MagicMock) -> None:
        base = FIXED_NOW - 86_400_000

        result = runner.invoke(app, ["--add", "2 hours", str(base)])

        assert result.exit_code == 0
        assert f"Base Timestamp: {base}" in result.output
        assert f"New Timestamp: {base + 7_200_000}" in result.output
        assert "Time ago: 22 hours ago" in result.output

    @pytest.mark.parametrize(
        ("duration", "delta"),
        [
            ("7200000", 7_200_000),
            ("1 day 5 hours 30 minutes", 108_000_000),
            ("2h 30m", 9_000_000),
            ("2 hours ago", 7_200_000),
        ],
    )
    def test_duration_formats(self, tty: MagicMock, duration: str, delta: int) -> None:
        result = runner.invoke(app, ["--add", duration, "1700000000000"])

        assert result.exit_code == 0
        assert f"Time Added: {delta} ms" in result.output
        assert f"New Timestamp: {1_700_000_000_000 + delta}" in result.output

    def test_with_precision(self, tty: MagicMock) -> None:
        base = FIXED_NOW - 5 * 3_600_000

        result = runner.invoke(app, ["--add", "2 hours 30 minutes 45 seconds", str(base), "3"])

        assert result.exit_code == 0
        assert "Precision: 3" in result.output
        assert "Time ago: 2 hours 29 minutes 15 seconds ago" in result.output

    def test_piped_prints_new_epoch(self) -> None:
        result = runner.invoke(app, ["--add", "2 hours", "1700000000000"])

        assert result.exit_code == 0
        assert result.output.strip() == "1700007200000"

    def test_missing_value(self) -> None:
        result = runner.invoke(app, ["--add"])

        assert result.exit_code == 1
        assert "--add requires a time value" in result.output

    def test_unparseable(self) -> None:
        result = runner.invoke(app, ["--add", "invalid"])

        assert result.exit_code == 1
        assert "Unable to parse time string: invalid" in result.output

    def test_unknown_unit(self) -> None:
        result = runner.invoke(app, ["--add", "5 fortnights"])

        assert result.exit_code == 1
        assert "Unknown time unit: fortnights" in result.output


class TestRemove:
    """timeago --remove <TIME> [EPOCH] [PRECISION]."""

    def test_specific_timestamp(self, tty: MagicMock) -> None:
        result = runner.invoke(app, ["--remove", "30 minutes", "1700000000000"])

        assert result.exit_code == 0
        assert "Time Removed: 1800000 ms" in result.output
        assert "New Timestamp: 1699998200000" in result.output
        assert "Time ago: 30 minutes ago" in result.output

    def test_equals_form_any_order(self) -> None:
        result = runner.invoke(app, ["1700000000000", "--remove=1d"])

        assert result.exit_code == 0
        assert result.output.strip() == str(1_700_000_000_000 - 86_400_000)

    def test_dash_led_duration_is_not_help(self) -> None:
        result = runner.invoke(app, ["--remove", "-5h", "1700000000000"])

        assert result.exit_code == 0
        assert result.output.strip() == "1699982000000"

    def test_missing_value(self) -> None:
        result = runner.invoke(app, ["--remove"])

        assert result.exit_code == 1
        assert "--remove requires a time value" in result.output


# =============================================================================
# Output selection and configuration
# =============================================================================


class TestOutputSelection:
    """--plain/--pretty and EPOQUE_* defaults."""

    def test_pretty_flag_overrides_pipe(self) -> None:
        result = runner.invoke(app, ["--pretty", "1700000000000"])

        assert "Epoch: 1700000000000" in result.output

    def test_plain_flag_overrides_tty(self, tty: MagicMock) -> None:
        result = runner.invoke(app, ["--plain"])

        assert result.output.strip() == str(FIXED_NOW)

    def test_env_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EPOQUE_OUTPUT", "pretty")

        result = runner.invoke(app, [])

        assert "Current Time:" in result.output

    def test_env_precision(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EPOQUE_PRECISION", "2")
        past = FIXED_NOW - (3_600_000 + 60_000)

        result = runner.invoke(app, [str(past)])

        assert result.output.strip() == "1 hour 1 minute ago"

    def test_argument_precision_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EPOQUE_PRECISION", "2")
        past = FIXED_NOW - (3_600_000 + 60_000)

        result = runner.invoke(app, [str(past), "1"])

        assert result.output.strip() == "1 hour ago"

    def test_invalid_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EPOQUE_PRECISION", "nine")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "EPOQUE_PRECISION" in result.output

    def test_unknown_option(self) -> None:
        result = runner.invoke(app, ["--frobnicate"])

        assert result.exit_code == 1
        assert "Unknown option: --frobnicate" in result.output


# =============================================================================
# Long output lines
# =============================================================================

LONG_DELTA = (
    10_000 * YEAR + 11 * MONTH + 29 * DAY + 23 * HOUR + 59 * MINUTE + 59 * SECOND + 999
)
LONG_PHRASE = (
    "10000 years 11 months 29 days 23 hours 59 minutes 59 seconds 999 milliseconds ago"
)


class TestLongLines:
    """Values wider than the terminal stay on one line."""

    def test_plain_phrase(self) -> None:
        result = runner.invoke(app, [str(FIXED_NOW - LONG_DELTA), "7"])

        assert result.exit_code == 0
        assert result.output == LONG_PHRASE + "\n"

    def test_pretty_phrase(self) -> None:
        result = runner.invoke(app, ["--pretty", str(FIXED_NOW - LONG_DELTA), "7"])

        assert result.exit_code == 0
        assert f"Time ago: {LONG_PHRASE}" in result.output.splitlines()
