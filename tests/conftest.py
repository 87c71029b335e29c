"""Pytest configuration and fixtures for epoque tests."""

import pytest

# Fixed reference time: 2023-11-14 22:13:20 UTC
FIXED_NOW = 1_700_000_000_000


@pytest.fixture(autouse=True)
def clear_epoque_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's EPOQUE_* variables out of every test."""
    monkeypatch.delenv("EPOQUE_PRECISION", raising=False)
    monkeypatch.delenv("EPOQUE_OUTPUT", raising=False)


@pytest.fixture
def now() -> int:
    """Deterministic reference timestamp in epoch milliseconds."""
    return FIXED_NOW
