"""Shared pytest fixtures and configuration for the timelog test suite.

Guidelines
----------
* No real terminal interaction — questionary and the ticker are mocked.
* Log files live under ``tmp_path``; the real home directory is never
  written.
* Clocks are faked so durations are deterministic.
"""

from __future__ import annotations

from pathlib import Path

import pytest


class FakeClock:
    """Manually advanced stand-in for :func:`time.monotonic`."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "time_log.csv"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``TIMELOG_*`` variables from the developer's shell out of tests."""
    for name in ("TIMELOG_FILE", "TIMELOG_REFRESH_INTERVAL", "TIMELOG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
