"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands are resilient when UI packages
are missing, and that tracking fails cleanly only when a UI path is
actually exercised.
"""

from __future__ import annotations

import sys

import pytest

from timelog.cli import exit_codes
from timelog.cli.app import cli, main
from timelog.cli.console import console
from timelog.cli.prompts import resolve_task_inputs
from timelog.cli.ticker import ElapsedTicker
from timelog.core.stopwatch import Stopwatch
from timelog.exceptions import EnvironmentError, LogWriteError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.live", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_flags_skip_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_questionary(monkeypatch)

    assert resolve_task_inputs("T", "C") == ("T", "C")


def test_prompt_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        resolve_task_inputs(None, "C")


def test_ticker_errors_cleanly_when_rich_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        ElapsedTicker(Stopwatch(), "T", "C")


def test_console_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("hello", "world")
    assert capsys.readouterr().err == "hello world\n"


def test_error_boundary_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    def _main() -> int:
        raise LogWriteError("Could not write", hint="Check permissions")

    monkeypatch.setattr("timelog.cli.app.main", _main)
    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "Could not write" in capsys.readouterr().err
