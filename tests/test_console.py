"""Tests for terminal output helpers (cli/console.py).

Output is captured from stderr; Rich writes plain text there because
the captured stream is not a terminal.
"""

from __future__ import annotations

import sys

import pytest

from timelog.cli.console import console, escape, get_rich_console


class TestEscape:
    def test_brackets_escaped(self) -> None:
        assert escape("[/bad]") == "\\[/bad]"

    def test_plain_text_unchanged(self) -> None:
        assert escape("/home/me/time_log.csv") == "/home/me/time_log.csv"

    def test_without_rich_returns_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.markup", None)
        assert escape("[/bad]") == "[/bad]"


class TestPrint:
    def test_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print("hello")
        captured = capsys.readouterr()
        assert captured.err == "hello\n"
        assert captured.out == ""

    def test_markup_rendered(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print("[bold]Done[/bold]")
        assert capsys.readouterr().err == "Done\n"

    def test_markup_off_keeps_brackets(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print("task [x] [/y]", markup=False)
        assert capsys.readouterr().err == "task [x] [/y]\n"


class TestPrintError:
    def test_message_and_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print_error("Could not write", hint="Pass --log-file")
        assert capsys.readouterr().err == "Error: Could not write\nHint: Pass --log-file\n"

    def test_no_hint_line_when_absent(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print_error("Input cancelled.")
        assert capsys.readouterr().err == "Error: Input cancelled.\n"

    def test_user_text_not_parsed_as_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console.print_error("/tmp/[/bad]/x.csv", hint="[red]literal[/red]")
        err = capsys.readouterr().err
        assert "/tmp/[/bad]/x.csv" in err
        assert "[red]literal[/red]" in err

    def test_plain_fallback_without_rich(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        console.print_error("[/bad]", hint="h")
        assert capsys.readouterr().err == "Error: [/bad]\nHint: h\n"


def test_rich_console_targets_stderr() -> None:
    assert get_rich_console().stderr is True
