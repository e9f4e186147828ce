"""Terminal output for the CLI layer.

Everything timelog shows the user goes to stderr through the
:data:`console` proxy, keeping stdout free.  Rich is imported lazily so
``--help``, ``--version`` and the error boundary keep working when it
is missing; output then degrades to plain ``print``.

Task names, codes, paths and exception text come from the user or the
OS.  They must never be parsed as Rich markup: pass ``markup=False``
or run them through :func:`escape` before mixing them with tags.
"""

from __future__ import annotations

import sys
from typing import Any

from timelog.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console on stderr with syntax highlighting off."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False)


def escape(text: str) -> str:
    """Escape Rich markup in *text* so brackets print literally.

    Without Rich nothing interprets markup, so *text* is returned as is.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """stderr writer that renders through Rich when it is installed."""

    def print(self, *objects: object, markup: bool = True) -> None:
        """Print *objects*; ``markup=False`` shows brackets verbatim."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup)

    def print_error(self, message: str, *, hint: str | None = None) -> None:
        """Print a labelled error line and an optional hint line.

        *message* and *hint* are escaped, so a path such as
        ``/tmp/[/x]/log.csv`` is shown literally.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(f"Error: {message}", file=sys.stderr)
            if hint:
                print(f"Hint: {hint}", file=sys.stderr)
            return
        rich_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
        if hint:
            rich_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


console = _ConsoleProxy()
