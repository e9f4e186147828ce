"""Live elapsed-time display driven by a :class:`Stopwatch`.

Design
------
* :class:`ElapsedTicker` owns a Rich :class:`~rich.live.Live` region
  on stderr and redraws a single status line once per tick.
* The loop has no exit condition of its own: it ends when the signal
  handler raises :class:`~timelog.infra.signals.StopRequested` out of
  the sleep.
* ``sleep`` is injectable so tests can end the loop deterministically.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from timelog.cli.console import get_rich_console
from timelog.core.models import format_clock
from timelog.core.stopwatch import Stopwatch
from timelog.exceptions import EnvironmentError


class ElapsedTicker:
    """Redraws ``Tracking task … Elapsed: HH:MM:SS`` every *interval* seconds.

    Usage::

        with stop_on_signals(stopwatch):
            stopwatch.start()
            try:
                ElapsedTicker(stopwatch, task, code).run()
            except StopRequested:
                pass
    """

    def __init__(
        self,
        stopwatch: Stopwatch,
        task: str,
        code: str,
        *,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        try:
            from rich.live import Live
            from rich.text import Text
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._text_class: Any = Text
        self._live: Any = Live(
            self._text_class(""),
            console=get_rich_console(),
            auto_refresh=False,
            transient=False,
        )
        self._stopwatch = stopwatch
        self._task = task
        self._code = code
        self._interval = interval
        self._sleep = sleep

    def render(self) -> str:
        """Return the current status line."""
        return (
            f"Tracking task '{self._task}' with code '{self._code}'. "
            f"Elapsed: {format_clock(self._stopwatch.elapsed)}"
        )

    def _refresh(self) -> None:
        self._live.update(self._text_class(self.render()), refresh=True)

    def run(self) -> None:
        """Redraw until an exception (normally ``StopRequested``) escapes."""
        with self._live:
            try:
                while True:
                    self._refresh()
                    self._sleep(self._interval)
            finally:
                self._refresh()
