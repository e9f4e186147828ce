"""Infrastructure: turning termination signals into a stopwatch stop.

The handler is the only asynchronous entry point in the program.  It
stops the stopwatch itself, so the stop instant is taken at the moment
the signal is handled, then raises :class:`StopRequested` in the main
thread to break out of the display loop.

Rules
-----
* First delivery while running: stop and raise.
* Every later delivery inside the context: ignored, so the log write
  is not interrupted.
* Previous handlers are restored on exit.
"""

from __future__ import annotations

import contextlib
import logging
import signal
from collections.abc import Iterator, Sequence
from types import FrameType
from typing import Any

from timelog.core.stopwatch import Stopwatch

logger = logging.getLogger(__name__)


class StopRequested(BaseException):
    """Raised from the signal handler to end the tracking loop.

    Derives from :class:`BaseException` (like ``KeyboardInterrupt``) so
    generic ``except Exception`` blocks do not swallow it.
    """

    def __init__(self, signum: int) -> None:
        super().__init__(signum)
        self.signum: int = signum


def default_signals() -> tuple[signal.Signals, ...]:
    """Return the stop signals available on this platform."""
    names = ("SIGINT", "SIGTERM")
    return tuple(getattr(signal, name) for name in names if hasattr(signal, name))


@contextlib.contextmanager
def stop_on_signals(
    stopwatch: Stopwatch,
    signals: Sequence[int] | None = None,
) -> Iterator[None]:
    """Route *signals* to *stopwatch* for the duration of the block.

    Must be entered from the main thread.
    """
    if signals is None:
        signals = default_signals()

    def _handler(signum: int, _frame: FrameType | None) -> None:
        if not stopwatch.is_running:
            logger.debug("Ignoring signal %d during shutdown", signum)
            return
        stopwatch.stop()
        logger.debug("Signal %d received, stopwatch stopped", signum)
        raise StopRequested(signum)

    previous: dict[int, Any] = {}
    try:
        for signum in signals:
            previous[signum] = signal.signal(signum, _handler)
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
