"""In-memory stopwatch with an explicit ``IDLE → RUNNING → STOPPED`` lifecycle.

The stop instant is written exactly once.  A signal handler and the
main loop may both call :meth:`Stopwatch.stop`; whichever runs first
fixes the elapsed time and every later call returns that same value.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable

from timelog.exceptions import StopwatchStateError

logger = logging.getLogger(__name__)


class StopwatchState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class Stopwatch:
    """Tracks a single start/stop interval.

    Parameters
    ----------
    clock:
        Zero-argument callable returning seconds from a monotonic
        source.  Injectable for deterministic tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._state: StopwatchState = StopwatchState.IDLE
        self._started_at: float | None = None
        self._stopped_at: float | None = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> StopwatchState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is StopwatchState.RUNNING

    @property
    def elapsed(self) -> float:
        """Seconds since start; frozen once stopped, ``0.0`` while idle."""
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return max(end - self._started_at, 0.0)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Record the start instant (``IDLE → RUNNING``)."""
        if self._state is not StopwatchState.IDLE:
            raise StopwatchStateError(
                f"Cannot start a stopwatch that is {self._state.value}.",
            )
        self._started_at = self._clock()
        self._state = StopwatchState.RUNNING
        logger.debug("Stopwatch started")

    def stop(self) -> float:
        """Record the stop instant (``RUNNING → STOPPED``) and return elapsed.

        Repeated calls return the already recorded elapsed time.

        Raises
        ------
        StopwatchStateError
            If the stopwatch was never started.
        """
        if self._state is StopwatchState.IDLE:
            raise StopwatchStateError("Cannot stop a stopwatch that was never started.")
        if self._state is StopwatchState.RUNNING:
            self._stopped_at = self._clock()
            self._state = StopwatchState.STOPPED
            logger.debug("Stopwatch stopped after %.3fs", self.elapsed)
        return self.elapsed
