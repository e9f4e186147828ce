"""Custom exception hierarchy for timelog.

All exceptions that cross layer boundaries must inherit from
:class:`TimelogError`.  Raw ``OSError`` instances raised while touching
the filesystem must NEVER propagate beyond the infrastructure layer —
they are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
TimelogError
├── InputError
├── LogWriteError
├── StopwatchStateError
├── ConfigError
└── EnvironmentError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from timelog.core.models import TaskEntry


class TimelogError(Exception):
    """Base exception for all timelog errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InputError(TimelogError):
    """Raised when the task name or code cannot be read interactively."""


# --- Log file --------------------------------------------------------------

class LogWriteError(TimelogError):
    """Raised when the CSV log cannot be opened or written.

    The entry that failed to persist travels with the exception so the
    CLI can echo it instead of losing it.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        entry: TaskEntry | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.entry: TaskEntry | None = entry


# --- Stopwatch -------------------------------------------------------------

class StopwatchStateError(TimelogError):
    """Raised on an illegal stopwatch transition (e.g. stop before start)."""


# --- Configuration / environment -------------------------------------------

class ConfigError(TimelogError):
    """Raised when a ``TIMELOG_*`` environment variable is invalid."""


class EnvironmentError(TimelogError):
    """Raised when a required runtime dependency is not available."""
