"""Domain model for timelog.

:class:`TaskEntry` is a **frozen** dataclass — an immutable value object
created once per run and serialized straight away.  The helpers in this
module are pure: no I/O and no dependencies on external packages.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time

CSV_HEADER: tuple[str, ...] = ("Date", "Time", "Code", "Task", "Hours", "Minutes")
"""Column names of the log file, in order."""

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


# ---------------------------------------------------------------------------
# Duration helpers
# ---------------------------------------------------------------------------

def split_elapsed(seconds: float) -> tuple[int, int]:
    """Decompose *seconds* into whole ``(hours, minutes)``.

    Partial minutes are truncated, never rounded: 125 s is ``(0, 2)``
    and 3660 s is ``(1, 1)``.

    Raises
    ------
    ValueError
        If *seconds* is negative.
    """
    if seconds < 0:
        raise ValueError(f"elapsed seconds must be non-negative, got {seconds}")
    total_minutes = math.floor(seconds / 60)
    return divmod(total_minutes, 60)


def format_clock(seconds: float) -> str:
    """Render *seconds* as ``HH:MM:SS`` for the live display."""
    whole = max(int(seconds), 0)
    hours, rem = divmod(whole, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


# ---------------------------------------------------------------------------
# Log entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TaskEntry:
    """One logged row representing a completed timed task."""

    date: date
    """Local calendar date the run was stopped."""

    time: time
    """Local clock time the run was stopped, to the second."""

    code: str
    """Short identifier the task is booked against."""

    task: str
    """Free-text task description."""

    hours: int
    """Whole hours spent."""

    minutes: int
    """Remaining whole minutes spent (0–59)."""

    @classmethod
    def from_elapsed(
        cls,
        elapsed_seconds: float,
        *,
        code: str,
        task: str,
        at: datetime,
    ) -> TaskEntry:
        """Build an entry stamped with *at* for *elapsed_seconds* of work."""
        hours, minutes = split_elapsed(elapsed_seconds)
        return cls(
            date=at.date(),
            time=at.time().replace(microsecond=0),
            code=code,
            task=task,
            hours=hours,
            minutes=minutes,
        )

    def to_row(self) -> tuple[str, ...]:
        """Return the CSV cells in :data:`CSV_HEADER` order."""
        return (
            self.date.strftime(DATE_FORMAT),
            self.time.strftime(TIME_FORMAT),
            self.code,
            self.task,
            str(self.hours),
            str(self.minutes),
        )
