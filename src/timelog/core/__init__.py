"""Core / service layer — pure domain logic.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
"""

from timelog.core.models import CSV_HEADER, TaskEntry, format_clock, split_elapsed
from timelog.core.protocols import EntrySink
from timelog.core.stopwatch import Stopwatch, StopwatchState
from timelog.core.tracking_service import TrackingService

__all__: list[str] = [
    "CSV_HEADER",
    "EntrySink",
    "Stopwatch",
    "StopwatchState",
    "TaskEntry",
    "TrackingService",
    "format_clock",
    "split_elapsed",
]
