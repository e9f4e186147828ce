"""Core tracking service — turns a stopped duration into a logged entry.

The service delegates persistence to an
:class:`~timelog.core.protocols.EntrySink` injected at construction
time.  It is responsible for:

* Stamping the entry with the local date and time.
* Delegating to the sink.
* Ensuring only :class:`~timelog.exceptions.TimelogError` subclasses
  escape.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from timelog.core.models import TaskEntry
from timelog.core.protocols import EntrySink
from timelog.exceptions import LogWriteError, TimelogError


class TrackingService:
    """Stateless service that records one finished task.

    Parameters
    ----------
    sink:
        Any object satisfying the :class:`EntrySink` protocol.
    now:
        Zero-argument callable returning the current local time.
    """

    def __init__(
        self,
        sink: EntrySink,
        *,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._sink: EntrySink = sink
        self._now = now

    def record(self, elapsed_seconds: float, *, task: str, code: str) -> TaskEntry:
        """Build the entry for *elapsed_seconds* and persist it.

        Returns
        -------
        TaskEntry
            The entry that was written.

        Raises
        ------
        LogWriteError
            When the sink fails for any reason.
        """
        entry = TaskEntry.from_elapsed(
            elapsed_seconds,
            code=code,
            task=task,
            at=self._now(),
        )
        try:
            self._sink.append(entry)
        except TimelogError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise LogWriteError(
                f"Unexpected error while writing the log: {exc}",
                entry=entry,
            ) from exc
        return entry
