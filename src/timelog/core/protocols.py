"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete
implementations — so the CSV writer can be swapped out in tests.
"""

from __future__ import annotations

from typing import Protocol

from timelog.core.models import TaskEntry


class EntrySink(Protocol):
    """Contract for anything that persists a finished :class:`TaskEntry`."""

    def append(self, entry: TaskEntry) -> None:
        """Persist *entry* after any previously appended ones.

        Implementations must map storage failures to
        :class:`~timelog.exceptions.LogWriteError`.
        """
        ...  # pragma: no cover
