"""CSV-file implementation of :class:`~timelog.core.protocols.EntrySink`.

This module is the **only** place in the codebase that touches the log
file.  All ``OSError`` instances are caught here and re-raised as
:class:`~timelog.exceptions.LogWriteError`.

Rules
-----
* Header row is written only when the file is missing or empty.
* An existing file whose last line lacks a newline gets one first.
* Rows are appended, never rewritten.
* Parent directories are never created.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from timelog.core.models import CSV_HEADER, TaskEntry
from timelog.exceptions import LogWriteError

logger = logging.getLogger(__name__)

LOG_FILENAME = "time_log.csv"


def default_log_path() -> Path:
    """Return ``time_log.csv`` inside the current user's home directory.

    Raises
    ------
    LogWriteError
        If the platform cannot resolve a home directory.
    """
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise LogWriteError(
            f"Could not determine the home directory: {exc}",
            hint="Set HOME (or USERPROFILE on Windows), or pass --log-file.",
        ) from exc
    return home / LOG_FILENAME


def _needs_header(path: Path) -> bool:
    try:
        return path.stat().st_size == 0
    except FileNotFoundError:
        return True


def _missing_final_newline(path: Path) -> bool:
    with path.open("rb") as fh:
        fh.seek(-1, 2)
        return fh.read(1) not in (b"\n", b"\r")


class CsvLogWriter:
    """Appends :class:`TaskEntry` rows to a CSV file at *path*.

    This class satisfies the :class:`~timelog.core.protocols.EntrySink`
    protocol structurally — no explicit inheritance required.

    Concurrent runs against the same file are not coordinated.  Append
    mode keeps single writes intact on most local filesystems, but that
    is not guaranteed.
    """

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def append(self, entry: TaskEntry) -> None:
        """Append *entry*, writing the header first for a new file.

        If the existing file does not end in a newline (e.g. it was
        hand-edited), one is written first so the row starts on its
        own line.

        Raises
        ------
        LogWriteError
            When the file cannot be opened or written.
        """
        try:
            write_header = _needs_header(self.path)
            terminate_last_line = not write_header and _missing_final_newline(self.path)
            with self.path.open("a", newline="", encoding="utf-8") as fh:
                if terminate_last_line:
                    logger.debug("Terminating unfinished last line of %s", self.path)
                    fh.write("\n")
                writer = csv.writer(fh, lineterminator="\n")
                if write_header:
                    logger.info("Creating log file %s", self.path)
                    writer.writerow(CSV_HEADER)
                writer.writerow(entry.to_row())
        except OSError as exc:
            raise LogWriteError(
                f"Could not write to {self.path}: {exc.strerror or exc}",
                hint="Check that the directory exists and is writable, or pass --log-file.",
                entry=entry,
            ) from exc
        logger.debug("Appended entry to %s", self.path)
