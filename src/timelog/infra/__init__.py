"""Infrastructure layer — filesystem and operating-system integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~timelog.exceptions.TimelogError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from timelog.infra.csv_log import CsvLogWriter, default_log_path
from timelog.infra.signals import StopRequested, default_signals, stop_on_signals

__all__: list[str] = [
    "CsvLogWriter",
    "StopRequested",
    "default_log_path",
    "default_signals",
    "stop_on_signals",
]
