"""timelog — command-line stopwatch that logs time spent on tasks.

Each run times one task and appends a row to a CSV log on interruption.
"""

from timelog.version import __version__

__all__: list[str] = ["__version__"]
