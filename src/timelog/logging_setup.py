"""Diagnostic logging configuration.

User-facing output goes through the Rich console in :mod:`timelog.cli`;
this module only wires the stdlib ``logging`` tree used for debugging
(``--verbose`` or ``TIMELOG_LOG_LEVEL``).
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the ``timelog`` logger with a single stderr handler.

    Safe to call more than once: previously installed handlers are
    replaced rather than duplicated.
    """
    logger = logging.getLogger("timelog")
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
