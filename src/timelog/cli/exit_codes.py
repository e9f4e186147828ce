"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the entry was written to the log."""

GENERAL_ERROR: int = 1
"""A known TimelogError was caught (unreadable input, unwritable log)."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C before tracking started.  POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
