"""Settings loaded from ``TIMELOG_*`` environment variables.

Command-line flags override these values; these override the built-in
defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from timelog.exceptions import ConfigError

ENV_PREFIX = "TIMELOG"

DEFAULT_REFRESH_INTERVAL: float = 1.0
DEFAULT_LOG_LEVEL: str = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"{name} must be a number, got {raw!r}.",
        ) from exc
    if value <= 0:
        raise ConfigError(
            f"{name} must be greater than zero, got {raw!r}.",
        )
    return value


def _env_log_level(name: str, default: str) -> int:
    raw = _env(name, default).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise ConfigError(
            f"{name} must be a logging level name, got {raw!r}.",
            hint="Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
        )
    return level


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime configuration for a single timelog run."""

    log_file: Path | None
    """Explicit log path, or ``None`` to use the home-directory default."""

    refresh_interval: float
    """Seconds between live elapsed-time refreshes."""

    log_level: int
    """Diagnostic logging level for :mod:`timelog.logging_setup`."""

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            log_file=_env_path(_k("FILE")),
            refresh_interval=_env_positive_float(
                _k("REFRESH_INTERVAL"), DEFAULT_REFRESH_INTERVAL,
            ),
            log_level=_env_log_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
        )
