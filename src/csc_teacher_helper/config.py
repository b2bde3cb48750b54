"""Environment configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

SESSION_ID_VAR = "CSC_SESSION_ID"
ME_VAR = "CSC_ME"
LOG_LEVEL_VAR = "CSC_LOG_LEVEL"
LOG_FILE_VAR = "CSC_LOG_FILE"


class ConfigError(Exception):
    """Required configuration is missing or invalid."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings."""

    session_id: str
    me: str
    log_level: int = logging.WARNING
    log_file: str | None = None


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name, "")
    if not value.strip():
        raise ConfigError(f"Environment variable {name} is not set")
    return value


def _parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"{LOG_LEVEL_VAR}: unknown log level {name!r}")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from *environ* (default ``os.environ``)."""
    if environ is None:
        environ = os.environ

    session_id = _require(environ, SESSION_ID_VAR)
    me = _require(environ, ME_VAR)
    log_level = _parse_log_level(environ.get(LOG_LEVEL_VAR, "") or "WARNING")
    log_file = environ.get(LOG_FILE_VAR) or None

    return Settings(session_id=session_id, me=me, log_level=log_level, log_file=log_file)
