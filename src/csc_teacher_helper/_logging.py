"""Logging configuration for csc-teacher-helper."""

from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
PACKAGE_LOGGER = "csc_teacher_helper"


def setup_logging(
    level: int = logging.WARNING,
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Send package logs to stderr and, optionally, *log_file*.

    httpx request lines are only shown at DEBUG, where they sit next to
    the fetch and cache-hit messages of the client.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for old in package_logger.handlers:
        old.close()
    package_logger.handlers.clear()

    formatter = logging.Formatter(fmt)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(path), encoding="utf-8"))

    http_logger = logging.getLogger("httpx")
    http_logger.setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
    http_logger.handlers.clear()

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        http_logger.addHandler(handler)

    return package_logger
