"""Logging setup.

The screen belongs to the UI, so records are only written when a log file
is configured; otherwise the package logger holds a ``NullHandler``.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOGGER_NAME = "navi"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Path | None, level: int = logging.DEBUG) -> logging.Logger:
    """Attach a file handler to the package logger when ``log_file`` is set."""
    logger = logging.getLogger(LOGGER_NAME)
    if log_file is None:
        return logger
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        logger.warning("cannot open log file %s: %s", log_file, exc)
        return logger
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
