"""Logging setup for the bankqueue front ends.

The library itself stays silent (NullHandler on the ``bankqueue`` logger).
``run.py`` and the HTTP app call configure_from_env(), which reads:

    BANKQUEUE_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    BANKQUEUE_LOG_FILE: Path to a log file (size-rotated)
    BANKQUEUE_LOG_JSON: Set to "1" for one JSON object per line
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

__all__ = [
    "configure_from_env",
    "enable_console_logging",
    "enable_file_logging",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUPS = 5

LOGGER_NAME = "bankqueue"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _attach(handler: logging.Handler, level: str | int, as_json: bool) -> None:
    formatter = JsonFormatter() if as_json else logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT)
    handler.setFormatter(formatter)
    handler.setLevel(_get_level(level))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_get_level(level))
    logger.addHandler(handler)


def enable_console_logging(level: str | int = "INFO", as_json: bool = False) -> logging.StreamHandler:
    """Send bankqueue records to stderr and return the handler."""
    handler = logging.StreamHandler()
    _attach(handler, level, as_json)
    return handler


def enable_file_logging(path: str | Path, level: str | int = "INFO",
                        as_json: bool = False) -> RotatingFileHandler:
    """Append bankqueue records to a size-rotated file and return the handler."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS,
                                  encoding="utf-8")
    _attach(handler, level, as_json)
    return handler


def configure_from_env() -> None:
    """Install a handler from BANKQUEUE_* variables; no-op when none are set."""
    level = os.environ.get("BANKQUEUE_LOGGING", "").upper()
    log_file = os.environ.get("BANKQUEUE_LOG_FILE", "")
    as_json = os.environ.get("BANKQUEUE_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"
    if log_file:
        enable_file_logging(log_file, level=level, as_json=as_json)
    else:
        enable_console_logging(level=level, as_json=as_json)
