"""StudyMate log file.

Everything is written to ``studymate.log`` in the platform log directory.
The level comes from ``logging.level`` in config.json, and the
``STUDYMATE_LOG_LEVEL`` environment variable overrides it.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

LOG_LEVEL_ENV = "STUDYMATE_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

_MAX_BYTES = 1024 * 1024
_BACKUP_COUNT = 2
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_logger: logging.Logger | None = None


def log_file() -> Path:
    """Path of the active log file."""
    return Path(user_log_dir("studymate")) / "studymate.log"


def parse_level(level: str | int) -> int:
    """Numeric level for a name such as ``"debug"``.

    Raises:
        ValueError: for an unknown level name
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def set_level(level: str | int) -> None:
    """Apply a configured level unless the environment overrides it."""
    if os.environ.get(LOG_LEVEL_ENV):
        return
    get_logger().setLevel(parse_level(level))


def get_logger() -> logging.Logger:
    """The ``studymate`` logger, created with its file handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    path = log_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger = logging.getLogger("studymate")
    logger.handlers = [handler]
    logger.propagate = False
    try:
        logger.setLevel(parse_level(os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LEVEL))
    except ValueError:
        logger.setLevel(DEFAULT_LEVEL)
        logger.warning("ignoring %s: unknown level", LOG_LEVEL_ENV)

    _logger = logger
    return _logger
