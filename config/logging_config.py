"""
Centralized logging configuration.

Every module gets its logger from here:

    from config.logging_config import get_logger
    logger = get_logger(__name__)

Environment overrides:
    ADVISOR_LOG_LEVEL  - root level for advisor loggers (default: INFO)
    ADVISOR_LOG_FILE   - rotating log file path, "" disables file logging
"""
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("ADVISOR_LOG_LEVEL") or LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def _build_file_handler(log_file: str) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logger(
    name: str = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Get or create a configured logger.

    Console output is INFO and above; the rotating file receives DEBUG.

    Args:
        name: Logger name. If None, uses 'advisor'.
        level: Level name overriding ADVISOR_LOG_LEVEL.
        log_file: File path overriding ADVISOR_LOG_FILE / LOG_FILE.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'advisor')

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(level))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    if log_file is None:
        log_file = os.getenv("ADVISOR_LOG_FILE", LOG_FILE)
    if log_file:
        logger.addHandler(_build_file_handler(log_file))

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Alias for setup_logger."""
    return setup_logger(name)


logger = setup_logger('advisor')
