"""Logging configuration for the planner service.

All loggers hang off the ``degreeplanner`` root so a single call to
:func:`setup_logging` controls the whole package.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "degreeplanner"
DEFAULT_LOG_FILE = "degreeplanner.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``degreeplanner`` logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Unknown names
               fall back to INFO.
        log_dir: Directory for a rotating log file. No file is written when
                 this is None.
        log_file: Log file name inside ``log_dir``.
        console: Whether to also log to stderr.

    Returns:
        The package root logger.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)

    # Repeated calls (tests, reloads) must not stack handlers
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / log_file,
            maxBytes=DEFAULT_MAX_BYTES,
            backupCount=DEFAULT_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.info("Logging initialized (level=%s, dir=%s)", level, log_dir)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``services.scheduler``."""
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
