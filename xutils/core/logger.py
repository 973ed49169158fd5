"""
Logging configuration module.

This module provides opt-in logging setup for the library. Nothing is
configured on import; applications call setup_logger() when they want
xutils diagnostics (e.g. failed date parse attempts) on console or file.
"""

import logging
from pathlib import Path
from typing import Optional, Union
from xutils.config.settings import Settings


def setup_logger(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return the "xutils" package logger.

    Sets up console output and, when a log file is given (or configured via
    XUTILS_LOG_FILE), UTF-8 file output, both using the same formatter.

    Args:
        level: Logging level name or number (default: Settings.LOG_LEVEL)
        log_file: Optional path for file logging (default: Settings.LOG_FILE)

    Returns:
        The configured "xutils" logger

    Example:
        >>> setup_logger("DEBUG")
        >>> to_datetime("not a date")
        2025-11-11 14:30:00 - xutils.services.date_service - DEBUG - ...

    Note:
        - Existing handlers on the "xutils" logger are cleared to avoid duplicates
        - Propagation to the root logger is disabled once handlers are attached
    """
    level = level if level is not None else Settings.LOG_LEVEL
    log_file = log_file if log_file is not None else Settings.LOG_FILE

    logger = logging.getLogger('xutils')

    # Clear any existing handlers to prevent duplicates on re-initialization
    logger.handlers.clear()

    # Create formatter with timestamp, logger name, level, and message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Handler for console output
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Handler for file output (UTF-8 encoding for localized month names)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False

    # Reduce verbosity of third-party libraries
    logging.getLogger('babel').setLevel(logging.WARNING)

    return logger
