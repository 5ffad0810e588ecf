"""Centralized logging configuration.

Level and record format default to the application settings so every
module logs the same way without repeating the configuration.
"""

import logging
import sys
from typing import Optional

from app.config import settings


def _resolve_level(level: Optional[str]) -> int:
    name = (level or settings.log_level).upper()
    resolved = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it does not know
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
        level: Optional log level override; defaults to ``settings.log_level``

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)
    )
    logger.addHandler(console_handler)
    return logger
