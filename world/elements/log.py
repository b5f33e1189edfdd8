"""
Logging for the element system.

Hosts call log() the same way for every level; records go to the
stdlib "world.elements" logger so the game's logging setup decides
where they end up.
"""

import logging
from typing import Dict, Optional

LOGGER_NAME = "world.elements"

# Finer than DEBUG, for per-lookup noise
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LEVELS: Dict[str, int] = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

logger = logging.getLogger(LOGGER_NAME)


def log(level: str, message: str, error: Optional[BaseException] = None) -> None:
    """
    Emit a message at the named level.

    Args:
        level: One of "error", "warn", "info", "debug", "trace" (case-insensitive)
        message: Log message
        error: Exception to attach, if any

    Unknown levels are dropped.
    """
    numeric = LEVELS.get(level.lower()) if isinstance(level, str) else None
    if numeric is None:
        return
    if error is not None:
        logger.log(numeric, message, exc_info=(type(error), error, error.__traceback__))
    else:
        logger.log(numeric, message)
