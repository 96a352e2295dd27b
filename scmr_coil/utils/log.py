"""
Logging setup.

Library modules only emit records through ``loguru.logger``; the sink is
configured once by the entry point.
"""

from __future__ import annotations

import os
import sys
from typing import Literal, Optional

from loguru import logger

LogLevel = Literal['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR']

LOG_LEVEL_ENV = "SCMR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}: {message}"


def default_log_level() -> str:
    """Log level from the environment, falling back to WARNING."""
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: Optional[LogLevel] = None, log_file: Optional[str] = None) -> None:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: Log level. Defaults to $SCMR_LOG_LEVEL or WARNING.
        log_file: Optional path that receives the full DEBUG log.
    """
    level = level or default_log_level()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT)
    if log_file:
        logger.add(log_file, level="DEBUG", mode="w", encoding="utf-8")
    logger.debug(f"Logging configured at {level}")
