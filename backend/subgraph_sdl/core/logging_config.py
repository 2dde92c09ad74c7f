"""
Logging configuration
"""
import sys
from typing import Optional

from loguru import logger

from .config import get_settings


def configure_logging(level: Optional[str] = None) -> int:
    """
    Route package logs to stderr at the configured level.

    Returns the loguru handler id so callers can remove the sink again.
    """
    settings = get_settings()

    # Remove default logger
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        format=settings.log_format,
        level=(level or settings.log_level).upper(),
        backtrace=True,
        diagnose=False
    )
    logger.enable("subgraph_sdl")

    logger.debug(f"Logging configured at {level or settings.log_level}")
    return handler_id
