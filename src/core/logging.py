"""Centralized loguru configuration.

Modules log through `from loguru import logger`; only this module adds or
removes sinks.
"""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"


def configure_logging(level: str = "WARNING") -> int:
    """Replace loguru's default handler with a single stderr sink.

    Returns the handler id so callers (tests) can remove it.
    """

    logger.remove()
    return logger.add(sys.stderr, format=_FORMAT, level=level)
