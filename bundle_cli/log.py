"""Logging setup."""

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def configure_logging(level: str = "INFO") -> None:
    """Send log records at or above level to stderr, never stdout."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
