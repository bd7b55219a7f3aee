"""
Logging configuration for release identity.

Release metadata is usually printed to stdout (JSON or KEY=value lines), so
log records always go to stderr to keep that output clean.
"""

import sys

from loguru import logger

LOG_FORMAT = '<green>{time:YYYY/MM/DD HH:mm:ss}</green> | <level>{level: <8}</level> - <level>{message}</level>'


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Set up logging to stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=LOG_FORMAT,
        colorize=None,
    )
