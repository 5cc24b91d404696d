"""
Logging Utility

Centralized logging configuration for the backup apps. Output goes to stdout
in a single human-readable line format.

Usage:
    from utils.logging import get_logger, setup_logging

    setup_logging(settings.LOG_LEVEL)
    logger = get_logger(__name__)
    logger.info("Backup started: org=%s", org)
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logging(level: str = "INFO") -> None:
    """Configure application-wide logging.

    Unknown level names fall back to INFO.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
