"""
Logging setup for QuickLang.

Modules log through ``logging.getLogger(__name__)``; this configures the
``quicklang`` logger once at startup.
"""

import logging
import sys


LOGGER_NAME = "quicklang"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Set up and return the application logger.

    Args:
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if _configured:
        return logger

    # Prevent duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    _configured = True
    logger.debug("Logger initialized at level %s", logging.getLevelName(level))
    return logger
