"""Logging setup shared by the cli, common and engine packages."""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_LOG_LEVEL = 'WARNING'

# Top-level packages whose module loggers share the component handler.
PACKAGE_LOGGERS = ('cli', 'common', 'engine')


def resolve_log_level(log_level: Optional[str] = None) -> int:
    """
    Translate a level name into a logging level.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR). Defaults to the
            LOG_LEVEL env var or WARNING

    Returns:
        Numeric logging level; unknown names fall back to WARNING
    """
    if log_level is None:
        log_level = os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL)
    return getattr(logging, log_level.upper(), logging.WARNING)


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Records go to stderr so that command reports on stdout stay readable.
    Calling this again only adjusts the level.

    Args:
        component_name: Name of the component (e.g., 'cli')
        log_level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or WARNING

    Returns:
        Configured logger instance for the component
    """
    level = resolve_log_level(log_level)

    for name in dict.fromkeys((component_name,) + PACKAGE_LOGGERS):
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if logger.handlers:
            for handler in logger.handlers:
                handler.setLevel(level)
            continue

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    return logging.getLogger(component_name)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
