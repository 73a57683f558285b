"""
Logging Setup Module

Configures console and file logging for the ``posts_client`` logger tree.
Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached here, once, by the embedding application.
"""

import logging
import sys
from typing import Optional

from .config import LogConfig, config


LOGGER_NAME = "posts_client"


def setup_logging(
    log_level: Optional[str] = None,
    log_to_file: bool = False,
    log_config: Optional[LogConfig] = None
) -> logging.Logger:
    """
    Set up logging for the client.

    Calling this again replaces the handlers installed by a previous call
    instead of stacking duplicates.

    Args:
        log_level: Console log level name (uses ``log_config.log_level`` if None).
        log_to_file: Whether to also write a DEBUG-level log file.
        log_config: Log settings (uses the global config if None).

    Returns:
        The configured package logger.
    """
    log_config = log_config or config.log
    level = getattr(logging, (log_level or log_config.log_level).upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_to_file else level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_to_file:
        log_config.log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            log_config.log_file_path,
            mode='w',
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_config.log_format))
        logger.addHandler(file_handler)

    return logger
