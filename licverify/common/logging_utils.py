"""
Logging setup for the licverify package and its command-line entry point.
"""

from __future__ import annotations

import logging
from typing import TextIO

LOGGER_NAME = "licverify"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    log_level: int,
    logger: logging.Logger | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Route package log records to ``stream`` (stderr by default).

    Module loggers under ``licverify.`` propagate to the package logger, so
    configuring it once covers the whole verification pipeline. Calling this
    again only adjusts the level.

    Args:
        log_level: The logging level to set
        logger: Logger to configure instead of the package logger
        stream: Destination for the handler

    Returns:
        The configured logger
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(log_level)
    return logger
