"""
Shared helpers for the command-line and benchmark layers.
"""
from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(logger_name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Set up a logger writing to stderr with consistent formatting.

    stdout is reserved for encoded output, so the handler never writes there.

    Args:
        logger_name: Name of the logger
        level: Logging level name or number

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
