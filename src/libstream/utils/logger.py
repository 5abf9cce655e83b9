"""Minimal logging utilities for libstream.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from libstream.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Stream config changed")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "libstream." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'libstream.mymodule'
    """
    if not (name == "libstream" or name.startswith("libstream.")):
        name = f"libstream.{name}"
    return logging.getLogger(name)
