"""Utility modules for libstream.

Provides:
- logger: get_logger for logging
"""

from libstream.utils.logger import get_logger

__all__ = [
    "get_logger",
]
