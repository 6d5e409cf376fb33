"""Utility modules for kbdplus.

Provides:
- logger: get_logger for logging
"""

from kbdplus.utils.logger import get_logger

__all__ = [
    "get_logger",
]
