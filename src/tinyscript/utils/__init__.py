"""Shared utilities for tinyscript.

- logger: get_logger for logging
"""

from tinyscript.utils.logger import get_logger

__all__ = [
    "get_logger",
]
