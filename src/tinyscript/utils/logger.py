"""Minimal logging utilities for tinyscript.

Example:
    >>> from tinyscript.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Lexing source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the "tinyscript." namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'tinyscript.mymodule'
    """
    if not (name == "tinyscript" or name.startswith("tinyscript.")):
        name = f"tinyscript.{name}"
    return logging.getLogger(name)
