"""Minimal logging utilities for aplex.

Example:
    >>> from aplex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Tokenizing %d characters", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger under the "aplex." namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("brackets").name
        'aplex.brackets'
    """
    if not (name == "aplex" or name.startswith("aplex.")):
        name = f"aplex.{name}"
    return logging.getLogger(name)
