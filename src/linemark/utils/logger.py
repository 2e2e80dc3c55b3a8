"""Logging helper for linemark.

Example:
    >>> from linemark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Splitting list block")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``linemark``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("lexer").name
        'linemark.lexer'
    """
    if not (name == "linemark" or name.startswith("linemark.")):
        name = f"linemark.{name}"
    return logging.getLogger(name)
