"""Minimal logging utilities for chainlex.

Provides a get_logger function that wraps the standard library logging
and keeps every logger under the "chainlex." namespace.

Example:
    >>> from chainlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dispatching next token")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "chainlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'chainlex.mymodule'
    """
    if not (name == "chainlex" or name.startswith("chainlex.")):
        name = f"chainlex.{name}"
    return logging.getLogger(name)
