"""Minimal logging utilities for Owl.

Provides a get_logger function that wraps the standard library logging,
and the mapping from Owl verbosity levels to logging levels.

Example:
    >>> from owl.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Scanning document")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from owl.config import Verbosity


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "owl." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'owl.mymodule'
    """
    if not (name == "owl" or name.startswith("owl.")):
        name = f"owl.{name}"
    return logging.getLogger(name)


def level_for(verbosity: Verbosity) -> int:
    """Return the logging level that shows messages up to ``verbosity``."""
    from owl.config import Verbosity

    return {
        Verbosity.ERROR_ONLY: logging.ERROR,
        Verbosity.BASIC: logging.INFO,
        Verbosity.DEBUG: logging.DEBUG,
    }[verbosity]
