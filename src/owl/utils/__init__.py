"""Utility modules for Owl.

Provides:
- logger: get_logger for logging, level_for for verbosity mapping
"""

from owl.utils.logger import get_logger, level_for

__all__ = [
    "get_logger",
    "level_for",
]
