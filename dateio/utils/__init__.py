"""
Utility modules for DateIO.

This package contains the shared error handling and logging setup used
throughout the library.
"""

from dateio.utils.error_utils import (
    DateIOError,
    error_handler,
    logger,
)

__all__ = [
    "DateIOError",
    "error_handler",
    "logger",
]
