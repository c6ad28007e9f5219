"""
Error handling utilities for DateIO.

This module provides centralized error handling and logging for the date
abstraction layer. It includes the package exception class and a decorator
for consistent error reporting across engine-facing operations.
"""

import os
import traceback
import logging
from functools import wraps
import sys
from datetime import datetime

# Configure logging — file handler only when a log path is configured
_handlers = [logging.StreamHandler(sys.stdout)]
if os.getenv("DATEIO_LOG_FILE"):
    _handlers.append(logging.FileHandler(os.getenv("DATEIO_LOG_FILE")))

logging.basicConfig(
    level=os.getenv("DATEIO_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=_handlers,
)

logger = logging.getLogger(__name__)


class DateIOError(Exception):
    """Base exception class for DateIO configuration and usage errors"""

    def __init__(self, message, details=None):
        self.message = message
        self.details = details
        self.timestamp = datetime.now()
        super().__init__(self.message)


def error_handler(func):
    """
    Decorator that logs where an operation failed and re-raises.

    Engine failures propagate to the caller unchanged; this layer only adds
    the log record, never a recovery path.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            exc_type, exc_value, exc_tb = sys.exc_info()
            tb = traceback.extract_tb(exc_tb)

            # Get the most relevant parts of the traceback
            error_location = f"{tb[-1].filename}:{tb[-1].lineno}"
            error_function = tb[-1].name

            error_details = {
                "error_type": exc_type.__name__,
                "location": error_location,
                "function": error_function,
                "operation": func.__qualname__,
                "arguments": {"args": str(args), "kwargs": str(kwargs)},
                "traceback": traceback.format_exc(),
            }

            logger.error(f"Error in {func.__qualname__} at {error_location} - {error_function}: {str(e)}")
            logger.debug(f"Detailed error information: {error_details}")
            raise

    return wrapper
