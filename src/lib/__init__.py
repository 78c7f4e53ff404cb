"""
Lib package for the Compass Capacity Engine.

Contains shared utilities:
- time_utils.py: "HH:MM" parsing and formatting
- exceptions.py: Exception hierarchy
- errors.py: Error codes, their HTTP statuses and the error builder
- logging.py: structlog setup
"""

from src.lib.errors import (
    INTERNAL_ERROR,
    NOT_FOUND,
    VALIDATION_ERROR,
    build_error_response,
    field_error,
    get_error_message,
    status_for,
)
from src.lib.exceptions import (
    CompassException,
    ConfigurationError,
    InvariantError,
    ValidationError,
)
from src.lib.time_utils import (
    MINUTES_IN_DAY,
    format_time,
    parse_time_to_minutes,
)

__all__ = [
    # Errors
    "VALIDATION_ERROR",
    "NOT_FOUND",
    "INTERNAL_ERROR",
    "get_error_message",
    "build_error_response",
    "field_error",
    "status_for",
    # Exceptions
    "CompassException",
    "ConfigurationError",
    "InvariantError",
    "ValidationError",
    # Time
    "MINUTES_IN_DAY",
    "format_time",
    "parse_time_to_minutes",
]
