"""
Error codes for the Compass HTTP surface.

Each code carries a default message and the HTTP status it is served
with. Handlers and routes look both up here so a code never drifts from
its status.
"""

from __future__ import annotations

from typing import Any

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
INTERNAL_ERROR = "INTERNAL_ERROR"

# code -> (http status, default message)
_ERROR_TABLE: dict[str, tuple[int, str]] = {
    VALIDATION_ERROR: (422, "Invalid input. Please check your request."),
    NOT_FOUND: (404, "The requested resource was not found."),
    INTERNAL_ERROR: (500, "An internal error occurred. Please try again."),
}

_FALLBACK = (500, "An error occurred.")


def get_error_message(code: str) -> str:
    """Default message for an error code."""
    return _ERROR_TABLE.get(code, _FALLBACK)[1]


def status_for(code: str) -> int:
    """HTTP status an error code is served with. Unknown codes are 500."""
    return _ERROR_TABLE.get(code, _FALLBACK)[0]


def field_error(field: str) -> dict[str, str]:
    """Details payload naming the single input field that failed."""
    return {"field": field}


def build_error_response(
    code: str,
    message: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build the ``error`` member of the response envelope.

    ``details`` is omitted entirely when not given; the default message
    for ``code`` is used when ``message`` is None.
    """
    error: dict[str, Any] = {
        "code": code,
        "message": message if message is not None else get_error_message(code),
    }
    if details is not None:
        error["details"] = details
    return error


__all__ = [
    "VALIDATION_ERROR",
    "NOT_FOUND",
    "INTERNAL_ERROR",
    "build_error_response",
    "field_error",
    "get_error_message",
    "status_for",
]
