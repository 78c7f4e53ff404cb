"""
Pydantic Schemas for the Compass REST API.

Request bodies are validated here, at the boundary: an unknown energy level,
complexity or task type is rejected with HTTP 422 before it can reach the
capacity core. Every response uses the same envelope:

    {"success": true, "data": {...}, "error": null}
    {"success": false, "data": null, "error": {"code": "...", "message": "..."}}
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.config.energy import EnergyLevel, TaskComplexity, TaskType
from src.lib.errors import build_error_response
from src.services.energy_schedule import DayType

# "HH:MM" shape only; range checks happen in the core, which never raises
TIME_STRING_MAX_LENGTH = 16

MAX_TASKS_PER_REQUEST = 200


# =============================================================================
# Response Envelope
# =============================================================================


class APIError(BaseModel):
    """Standard API error body."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ResponseEnvelope(BaseModel):
    """Envelope wrapping every API response."""

    success: bool
    data: Any = None
    error: APIError | None = None


def success_response(data: Any) -> dict[str, Any]:
    """Wrap data in a success envelope."""
    return ResponseEnvelope(success=True, data=data).model_dump()


def error_response(
    code: str,
    message: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Wrap an error code (and optional message override) in an error envelope."""
    error = APIError(**build_error_response(code, message, details))
    return ResponseEnvelope(success=False, error=error).model_dump()


# =============================================================================
# Capacity Schemas
# =============================================================================


class TaskInput(BaseModel):
    """A task as the capacity core reads it."""

    complexity: TaskComplexity
    completed: bool = False
    type: TaskType = TaskType.FOCUS
    description: str = Field(default="", max_length=500)


class CapacityRequest(BaseModel):
    """Energy level (null when not set yet) and today's tasks."""

    energy_level: EnergyLevel | None = None
    tasks: list[TaskInput] = Field(default_factory=list, max_length=MAX_TASKS_PER_REQUEST)


class TimeAdjustedCapacityRequest(BaseModel):
    """Base capacity and minutes left until the hard stop."""

    base_capacity: float = Field(..., ge=0)
    minutes_until_stop: int


# =============================================================================
# Time Budget & Messaging Schemas
# =============================================================================


class TimeBudgetRequest(BaseModel):
    """Hard stop and optional current time, both "HH:MM"."""

    hard_stop_time: str = Field(..., max_length=TIME_STRING_MAX_LENGTH)
    now: str | None = Field(default=None, max_length=TIME_STRING_MAX_LENGTH)


class ContextualMessageRequest(BaseModel):
    """Everything the contextual message depends on."""

    tasks: list[TaskInput] = Field(default_factory=list, max_length=MAX_TASKS_PER_REQUEST)
    energy_level: EnergyLevel | None = None
    hard_stop_time: str | None = Field(default=None, max_length=TIME_STRING_MAX_LENGTH)
    now: str | None = Field(default=None, max_length=TIME_STRING_MAX_LENGTH)


class SleepRequest(BaseModel):
    """Desired wake time and optional overrides for the sleep runway."""

    wake_time: str = Field(..., max_length=TIME_STRING_MAX_LENGTH)
    now: str | None = Field(default=None, max_length=TIME_STRING_MAX_LENGTH)
    sleep_hours: float = Field(default=8.0, gt=0, le=16)
    wind_down_hours: float = Field(default=1.0, ge=0, le=6)


class TimelineRequest(BaseModel):
    """Daily anchors plus the current time."""

    wake: str = Field(..., max_length=TIME_STRING_MAX_LENGTH)
    work_start: str = Field(..., max_length=TIME_STRING_MAX_LENGTH)
    hard_stop: str = Field(..., max_length=TIME_STRING_MAX_LENGTH)
    bedtime: str = Field(..., max_length=TIME_STRING_MAX_LENGTH)
    now: str | None = Field(default=None, max_length=TIME_STRING_MAX_LENGTH)


# =============================================================================
# Energy Schedule Schemas
# =============================================================================


class EnergyBlockInput(BaseModel):
    """One block of a user's energy schedule."""

    start_time: str = Field(..., max_length=TIME_STRING_MAX_LENGTH)
    energy_level: EnergyLevel
    label: str | None = Field(default=None, max_length=200)
    day_type: DayType = "all"


class CurrentEnergyRequest(BaseModel):
    """Either a preset id or explicit blocks, plus an optional moment."""

    preset_id: str | None = Field(default=None, max_length=50)
    blocks: list[EnergyBlockInput] = Field(default_factory=list, max_length=100)
    now: datetime | None = None


__all__ = [
    "APIError",
    "ResponseEnvelope",
    "success_response",
    "error_response",
    "TaskInput",
    "CapacityRequest",
    "TimeAdjustedCapacityRequest",
    "TimeBudgetRequest",
    "ContextualMessageRequest",
    "SleepRequest",
    "TimelineRequest",
    "EnergyBlockInput",
    "CurrentEnergyRequest",
]
