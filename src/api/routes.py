"""
REST API Routes for the Compass Capacity Engine.

Thin async handlers over the pure capacity core. Nothing is stored; every
request carries the full state it needs. All responses use the
ResponseEnvelope pattern.

Endpoints (all under /api/v1 prefix):
- /health - Health check
- /energy-levels - Capacity table with range text and guidance
- /capacity - Capacity snapshot for an energy level and task list
- /capacity/time-adjusted - Capacity scaled by time left until hard stop
- /time-budget - Time left until hard stop, with banner warning
- /contextual-message - Message for the current state of the day
- /sleep - Bedtime recommendation and scenarios
- /schedule/timeline - Day/evening/sleep timeline and flow greeting
- /energy-presets - Built-in energy schedule presets
- /energy-schedule/current - Scheduled energy level for a moment
"""

from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Any

from fastapi import APIRouter as FastAPIRouter
from fastapi.responses import JSONResponse

from src.api.schemas import (
    CapacityRequest,
    ContextualMessageRequest,
    CurrentEnergyRequest,
    SleepRequest,
    TimeAdjustedCapacityRequest,
    TimeBudgetRequest,
    TimelineRequest,
    error_response,
    success_response,
)
from src.config.energy import EnergyLevel, describe_level
from src.config.energy_presets import ENERGY_PRESETS, get_preset_by_id
from src.lib.errors import NOT_FOUND, VALIDATION_ERROR, field_error, status_for
from src.lib.time_utils import parse_time_to_minutes
from src.services.capacity import get_capacity_calculator
from src.services.contextual_message import get_contextual_message
from src.services.daily_schedule import DailySchedule, get_flow_greeting, get_timeline_mode
from src.services.energy_schedule import (
    EnergyScheduleBlock,
    blocks_from_preset,
    get_current_energy_level,
)
from src.services.sleep import get_sleep_notification, get_sleep_scenarios
from src.services.time_budget import get_time_budget, get_time_warning

logger = logging.getLogger(__name__)


# =============================================================================
# FastAPI Router with /api/v1 prefix
# =============================================================================

router = FastAPIRouter(prefix="/api/v1")


def _validation_failure(message: str, field: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(VALIDATION_ERROR),
        content=error_response(VALIDATION_ERROR, message, field_error(field)),
    )


# =============================================================================
# Health & Reference Data Endpoints
# =============================================================================


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check endpoint. Returns only status."""
    return success_response({"status": "ok"})


@router.get("/energy-levels")
async def list_energy_levels() -> dict[str, Any]:
    """
    List every energy level with its capacity, range text and guidance.

    Returns:
        Envelope with a list of level descriptions, most to least energy
    """
    return success_response([describe_level(level) for level in EnergyLevel])


@router.get("/energy-presets")
async def list_energy_presets() -> dict[str, Any]:
    """List the built-in energy schedule presets."""
    return success_response([preset.to_dict() for preset in ENERGY_PRESETS])


# =============================================================================
# Capacity Endpoints
# =============================================================================


@router.post("/capacity")
async def calculate_capacity(request: CapacityRequest) -> dict[str, Any]:
    """
    Compute the capacity snapshot for an energy level and today's tasks.

    A null energy level returns the zeroed "not set yet" snapshot.

    Args:
        request: Energy level and task list

    Returns:
        Envelope with the capacity snapshot
    """
    snapshot = get_capacity_calculator().calculate(request.energy_level, request.tasks)
    return success_response(snapshot.to_dict())


@router.post("/capacity/time-adjusted")
async def time_adjusted_capacity(request: TimeAdjustedCapacityRequest) -> dict[str, Any]:
    """Scale a base capacity by the minutes left until the hard stop."""
    adjusted = get_capacity_calculator().time_adjusted(
        request.base_capacity, request.minutes_until_stop,
    )
    return success_response(adjusted.to_dict())


# =============================================================================
# Time Budget & Messaging Endpoints
# =============================================================================


@router.post("/time-budget")
async def time_budget(request: TimeBudgetRequest) -> dict[str, Any]:
    """
    Compute the time budget until the hard stop.

    A malformed time is not an error: the budget comes back with only
    hard_stop_time populated and no warning.
    """
    budget = get_time_budget(request.hard_stop_time, request.now)
    warning = get_time_warning(budget)
    return success_response({
        "budget": budget.to_dict(),
        "warning": warning.to_dict() if warning is not None else None,
    })


@router.post("/contextual-message")
async def contextual_message(request: ContextualMessageRequest) -> dict[str, Any]:
    """
    Pick the contextual message for the current state of the day.

    Args:
        request: Tasks, energy level (null when unset), optional hard stop and time

    Returns:
        Envelope with {type, message, action}
    """
    budget = (
        get_time_budget(request.hard_stop_time, request.now)
        if request.hard_stop_time
        else None
    )
    message = get_contextual_message(
        request.tasks,
        has_set_energy=request.energy_level is not None,
        time_budget=budget,
        now=request.now,
    )
    return success_response(message.to_dict())


@router.post("/sleep", response_model=None)
async def sleep_recommendation(request: SleepRequest) -> dict[str, Any] | JSONResponse:
    """
    Recommend a bedtime for a desired wake time.

    Returns:
        Envelope with the notification and the ideal/backup scenarios, or a
        422 envelope when wake_time is not "HH:MM"
    """
    notification = get_sleep_notification(
        request.wake_time,
        request.now,
        sleep_hours=request.sleep_hours,
        wind_down_hours=request.wind_down_hours,
    )
    if notification is None:
        return _validation_failure("wake_time must be HH:MM", "wake_time")

    scenarios = get_sleep_scenarios(
        request.wake_time,
        request.now,
        sleep_hours=request.sleep_hours,
        wind_down_hours=request.wind_down_hours,
    )
    return success_response({
        "notification": notification.to_dict(),
        "scenarios": [scenario.to_dict() for scenario in scenarios],
    })


@router.post("/schedule/timeline", response_model=None)
async def schedule_timeline(request: TimelineRequest) -> dict[str, Any] | JSONResponse:
    """
    Report which timeline (day, evening or sleep) applies now, plus the
    flow greeting for the work window (work start to hard stop).
    """
    if request.now is None:
        moment = datetime.now().time()
    else:
        now_minutes = parse_time_to_minutes(request.now)
        if now_minutes is None:
            return _validation_failure("now must be HH:MM", "now")
        moment = time(now_minutes // 60, now_minutes % 60)

    schedule = DailySchedule(
        wake=request.wake,
        work_start=request.work_start,
        hard_stop=request.hard_stop,
        bedtime=request.bedtime,
    )
    mode = get_timeline_mode(moment, schedule)
    greeting = get_flow_greeting(moment, request.work_start, request.hard_stop)
    return success_response({
        "mode": mode.value,
        "flow": greeting.to_dict(),
        "schedule": schedule.to_dict(),
    })


# =============================================================================
# Energy Schedule Endpoints
# =============================================================================


@router.post("/energy-schedule/current", response_model=None)
async def current_scheduled_energy(request: CurrentEnergyRequest) -> dict[str, Any] | JSONResponse:
    """
    Look up the scheduled energy level for a moment.

    Uses the preset when preset_id is given, otherwise the explicit blocks.
    With neither, the default (steady) applies.
    """
    blocks: list[EnergyScheduleBlock] = []
    if request.preset_id is not None:
        preset = get_preset_by_id(request.preset_id)
        if preset is None:
            return JSONResponse(
                status_code=status_for(NOT_FOUND),
                content=error_response(NOT_FOUND, details={"preset_id": request.preset_id}),
            )
        blocks = blocks_from_preset(preset)
    else:
        for index, item in enumerate(request.blocks):
            start = parse_time_to_minutes(item.start_time)
            if start is None:
                return _validation_failure("start_time must be HH:MM", f"blocks.{index}.start_time")
            blocks.append(
                EnergyScheduleBlock(
                    start_minutes=start,
                    energy_level=item.energy_level,
                    label=item.label,
                    day_type=item.day_type,
                )
            )

    level = get_current_energy_level(blocks, request.now)
    return success_response({
        "energy_level": level.value,
        "level": describe_level(level),
    })


__all__ = [
    "router",
]
