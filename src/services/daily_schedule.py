"""
Daily Schedule helpers for the Compass Capacity Engine.

A daily schedule is four wall-clock anchors: wake, work start, hard stop and
bedtime. From them we derive which timeline the command center shows and the
"flow" greeting for the current part of the work window.

Timeline modes:
- day: wake up to hard stop
- evening: hard stop to bedtime
- sleep: bedtime to wake up
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from enum import StrEnum
from typing import Any

from src.lib.time_utils import (
    MINUTES_IN_DAY,
    is_between,
    minutes_from_datetime,
    parse_time_to_minutes,
)

DEFAULT_WORK_START = "08:00"
DEFAULT_WORK_END = "18:00"

# Work windows shorter than this are split in thirds
SHORT_WORK_WINDOW_MINUTES = 240
# Evening flow covers the last stretch of the work window
EVENING_FLOW_MINUTES = 120


class TimelineMode(StrEnum):
    """Which timeline the command center should render."""

    DAY = "day"
    EVENING = "evening"
    SLEEP = "sleep"


@dataclass(frozen=True)
class DailySchedule:
    """The user's daily anchors as "HH:MM" strings."""

    wake: str
    work_start: str
    hard_stop: str
    bedtime: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary representation."""
        return {
            "wake": self.wake,
            "work_start": self.work_start,
            "hard_stop": self.hard_stop,
            "bedtime": self.bedtime,
        }


@dataclass(frozen=True)
class FlowGreeting:
    """Named part of the day with an emoji."""

    flow: str
    emoji: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"flow": self.flow, "emoji": self.emoji}


MORNING_FLOW = FlowGreeting("Morning flow", "🌅")
AFTERNOON_FLOW = FlowGreeting("Afternoon flow", "☀️")
FOCUS_FLOW = FlowGreeting("Focus flow", "🎯")
EVENING_FLOW = FlowGreeting("Evening flow", "🌙")
WIND_DOWN_FLOW = FlowGreeting("Wind-down flow", "✨")

# Clock-based rules used when the work window cannot be parsed
FALLBACK_FLOW_RULES: tuple[tuple[int, int, FlowGreeting], ...] = (
    (5 * 60, 11 * 60, MORNING_FLOW),
    (11 * 60, 14 * 60, FOCUS_FLOW),
    (14 * 60, 16 * 60, AFTERNOON_FLOW),
    (16 * 60, 20 * 60, EVENING_FLOW),
)


def _anchor_minutes(value: str) -> int:
    """Anchor in minutes since midnight; malformed anchors count as midnight."""
    minutes = parse_time_to_minutes(value)
    return 0 if minutes is None else minutes


def get_timeline_mode(now: datetime | time, schedule: DailySchedule) -> TimelineMode:
    """
    Decide which timeline applies at the given moment.

    Windows wrap across midnight, so a 01:00 bedtime still counts as
    evening at 23:30.
    """
    now_minutes = minutes_from_datetime(now)
    wake = _anchor_minutes(schedule.wake)
    stop = _anchor_minutes(schedule.hard_stop)
    bed = _anchor_minutes(schedule.bedtime)

    if is_between(now_minutes, wake, stop):
        return TimelineMode.DAY
    if is_between(now_minutes, stop, bed):
        return TimelineMode.EVENING
    return TimelineMode.SLEEP


def _fallback_flow(now_minutes: int) -> FlowGreeting:
    for start, end, flow in FALLBACK_FLOW_RULES:
        if start <= now_minutes < end:
            return flow
    return WIND_DOWN_FLOW


def get_flow_greeting(
    now: datetime | time,
    work_start: str | None = None,
    work_end: str | None = None,
) -> FlowGreeting:
    """
    Name the current part of the work window.

    Windows under four hours are split into morning, focus and evening
    thirds. Longer windows get a focus block across the middle 35-65%,
    morning before the midpoint, afternoon after it and evening for the last
    two hours. Outside the window it is wind-down time. Overnight windows
    (end before start) are supported.

    Args:
        now: Current time
        work_start: "HH:MM", defaults to 08:00
        work_end: "HH:MM", defaults to 18:00

    Returns:
        FlowGreeting for the moment
    """
    start = parse_time_to_minutes(DEFAULT_WORK_START if work_start is None else work_start)
    end = parse_time_to_minutes(DEFAULT_WORK_END if work_end is None else work_end)
    now_minutes = minutes_from_datetime(now)

    if start is None or end is None:
        return _fallback_flow(now_minutes)

    if end <= start:
        end += MINUTES_IN_DAY

    window = end - start
    if end > MINUTES_IN_DAY and now_minutes < start:
        now_minutes += MINUTES_IN_DAY

    if now_minutes >= end or now_minutes < start:
        return WIND_DOWN_FLOW

    elapsed = now_minutes - start

    if window < SHORT_WORK_WINDOW_MINUTES:
        third = window / 3
        if elapsed < third:
            return MORNING_FLOW
        if elapsed < third * 2:
            return FOCUS_FLOW
        return EVENING_FLOW

    if start + window * 0.35 <= now_minutes < start + window * 0.65:
        return FOCUS_FLOW
    if now_minutes < start + window / 2:
        return MORNING_FLOW
    if now_minutes < max(start, end - EVENING_FLOW_MINUTES):
        return AFTERNOON_FLOW
    return EVENING_FLOW


__all__ = [
    "TimelineMode",
    "DailySchedule",
    "FlowGreeting",
    "MORNING_FLOW",
    "AFTERNOON_FLOW",
    "FOCUS_FLOW",
    "EVENING_FLOW",
    "WIND_DOWN_FLOW",
    "get_timeline_mode",
    "get_flow_greeting",
]
