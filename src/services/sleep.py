"""
Sleep / Wind-Down Calculator for the Compass Capacity Engine.

Works backwards from the time the user wants to wake up: ADHD brains often
need a long runway to settle, so the recommended bedtime subtracts both the
sleep duration and a wind-down buffer from the wake time.

    bedtime = wake_time - (sleep_hours + wind_down_hours)

The result is a wall-clock time only; crossing midnight into the previous
calendar day is implicit (wake 07:00 with 8.5h + 1h gives 21:30).

Urgency tiers, from minutes left before bedtime:
- relaxed: 3 hours or more
- getting_late: 1 to 3 hours
- urgent: under 1 hour (or already past bedtime)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, time
from enum import StrEnum
from typing import Any

from src.lib.time_utils import (
    MINUTES_IN_DAY,
    add_hours,
    minutes_to_time_string,
    parse_time_to_minutes,
    resolve_now_minutes,
)

logger = logging.getLogger(__name__)

SLEEP_DURATION_HOURS = 8.0
WIND_DOWN_BUFFER_HOURS = 1.0

URGENT_BELOW_MINUTES = 60
GETTING_LATE_BELOW_MINUTES = 180

# A bedtime more than this far ahead is read as the one already passed
PAST_BEDTIME_HORIZON_MINUTES = 12 * 60

# Evening window (inclusive hours) in which reminders are worth showing
REMINDER_START_HOUR = 18
REMINDER_END_HOUR = 23


class SleepUrgency(StrEnum):
    """How close the current time is to the recommended bedtime."""

    RELAXED = "relaxed"
    GETTING_LATE = "getting_late"
    URGENT = "urgent"


WIND_DOWN_TIPS: dict[SleepUrgency, tuple[str, ...]] = {
    SleepUrgency.RELAXED: (
        "Put phone away 1 hour before bed (no blue light)",
        "Dim lights and do calming activity (reading, music)",
        "Avoid screens - they keep your ADHD brain alert",
        "Try a warm shower or light stretching to wind down",
    ),
    SleepUrgency.GETTING_LATE: (
        "Write tomorrow's first task down so your brain can let go",
        "Set a timer for the last screen session and honour it",
        "Lay out what you need for the morning",
        "Switch to warm, low lighting now",
    ),
    SleepUrgency.URGENT: (
        "Stop starting new things - everything else can wait",
        "Phone on the charger, outside the bedroom if you can",
        "Brain dump any loose thoughts onto paper",
        "Lights low, get comfortable, and head to bed",
    ),
}


@dataclass(frozen=True)
class SleepNotification:
    """Recommended bedtime and wind-down guidance."""

    message: str
    bedtime: str
    wake_time: str
    wind_down_hours: float
    urgency: SleepUrgency
    minutes_until_bedtime: int | None
    tips: tuple[str, ...] = field(default_factory=tuple)
    title: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "title": self.title,
            "description": self.description,
            "message": self.message,
            "bedtime": self.bedtime,
            "wake_time": self.wake_time,
            "wind_down_hours": self.wind_down_hours,
            "urgency": self.urgency.value,
            "minutes_until_bedtime": self.minutes_until_bedtime,
            "tips": list(self.tips),
        }


def classify_sleep_urgency(minutes_until_bedtime: int) -> SleepUrgency:
    """Classify minutes left before bedtime into a sleep urgency tier."""
    if minutes_until_bedtime < URGENT_BELOW_MINUTES:
        return SleepUrgency.URGENT
    if minutes_until_bedtime < GETTING_LATE_BELOW_MINUTES:
        return SleepUrgency.GETTING_LATE
    return SleepUrgency.RELAXED


def minutes_until_bedtime(bed_minutes: int, now_minutes: int) -> int:
    """
    Signed minutes from now to the nearest occurrence of bedtime.

    Bedtime and now are clock times on a 24h dial. A bedtime up to 12 hours
    ahead is upcoming; anything further is read as already passed and comes
    back negative (01:00 against a 22:00 bedtime is -180).
    """
    delta = (bed_minutes - now_minutes) % MINUTES_IN_DAY
    if delta > MINUTES_IN_DAY - PAST_BEDTIME_HORIZON_MINUTES:
        return delta - MINUTES_IN_DAY
    return delta


def recommended_bedtime(
    wake_time: str,
    sleep_hours: float = SLEEP_DURATION_HOURS,
    wind_down_hours: float = WIND_DOWN_BUFFER_HOURS,
) -> str | None:
    """
    Compute the bedtime for a wake time as "HH:MM".

    Returns None when wake_time cannot be parsed.

    Example:
        >>> recommended_bedtime("07:00", sleep_hours=8.5, wind_down_hours=1)
        '21:30'
    """
    wake_minutes = parse_time_to_minutes(wake_time)
    if wake_minutes is None:
        return None
    runway = round((sleep_hours + wind_down_hours) * 60)
    return minutes_to_time_string(wake_minutes - runway)


def get_sleep_notification(
    wake_time: str,
    now: datetime | time | str | None = None,
    *,
    sleep_hours: float = SLEEP_DURATION_HOURS,
    wind_down_hours: float = WIND_DOWN_BUFFER_HOURS,
) -> SleepNotification | None:
    """
    Build the bedtime reminder for a desired wake time.

    Args:
        wake_time: Desired wake-up time, "HH:MM"
        now: Current time; None for the wall clock
        sleep_hours: Target sleep duration
        wind_down_hours: Buffer before sleep for winding down

    Returns:
        SleepNotification, or None when wake_time is malformed
    """
    bedtime = recommended_bedtime(wake_time, sleep_hours, wind_down_hours)
    if bedtime is None:
        logger.debug("Skipping sleep notification: wake_time=%r", wake_time)
        return None

    bed_minutes = parse_time_to_minutes(bedtime)
    now_minutes = resolve_now_minutes(now)
    if bed_minutes is None or now_minutes is None:
        minutes_until_bed = None
        urgency = SleepUrgency.RELAXED
    else:
        minutes_until_bed = minutes_until_bedtime(bed_minutes, now_minutes)
        urgency = classify_sleep_urgency(minutes_until_bed)

    return SleepNotification(
        message=f"To wake up by {wake_time} tomorrow, be in bed by {bedtime} tonight",
        bedtime=bedtime,
        wake_time=wake_time,
        wind_down_hours=sleep_hours + wind_down_hours,
        urgency=urgency,
        minutes_until_bedtime=minutes_until_bed,
        tips=WIND_DOWN_TIPS[urgency],
    )


def get_sleep_scenarios(
    wake_time: str,
    now: datetime | time | str | None = None,
    *,
    sleep_hours: float = SLEEP_DURATION_HOURS,
    wind_down_hours: float = WIND_DOWN_BUFFER_HOURS,
) -> list[SleepNotification]:
    """
    Ideal bedtime plus a realistic backup one hour later.

    Returns an empty list when wake_time is malformed.
    """
    ideal = get_sleep_notification(
        wake_time, now, sleep_hours=sleep_hours, wind_down_hours=wind_down_hours,
    )
    if ideal is None:
        return []

    backup_bedtime = add_hours(ideal.bedtime, 1)
    return [
        SleepNotification(
            title="Ideal Sleep Schedule",
            description="Follow this for best ADHD focus tomorrow",
            message=ideal.message,
            bedtime=ideal.bedtime,
            wake_time=wake_time,
            wind_down_hours=ideal.wind_down_hours,
            urgency=ideal.urgency,
            minutes_until_bedtime=ideal.minutes_until_bedtime,
            tips=ideal.tips,
        ),
        SleepNotification(
            title="Realistic Backup",
            message=f"If you can't make {ideal.bedtime}, aim for {backup_bedtime} at latest",
            bedtime=backup_bedtime,
            wake_time=wake_time,
            wind_down_hours=ideal.wind_down_hours - 1,
            urgency=SleepUrgency.GETTING_LATE,
            minutes_until_bedtime=(
                ideal.minutes_until_bedtime + 60
                if ideal.minutes_until_bedtime is not None
                else None
            ),
            tips=WIND_DOWN_TIPS[SleepUrgency.GETTING_LATE],
        ),
    ]


def should_show_sleep_reminder(now: datetime | time | None = None) -> bool:
    """Sleep reminders are shown between 18:00 and 23:59."""
    moment = now if now is not None else datetime.now()
    return REMINDER_START_HOUR <= moment.hour <= REMINDER_END_HOUR


__all__ = [
    "SleepUrgency",
    "SleepNotification",
    "SLEEP_DURATION_HOURS",
    "WIND_DOWN_BUFFER_HOURS",
    "WIND_DOWN_TIPS",
    "classify_sleep_urgency",
    "minutes_until_bedtime",
    "recommended_bedtime",
    "get_sleep_notification",
    "get_sleep_scenarios",
    "should_show_sleep_reminder",
]
