"""
Time-Budget Engine for the Compass Capacity Engine.

Computes how much time is left before the user's hard stop and classifies
it into an urgency tier for the status banner.

Urgency tiers (recomputed from the clock on every call, no stored history):
- relaxed: 120 minutes or more left
- warning: 60 to 119 minutes left
- critical: under 60 minutes left
- past_stop: the hard stop has passed; overrides every other tier

Times are compared as minutes since midnight. The engine holds no
day-boundary state: past_stop stays true until the caller supplies the next
day's hard stop.

A malformed hard-stop (or "now") string never raises. The budget keeps the
original string for display and leaves every numeric field as None so no
urgency banner is rendered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time
from enum import StrEnum
from typing import Any

from src.lib.time_utils import parse_time_to_minutes, resolve_now_minutes

logger = logging.getLogger(__name__)


class UrgencyLevel(StrEnum):
    """How close the current time is to the hard stop."""

    RELAXED = "relaxed"
    WARNING = "warning"
    CRITICAL = "critical"
    PAST_STOP = "past_stop"


class TimeOfDay(StrEnum):
    """Coarse time-of-day bucket used for message selection."""

    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"


class WarningTone(StrEnum):
    """Tone of the hard-stop banner."""

    SOON = "soon"
    URGENT = "urgent"
    AFTER = "after"


# Urgency thresholds (minutes left, exclusive upper bounds)
CRITICAL_BELOW_MINUTES = 60
WARNING_BELOW_MINUTES = 120

# Banner thresholds (minutes left, inclusive)
BANNER_URGENT_MINUTES = 30
BANNER_SOON_MINUTES = 120

# Time-of-day bucket starts (minutes since midnight)
MORNING_START = 5 * 60
MIDDAY_START = 12 * 60
EVENING_START = 17 * 60


@dataclass(frozen=True)
class TimeBudget:
    """
    Time left until the hard stop.

    total_minutes_until_stop is negative once the stop has passed.
    hours/minutes split the absolute value for display. Every field except
    hard_stop_time is None when a time string could not be parsed.
    """

    hard_stop_time: str
    total_minutes_until_stop: int | None
    hours: int | None
    minutes: int | None
    is_past_stop: bool | None
    urgency_level: UrgencyLevel | None
    message: str | None

    @property
    def is_computed(self) -> bool:
        return self.total_minutes_until_stop is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "hard_stop_time": self.hard_stop_time,
            "total_minutes_until_stop": self.total_minutes_until_stop,
            "hours": self.hours,
            "minutes": self.minutes,
            "is_past_stop": self.is_past_stop,
            "urgency_level": self.urgency_level.value if self.urgency_level else None,
            "message": self.message,
        }


@dataclass(frozen=True)
class TimeWarning:
    """Banner shown as the hard stop approaches or after it passes."""

    tone: WarningTone
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"tone": self.tone.value, "message": self.message}


def classify_urgency(total_minutes_until_stop: int) -> UrgencyLevel:
    """
    Classify minutes left into an urgency tier.

    Exactly 60 minutes is warning and exactly 120 is relaxed: reaching a
    threshold moves to the less urgent tier.
    """
    if total_minutes_until_stop < 0:
        return UrgencyLevel.PAST_STOP
    if total_minutes_until_stop < CRITICAL_BELOW_MINUTES:
        return UrgencyLevel.CRITICAL
    if total_minutes_until_stop < WARNING_BELOW_MINUTES:
        return UrgencyLevel.WARNING
    return UrgencyLevel.RELAXED


def _budget_message(total_minutes: int, hours: int, minutes: int) -> str:
    if total_minutes < 0:
        return "Past your hard stop"
    if total_minutes < CRITICAL_BELOW_MINUTES:
        return f"{minutes}m remaining"
    if total_minutes < WARNING_BELOW_MINUTES:
        return f"{hours}h {minutes}m remaining"
    return f"{hours}h {minutes}m until hard stop"


def unresolved_budget(hard_stop_time: str) -> TimeBudget:
    """Budget for an unparseable time: display string only."""
    return TimeBudget(
        hard_stop_time=hard_stop_time,
        total_minutes_until_stop=None,
        hours=None,
        minutes=None,
        is_past_stop=None,
        urgency_level=None,
        message=None,
    )


def get_time_budget(
    hard_stop_time: str,
    now: datetime | time | str | None = None,
) -> TimeBudget:
    """
    Compute the time budget until the hard stop.

    Args:
        hard_stop_time: 24-hour "HH:MM" local wall-clock time
        now: Current time (datetime, time or "HH:MM"); None for the wall clock

    Returns:
        TimeBudget. Unparseable input yields a budget with only
        hard_stop_time populated.

    Example:
        >>> get_time_budget("18:00", "17:00").urgency_level
        <UrgencyLevel.WARNING: 'warning'>
        >>> get_time_budget("18:00", "18:01").is_past_stop
        True
    """
    stop_minutes = parse_time_to_minutes(hard_stop_time)
    now_minutes = resolve_now_minutes(now)
    if stop_minutes is None or now_minutes is None:
        logger.debug(
            "Skipping time budget: hard_stop=%r now=%r", hard_stop_time, now,
        )
        return unresolved_budget(hard_stop_time)

    total = stop_minutes - now_minutes
    hours, minutes = divmod(abs(total), 60)

    return TimeBudget(
        hard_stop_time=hard_stop_time,
        total_minutes_until_stop=total,
        hours=hours,
        minutes=minutes,
        is_past_stop=total < 0,
        urgency_level=classify_urgency(total),
        message=_budget_message(total, hours, minutes),
    )


def get_time_warning(budget: TimeBudget) -> TimeWarning | None:
    """
    Build the hard-stop banner for a time budget.

    Returns None when there is nothing to warn about: plenty of time left,
    or the budget could not be computed.
    """
    if not budget.is_computed:
        return None

    if budget.is_past_stop:
        return TimeWarning(
            tone=WarningTone.AFTER,
            message="You are past your hard stop. Start winding down when you can.",
        )

    total = budget.total_minutes_until_stop or 0
    if total <= BANNER_URGENT_MINUTES:
        return TimeWarning(
            tone=WarningTone.URGENT,
            message=(
                f"{max(total, 1)} min until your hard stop. "
                "Time to wrap up for the day."
            ),
        )

    if total <= BANNER_SOON_MINUTES:
        hours, minutes = divmod(total, 60)
        parts: list[str] = []
        if hours > 0:
            parts.append(f"{hours} {'hour' if hours == 1 else 'hours'}")
        if minutes > 0:
            parts.append(f"{minutes} min")
        return TimeWarning(
            tone=WarningTone.SOON,
            message=f"{' '.join(parts)} until your hard stop. Choose one last focus.",
        )

    return None


def time_of_day_bucket(now: datetime | time | str | None = None) -> TimeOfDay:
    """
    Bucket the current time into morning, midday or evening.

    morning is 05:00-11:59, midday 12:00-16:59, evening everything else
    (including the small hours). A malformed "now" string counts as evening.
    """
    minutes = resolve_now_minutes(now)
    if minutes is None:
        return TimeOfDay.EVENING
    if MORNING_START <= minutes < MIDDAY_START:
        return TimeOfDay.MORNING
    if MIDDAY_START <= minutes < EVENING_START:
        return TimeOfDay.MIDDAY
    return TimeOfDay.EVENING


__all__ = [
    "UrgencyLevel",
    "TimeOfDay",
    "WarningTone",
    "TimeBudget",
    "TimeWarning",
    "CRITICAL_BELOW_MINUTES",
    "WARNING_BELOW_MINUTES",
    "classify_urgency",
    "unresolved_budget",
    "get_time_budget",
    "get_time_warning",
    "time_of_day_bucket",
]
