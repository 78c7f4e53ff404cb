"""
Wall-clock time helpers for the Compass Capacity Engine.

All schedule values travel as 24-hour "HH:MM" strings. Parsing never raises:
a malformed string yields None and the caller skips whatever numeric
derivation depended on it, keeping the original string for display.

Usage:
    from src.lib.time_utils import parse_time_to_minutes, format_time

    parse_time_to_minutes("18:30")   # 1110
    parse_time_to_minutes("abc")     # None
    format_time("14:30")             # "2:30 PM"
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, time

logger = logging.getLogger(__name__)

MINUTES_IN_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def parse_time_to_minutes(value: str | None) -> int | None:
    """
    Parse a 24-hour "HH:MM" string into minutes since midnight.

    Args:
        value: Time string such as "07:00" or "7:00"

    Returns:
        Minutes since midnight (0-1439), or None when the string is empty,
        non-numeric, or the hour/minute is out of range
    """
    if not value or not isinstance(value, str):
        return None

    match = _TIME_PATTERN.match(value.strip())
    if match is None:
        logger.debug("Unparseable time string: %r", value)
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    if hours > 23 or minutes > 59:
        logger.debug("Out-of-range time string: %r", value)
        return None

    return hours * 60 + minutes


def minutes_from_datetime(moment: datetime | time) -> int:
    """Minutes since midnight for a datetime or time (seconds are dropped)."""
    return moment.hour * 60 + moment.minute


def resolve_now_minutes(now: datetime | time | str | None = None) -> int | None:
    """
    Resolve the caller-supplied "now" into minutes since midnight.

    Accepts a datetime, a time, an "HH:MM" string, or None for the local
    wall clock. Returns None only when a string is malformed.
    """
    if now is None:
        return minutes_from_datetime(datetime.now())
    if isinstance(now, str):
        return parse_time_to_minutes(now)
    return minutes_from_datetime(now)


def minutes_to_time_string(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM", wrapping across midnight."""
    wrapped = minutes % MINUTES_IN_DAY
    return f"{wrapped // 60:02d}:{wrapped % 60:02d}"


def format_time(time24: str, use_24_hour: bool = False) -> str:
    """
    Convert a 24-hour "HH:MM" string for display.

    12-hour output is the default ("2:30 PM"). Malformed input is returned
    unchanged.

    Example:
        >>> format_time("00:15")
        '12:15 AM'
        >>> format_time("14:30", use_24_hour=True)
        '14:30'
    """
    if use_24_hour:
        return time24

    minutes = parse_time_to_minutes(time24)
    if minutes is None:
        return time24

    hours, mins = divmod(minutes, 60)
    period = "PM" if hours >= 12 else "AM"
    hours12 = 12 if hours == 0 else hours - 12 if hours > 12 else hours
    return f"{hours12}:{mins:02d} {period}"


def format_minutes(minutes: int, use_24_hour: bool = False) -> str:
    """Format minutes since midnight for display."""
    return format_time(minutes_to_time_string(minutes), use_24_hour)


def add_hours(time24: str, hours: float) -> str:
    """
    Shift an "HH:MM" string by a number of hours, wrapping across midnight.

    Malformed input is returned unchanged.
    """
    minutes = parse_time_to_minutes(time24)
    if minutes is None:
        return time24
    return minutes_to_time_string(minutes + round(hours * 60))


def is_between(
    now_minutes: int,
    start_minutes: int,
    end_minutes: int,
    allow_wrap: bool = True,
) -> bool:
    """
    Check whether now falls in the half-open window [start, end).

    A window whose end is before its start wraps across midnight when
    allow_wrap is set. A zero-length window covers the whole day.
    """
    if start_minutes == end_minutes:
        return True
    if end_minutes > start_minutes:
        return start_minutes <= now_minutes < end_minutes
    if not allow_wrap:
        return False
    return now_minutes >= start_minutes or now_minutes < end_minutes


__all__ = [
    "MINUTES_IN_DAY",
    "parse_time_to_minutes",
    "minutes_from_datetime",
    "resolve_now_minutes",
    "minutes_to_time_string",
    "format_time",
    "format_minutes",
    "add_hours",
    "is_between",
]
