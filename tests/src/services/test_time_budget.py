"""
Tests for the Time-Budget Engine (src/services/time_budget.py).

Tests cover:
- Urgency tier boundaries (60 is warning, 59 is critical, 120 is relaxed)
- Past-stop override
- Budget messages and hours/minutes split
- Malformed time strings (no exception, numeric fields left as None)
- Hard-stop banner tiers
- Time-of-day buckets
"""

from __future__ import annotations

from datetime import datetime, time

import pytest

from src.services.time_budget import (
    TimeOfDay,
    UrgencyLevel,
    WarningTone,
    classify_urgency,
    get_time_budget,
    get_time_warning,
    time_of_day_bucket,
)

# =============================================================================
# Urgency Tiers
# =============================================================================


class TestClassifyUrgency:
    """Tests for classify_urgency()."""

    @pytest.mark.parametrize(
        ("minutes", "expected"),
        [
            (-600, UrgencyLevel.PAST_STOP),
            (-1, UrgencyLevel.PAST_STOP),
            (0, UrgencyLevel.CRITICAL),
            (59, UrgencyLevel.CRITICAL),
            (60, UrgencyLevel.WARNING),
            (119, UrgencyLevel.WARNING),
            (120, UrgencyLevel.RELAXED),
            (900, UrgencyLevel.RELAXED),
        ],
    )
    def test_boundaries(self, minutes: int, expected: UrgencyLevel) -> None:
        assert classify_urgency(minutes) == expected


# =============================================================================
# Time Budget
# =============================================================================


class TestGetTimeBudget:
    """Tests for get_time_budget()."""

    def test_exactly_one_hour_is_warning(self) -> None:
        budget = get_time_budget("18:00", "17:00")
        assert budget.total_minutes_until_stop == 60
        assert budget.urgency_level == UrgencyLevel.WARNING
        assert budget.is_past_stop is False
        assert (budget.hours, budget.minutes) == (1, 0)
        assert budget.message == "1h 0m remaining"

    def test_fifty_nine_minutes_is_critical(self) -> None:
        budget = get_time_budget("18:00", "17:01")
        assert budget.total_minutes_until_stop == 59
        assert budget.urgency_level == UrgencyLevel.CRITICAL
        assert budget.message == "59m remaining"

    def test_one_minute_past(self) -> None:
        budget = get_time_budget("18:00", "18:01")
        assert budget.is_past_stop is True
        assert budget.urgency_level == UrgencyLevel.PAST_STOP
        assert budget.total_minutes_until_stop == -1
        assert (budget.hours, budget.minutes) == (0, 1)
        assert budget.message == "Past your hard stop"

    def test_far_past_stop_still_past(self) -> None:
        """Past-stop overrides the tier whatever the magnitude."""
        budget = get_time_budget("09:00", "23:30")
        assert budget.urgency_level == UrgencyLevel.PAST_STOP

    def test_relaxed(self) -> None:
        budget = get_time_budget("18:00", "09:15")
        assert budget.urgency_level == UrgencyLevel.RELAXED
        assert budget.total_minutes_until_stop == 525
        assert budget.message == "8h 45m until hard stop"

    def test_exactly_at_stop_is_critical(self) -> None:
        budget = get_time_budget("18:00", "18:00")
        assert budget.is_past_stop is False
        assert budget.urgency_level == UrgencyLevel.CRITICAL

    def test_accepts_datetime_and_time(self) -> None:
        assert get_time_budget("18:00", datetime(2026, 10, 19, 16, 30)).total_minutes_until_stop == 90
        assert get_time_budget("18:00", time(16, 30)).total_minutes_until_stop == 90

    def test_wall_clock_default(self) -> None:
        budget = get_time_budget("12:00")
        assert budget.is_computed

    @pytest.mark.parametrize("hard_stop", ["abc", "", "25:00", "18:7"])
    def test_malformed_hard_stop(self, hard_stop: str) -> None:
        """Never raises; only the display string survives."""
        budget = get_time_budget(hard_stop, "17:00")
        assert budget.hard_stop_time == hard_stop
        assert budget.is_past_stop is None
        assert budget.urgency_level is None
        assert budget.total_minutes_until_stop is None
        assert budget.message is None
        assert not budget.is_computed

    def test_malformed_now(self) -> None:
        budget = get_time_budget("18:00", "teatime")
        assert budget.urgency_level is None

    def test_to_dict(self) -> None:
        assert get_time_budget("18:00", "17:01").to_dict() == {
            "hard_stop_time": "18:00",
            "total_minutes_until_stop": 59,
            "hours": 0,
            "minutes": 59,
            "is_past_stop": False,
            "urgency_level": "critical",
            "message": "59m remaining",
        }

    def test_to_dict_unresolved(self) -> None:
        data = get_time_budget("abc", "17:00").to_dict()
        assert data["hard_stop_time"] == "abc"
        assert data["urgency_level"] is None


# =============================================================================
# Banner
# =============================================================================


class TestGetTimeWarning:
    """Tests for get_time_warning()."""

    def test_no_warning_with_plenty_of_time(self) -> None:
        assert get_time_warning(get_time_budget("18:00", "15:59")) is None

    def test_soon_at_two_hours(self) -> None:
        warning = get_time_warning(get_time_budget("18:00", "16:00"))
        assert warning is not None
        assert warning.tone == WarningTone.SOON
        assert warning.message == "2 hours until your hard stop. Choose one last focus."

    def test_soon_hours_and_minutes(self) -> None:
        warning = get_time_warning(get_time_budget("18:00", "16:30"))
        assert warning.message.startswith("1 hour 30 min until your hard stop")

    def test_urgent(self) -> None:
        warning = get_time_warning(get_time_budget("18:00", "17:30"))
        assert warning.tone == WarningTone.URGENT
        assert warning.message.startswith("30 min until your hard stop")

    def test_urgent_at_stop_shows_one_minute(self) -> None:
        warning = get_time_warning(get_time_budget("18:00", "18:00"))
        assert warning.message.startswith("1 min")

    def test_after(self) -> None:
        warning = get_time_warning(get_time_budget("18:00", "19:00"))
        assert warning.tone == WarningTone.AFTER

    def test_unresolved_budget_has_no_warning(self) -> None:
        assert get_time_warning(get_time_budget("abc", "17:00")) is None

    def test_to_dict(self) -> None:
        warning = get_time_warning(get_time_budget("18:00", "19:00"))
        assert warning.to_dict()["tone"] == "after"


# =============================================================================
# Time of Day
# =============================================================================


class TestTimeOfDayBucket:
    """Tests for time_of_day_bucket()."""

    @pytest.mark.parametrize(
        ("now", "expected"),
        [
            ("04:59", TimeOfDay.EVENING),
            ("05:00", TimeOfDay.MORNING),
            ("11:59", TimeOfDay.MORNING),
            ("12:00", TimeOfDay.MIDDAY),
            ("16:59", TimeOfDay.MIDDAY),
            ("17:00", TimeOfDay.EVENING),
            ("23:30", TimeOfDay.EVENING),
            ("whenever", TimeOfDay.EVENING),
        ],
    )
    def test_buckets(self, now: str, expected: TimeOfDay) -> None:
        assert time_of_day_bucket(now) == expected

    def test_datetime(self) -> None:
        assert time_of_day_bucket(datetime(2026, 10, 19, 8, 0)) == TimeOfDay.MORNING
