"""
Tests for contextual messaging (src/services/contextual_message.py).

Tests cover the decision order:
- Past hard stop beats everything
- Energy not set -> time-of-day greeting with set-energy action
- No focus tasks -> empty state
- Focus tasks open -> urgency override, otherwise time-of-day progress
- All focus tasks complete -> celebration
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.config.energy import TaskComplexity, TaskType
from src.lib.exceptions import InvariantError
from src.models.task import Task
from src.services.contextual_message import (
    ACTION_ADD_FIRST_FOCUS,
    ACTION_REVIEW_TODAY,
    ACTION_SET_ENERGY,
    ACTION_WRAP_UP,
    GREETINGS,
    ContextualMessage,
    MessageType,
    get_contextual_message,
)
from src.services.time_budget import TimeOfDay, get_time_budget


def _done(complexity: TaskComplexity = TaskComplexity.QUICK) -> Task:
    return Task(complexity=complexity, completed=True)


# =============================================================================
# Past Stop
# =============================================================================


class TestPastStop:
    """Past the hard stop, the day is wrapped up."""

    def test_counts_completed_focus(self, quick_focus) -> None:
        message = get_contextual_message(
            [_done(), _done(), quick_focus],
            has_set_energy=True,
            time_budget=get_time_budget("18:00", "19:00"),
            now="19:00",
        )
        assert message.type == MessageType.EVENING
        assert message.message == (
            "Your brain is done with deep work. You completed 2 focus items today! "
            "That's a solid day. Rest up! 🌟"
        )
        assert message.action is None

    def test_singular(self) -> None:
        message = get_contextual_message(
            [_done()], has_set_energy=True, time_budget=get_time_budget("18:00", "18:30"),
        )
        assert "You completed 1 focus item today!" in message.message

    def test_nothing_completed(self) -> None:
        message = get_contextual_message(
            [], has_set_energy=True, time_budget=get_time_budget("18:00", "18:30"),
        )
        assert message.message == "Your brain is done with deep work. That's a solid day. Rest up! 🌟"

    def test_beats_unset_energy(self) -> None:
        message = get_contextual_message(
            [], has_set_energy=False, time_budget=get_time_budget("18:00", "21:00"), now="21:00",
        )
        assert message.action != ACTION_SET_ENERGY

    def test_life_tasks_not_counted(self, deep_life_task) -> None:
        done_life = Task(complexity=TaskComplexity.QUICK, completed=True, type=TaskType.LIFE)
        message = get_contextual_message(
            [done_life, deep_life_task],
            has_set_energy=True,
            time_budget=get_time_budget("18:00", "18:30"),
        )
        assert "You completed" not in message.message


# =============================================================================
# Energy Not Set
# =============================================================================


class TestEnergyNotSet:
    """Before the user picks an energy level."""

    @pytest.mark.parametrize(
        ("now", "bucket"),
        [("08:00", TimeOfDay.MORNING), ("13:00", TimeOfDay.MIDDAY), ("20:00", TimeOfDay.EVENING)],
    )
    def test_greeting_by_time_of_day(self, now: str, bucket: TimeOfDay) -> None:
        message = get_contextual_message([], has_set_energy=False, now=now)
        assert message.type == MessageType(bucket.value)
        assert message.message == GREETINGS[bucket]
        assert message.action == ACTION_SET_ENERGY

    def test_morning_greeting_text(self) -> None:
        message = get_contextual_message([], has_set_energy=False, now="08:00")
        assert message.message == "Good morning! Let's plan your day together."

    def test_greeting_even_with_tasks(self, deep_focus) -> None:
        message = get_contextual_message([deep_focus], has_set_energy=False, now="08:00")
        assert message.action == ACTION_SET_ENERGY


# =============================================================================
# Empty
# =============================================================================


class TestEmpty:
    """Energy set but no focus tasks."""

    @pytest.mark.parametrize("now", ["08:00", "13:00", "20:00"])
    def test_empty_any_time(self, now: str) -> None:
        message = get_contextual_message([], has_set_energy=True, now=now)
        assert message == ContextualMessage(
            type=MessageType.EMPTY,
            message="What matters most today?",
            action=ACTION_ADD_FIRST_FOCUS,
        )

    def test_only_life_tasks_is_empty(self, deep_life_task) -> None:
        message = get_contextual_message([deep_life_task], has_set_energy=True, now="10:00")
        assert message.type == MessageType.EMPTY


# =============================================================================
# In Progress
# =============================================================================


class TestInProgress:
    """Energy set and focus tasks still open."""

    def test_morning_nothing_done(self, quick_focus, deep_focus) -> None:
        message = get_contextual_message([quick_focus, deep_focus], has_set_energy=True, now="09:00")
        assert message.type == MessageType.MORNING
        assert message.message == "2 focus items lined up. Start with the easiest win."

    def test_morning_some_done(self, quick_focus) -> None:
        message = get_contextual_message([_done(), quick_focus], has_set_energy=True, now="09:00")
        assert message.message == "Great start! 1 focus item to go this morning."

    def test_midday(self, quick_focus) -> None:
        message = get_contextual_message([quick_focus], has_set_energy=True, now="14:00")
        assert message.type == MessageType.MIDDAY
        assert message.message == "1 focus item remaining. You've got this! 💪"

    def test_evening_some_done(self, quick_focus, medium_focus) -> None:
        message = get_contextual_message(
            [_done(), quick_focus, medium_focus], has_set_energy=True, now="19:30",
        )
        assert message.type == MessageType.EVENING
        assert message.message.startswith("Nice work today. 2 focus items left")

    def test_critical_urgency_overrides(self, quick_focus) -> None:
        message = get_contextual_message(
            [quick_focus],
            has_set_energy=True,
            time_budget=get_time_budget("18:00", "17:30"),
            now="17:30",
        )
        assert message.type == MessageType.EVENING
        assert message.message == "Under an hour left. Finish one thing, then let the rest wait."
        assert message.action == ACTION_WRAP_UP

    def test_warning_urgency_overrides(self, quick_focus, deep_focus) -> None:
        message = get_contextual_message(
            [quick_focus, deep_focus],
            has_set_energy=True,
            time_budget=get_time_budget("12:00", "10:30"),
            now="10:30",
        )
        assert message.type == MessageType.MIDDAY
        assert message.message == (
            "2 focus items open and under two hours left. Choose your last focus."
        )

    def test_relaxed_budget_uses_time_of_day(self, quick_focus) -> None:
        message = get_contextual_message(
            [quick_focus],
            has_set_energy=True,
            time_budget=get_time_budget("18:00", "09:00"),
            now="09:00",
        )
        assert message.type == MessageType.MORNING

    def test_unresolved_budget_is_ignored(self, quick_focus) -> None:
        message = get_contextual_message(
            [quick_focus], has_set_energy=True, time_budget=get_time_budget("abc", "09:00"), now="09:00",
        )
        assert message.type == MessageType.MORNING


# =============================================================================
# All Done
# =============================================================================


class TestAllDone:
    """Every focus task complete."""

    def test_celebration(self, deep_life_task) -> None:
        message = get_contextual_message(
            [_done(), _done(TaskComplexity.DEEP), deep_life_task], has_set_energy=True, now="15:00",
        )
        assert message.type == MessageType.EVENING
        assert message.message == "All focus items complete! You did 2 meaningful tasks today. 🎉"
        assert message.action == ACTION_REVIEW_TODAY

    def test_singular(self) -> None:
        message = get_contextual_message([_done()], has_set_energy=True, now="15:00")
        assert "You did 1 meaningful task today." in message.message


class TestValidation:
    """Unknown task types are defects."""

    def test_unknown_type_raises(self) -> None:
        task = SimpleNamespace(complexity="quick", completed=False, type="side-quest")
        with pytest.raises(InvariantError):
            get_contextual_message([task], has_set_energy=True, now="10:00")

    def test_to_dict(self) -> None:
        message = get_contextual_message([], has_set_energy=True, now="10:00")
        assert message.to_dict() == {
            "type": "empty",
            "message": "What matters most today?",
            "action": ACTION_ADD_FIRST_FOCUS,
        }
