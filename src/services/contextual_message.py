"""
Contextual Messaging for the Compass Capacity Engine.

Picks the one-line nudge shown at the top of the command center, with an
optional action label for the presentation layer to render as a button.

Decision order:
1. Past the hard stop: evening wrap-up, counting completed focus items
2. Energy not set yet: greeting for the time of day, ask for energy
3. No focus tasks at all: empty state, whatever the time of day
4. Focus tasks still open: urgency nudge when time is short, otherwise a
   message keyed by time of day and whether anything is done yet
5. Everything complete: celebration
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, time
from enum import StrEnum
from typing import Any

from src.config.energy import TaskType, to_task_type
from src.models.task import TaskLike
from src.services.time_budget import TimeBudget, TimeOfDay, UrgencyLevel, time_of_day_bucket


class MessageType(StrEnum):
    """Visual theme of the message."""

    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"
    EMPTY = "empty"


ACTION_SET_ENERGY = "Set your energy level to get started"
ACTION_ADD_FIRST_FOCUS = "Add your first focus item"
ACTION_WRAP_UP = "Wrap up one item"
ACTION_REVIEW_TODAY = "Review today"

GREETINGS: dict[TimeOfDay, str] = {
    TimeOfDay.MORNING: "Good morning! Let's plan your day together.",
    TimeOfDay.MIDDAY: "Good afternoon! Let's see what the rest of today can hold.",
    TimeOfDay.EVENING: "Good evening! Let's check in before you wind down.",
}

# (time of day, anything completed yet) -> template with {count} and {noun}
IN_PROGRESS_MESSAGES: dict[tuple[TimeOfDay, bool], str] = {
    (TimeOfDay.MORNING, False): "{count} focus {noun} lined up. Start with the easiest win.",
    (TimeOfDay.MORNING, True): "Great start! {count} focus {noun} to go this morning.",
    (TimeOfDay.MIDDAY, False): "{count} focus {noun} remaining. You've got this! 💪",
    (TimeOfDay.MIDDAY, True): "{count} focus {noun} remaining. You've got this! 💪",
    (TimeOfDay.EVENING, False): "{count} focus {noun} still open. One small step counts.",
    (TimeOfDay.EVENING, True): "Nice work today. {count} focus {noun} left, only if it feels right.",
}

URGENCY_MESSAGES: dict[UrgencyLevel, str] = {
    UrgencyLevel.CRITICAL: "Under an hour left. Finish one thing, then let the rest wait.",
    UrgencyLevel.WARNING: "{count} focus {noun} open and under two hours left. Choose your last focus.",
}


@dataclass(frozen=True)
class ContextualMessage:
    """Nudge text plus an optional action label."""

    type: MessageType
    message: str
    action: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"type": self.type.value, "message": self.message, "action": self.action}


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _past_stop_message(completed: int) -> ContextualMessage:
    parts = ["Your brain is done with deep work."]
    if completed > 0:
        noun = _plural(completed, "item", "items")
        parts.append(f"You completed {completed} focus {noun} today!")
    parts.append("That's a solid day. Rest up! 🌟")
    return ContextualMessage(type=MessageType.EVENING, message=" ".join(parts))


def _in_progress_message(
    remaining: int,
    completed: int,
    bucket: TimeOfDay,
    urgency: UrgencyLevel | None,
) -> ContextualMessage:
    noun = _plural(remaining, "item", "items")

    if urgency == UrgencyLevel.CRITICAL:
        return ContextualMessage(
            type=MessageType.EVENING,
            message=URGENCY_MESSAGES[UrgencyLevel.CRITICAL],
            action=ACTION_WRAP_UP,
        )
    if urgency == UrgencyLevel.WARNING:
        return ContextualMessage(
            type=MessageType.MIDDAY,
            message=URGENCY_MESSAGES[UrgencyLevel.WARNING].format(count=remaining, noun=noun),
        )

    template = IN_PROGRESS_MESSAGES[(bucket, completed > 0)]
    return ContextualMessage(
        type=MessageType(bucket.value),
        message=template.format(count=remaining, noun=noun),
    )


def get_contextual_message(
    tasks: Iterable[TaskLike],
    *,
    has_set_energy: bool,
    time_budget: TimeBudget | None = None,
    now: datetime | time | str | None = None,
) -> ContextualMessage:
    """
    Choose the contextual message for the current moment.

    Args:
        tasks: Today's tasks (life tasks are ignored)
        has_set_energy: Whether the user has picked an energy level
        time_budget: Hard-stop budget, if the user has a hard stop
        now: Current time for the time-of-day bucket; None for the wall clock

    Returns:
        ContextualMessage with type, text and optional action label

    Raises:
        InvariantError: If a task carries an unknown type
    """
    focus_tasks = [task for task in tasks if to_task_type(task.type) == TaskType.FOCUS]
    total_focus = len(focus_tasks)
    completed_focus = sum(1 for task in focus_tasks if task.completed)

    if time_budget is not None and time_budget.is_past_stop:
        return _past_stop_message(completed_focus)

    if not has_set_energy:
        bucket = time_of_day_bucket(now)
        return ContextualMessage(
            type=MessageType(bucket.value),
            message=GREETINGS[bucket],
            action=ACTION_SET_ENERGY,
        )

    if total_focus == 0:
        return ContextualMessage(
            type=MessageType.EMPTY,
            message="What matters most today?",
            action=ACTION_ADD_FIRST_FOCUS,
        )

    if completed_focus < total_focus:
        urgency = time_budget.urgency_level if time_budget is not None else None
        return _in_progress_message(
            remaining=total_focus - completed_focus,
            completed=completed_focus,
            bucket=time_of_day_bucket(now),
            urgency=urgency,
        )

    noun = _plural(completed_focus, "task", "tasks")
    return ContextualMessage(
        type=MessageType.EVENING,
        message=f"All focus items complete! You did {completed_focus} meaningful {noun} today. 🎉",
        action=ACTION_REVIEW_TODAY,
    )


__all__ = [
    "MessageType",
    "ContextualMessage",
    "ACTION_SET_ENERGY",
    "ACTION_ADD_FIRST_FOCUS",
    "ACTION_WRAP_UP",
    "ACTION_REVIEW_TODAY",
    "GREETINGS",
    "IN_PROGRESS_MESSAGES",
    "get_contextual_message",
]
