"""
Capacity Calculator for the Compass Capacity Engine.

Turns an energy level and the day's task list into a capacity snapshot:
how many points the level allows, how many open focus tasks already use,
whether another task fits, and which complexity to suggest next.

Rules:
- Only focus tasks that are not completed consume points
- Life-maintenance tasks are always free, whatever their complexity
- Remaining capacity may go negative (over-capacity is a visible state)
- A new task is admitted only while remaining capacity is strictly positive
- The recommendation never exceeds the level's complexity ceiling

Every call recomputes from its inputs. Nothing is cached and the caller's
task collection is never retained, so it is safe to call on every render.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.config.energy import (
    COMPLEXITY_COST,
    COMPLEXITY_TIERS_DESCENDING,
    MAX_FOCUS_ITEMS,
    EnergyLevel,
    TaskComplexity,
    TaskType,
    capacity_for,
    cost_of,
    to_task_type,
)
from src.models.task import TaskLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapacitySnapshot:
    """
    Capacity figures for one energy level and task list.

    remaining_capacity is total_capacity - used_capacity and may be negative.
    percent_used is 0 whenever total_capacity is 0.
    """

    total_capacity: int
    used_capacity: int
    remaining_capacity: int
    percent_used: float
    can_add_task: bool
    recommended_complexity: TaskComplexity | None
    focus_count: int = 0
    focus_slots_remaining: int = MAX_FOCUS_ITEMS

    @property
    def is_over_capacity(self) -> bool:
        return self.remaining_capacity < 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "total_capacity": self.total_capacity,
            "used_capacity": self.used_capacity,
            "remaining_capacity": self.remaining_capacity,
            "percent_used": self.percent_used,
            "can_add_task": self.can_add_task,
            "recommended_complexity": (
                self.recommended_complexity.value if self.recommended_complexity else None
            ),
            "focus_count": self.focus_count,
            "focus_slots_remaining": self.focus_slots_remaining,
            "is_over_capacity": self.is_over_capacity,
        }


@dataclass(frozen=True)
class TimeAdjustedCapacity:
    """Capacity scaled down as the hard stop approaches."""

    adjusted_capacity: float
    should_add_tasks: bool
    time_message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "adjusted_capacity": self.adjusted_capacity,
            "should_add_tasks": self.should_add_tasks,
            "time_message": self.time_message,
        }


# (upper bound in minutes, exclusive) -> (capacity multiplier, add tasks?, message)
TIME_ADJUSTMENT_TIERS: tuple[tuple[int, float, bool, str], ...] = (
    (60, 0.3, False, "Less than 1 hour left - focus on finishing"),
    (120, 0.6, False, "Less than 2 hours left - minimal new tasks"),
    (180, 0.8, True, "A few hours left - plan carefully"),
)


def _is_open_focus(task: TaskLike) -> bool:
    return to_task_type(task.type) == TaskType.FOCUS and not task.completed


def used_capacity(tasks: Iterable[TaskLike]) -> int:
    """
    Sum the point cost of open focus tasks.

    Completed tasks and life tasks contribute nothing.

    Raises:
        InvariantError: If a task carries an unknown type or complexity
    """
    return sum(cost_of(task.complexity) for task in tasks if _is_open_focus(task))


def recommend_complexity(
    remaining: int,
    ceiling: TaskComplexity | None,
) -> TaskComplexity | None:
    """
    Pick the heaviest tier that fits in the remaining points and the ceiling.

    Returns None when no tier fits or the level allows no tier at all.
    """
    if ceiling is None:
        return None

    ceiling_cost = COMPLEXITY_COST[ceiling]
    for tier in COMPLEXITY_TIERS_DESCENDING:
        cost = COMPLEXITY_COST[tier]
        if cost <= ceiling_cost and cost <= remaining:
            return tier
    return None


def empty_snapshot() -> CapacitySnapshot:
    """Snapshot for a user who has not set an energy level yet."""
    return CapacitySnapshot(
        total_capacity=0,
        used_capacity=0,
        remaining_capacity=0,
        percent_used=0.0,
        can_add_task=False,
        recommended_complexity=None,
        focus_count=0,
        focus_slots_remaining=MAX_FOCUS_ITEMS,
    )


def calculate_capacity(
    energy_level: EnergyLevel | str | None,
    tasks: Iterable[TaskLike],
) -> CapacitySnapshot:
    """
    Compute the capacity snapshot for an energy level and task list.

    Args:
        energy_level: Current energy level, or None when not set yet
        tasks: Tasks exposing complexity, completed and type

    Returns:
        CapacitySnapshot. A None energy level yields the zeroed snapshot.

    Raises:
        InvariantError: If the level, a task type or a complexity is outside
            its enumeration

    Example:
        >>> snap = calculate_capacity("sparky", [Task(TaskComplexity.DEEP)])
        >>> snap.remaining_capacity, snap.recommended_complexity
        (1, <TaskComplexity.QUICK: 'quick'>)
    """
    if energy_level is None:
        return empty_snapshot()

    capacity = capacity_for(energy_level)
    open_focus = [task for task in tasks if _is_open_focus(task)]

    total = capacity.points
    used = sum(cost_of(task.complexity) for task in open_focus)
    remaining = total - used
    percent_used = (used / total) * 100 if total > 0 else 0.0

    snapshot = CapacitySnapshot(
        total_capacity=total,
        used_capacity=used,
        remaining_capacity=remaining,
        percent_used=percent_used,
        can_add_task=remaining > 0,
        recommended_complexity=recommend_complexity(remaining, capacity.max_complexity),
        focus_count=len(open_focus),
        focus_slots_remaining=max(0, MAX_FOCUS_ITEMS - len(open_focus)),
    )

    if snapshot.is_over_capacity:
        logger.debug(
            "Over capacity: level=%s used=%d total=%d",
            energy_level, used, total,
        )
    return snapshot


def time_adjusted_capacity(
    base_capacity: float,
    minutes_until_stop: int,
) -> TimeAdjustedCapacity:
    """
    Scale capacity down as the hard stop approaches.

    Args:
        base_capacity: Capacity before time pressure (usually total_capacity)
        minutes_until_stop: Minutes left until the hard stop

    Returns:
        TimeAdjustedCapacity with the scaled figure and a short message
    """
    if minutes_until_stop <= 0:
        return TimeAdjustedCapacity(
            adjusted_capacity=0.0,
            should_add_tasks=False,
            time_message="Past your hard stop - no more tasks",
        )

    for upper_bound, multiplier, should_add, message in TIME_ADJUSTMENT_TIERS:
        if minutes_until_stop < upper_bound:
            return TimeAdjustedCapacity(
                adjusted_capacity=base_capacity * multiplier,
                should_add_tasks=should_add,
                time_message=message,
            )

    return TimeAdjustedCapacity(
        adjusted_capacity=float(base_capacity),
        should_add_tasks=True,
        time_message="Plenty of time - plan your day",
    )


class CapacityCalculator:
    """
    Capacity calculations behind one object.

    Holds no state between calls; every method recomputes from its inputs.

    Usage:
        calculator = get_capacity_calculator()
        snapshot = calculator.calculate("steady", tasks)
        if snapshot.can_add_task:
            ...
    """

    def calculate(
        self,
        energy_level: EnergyLevel | str | None,
        tasks: Iterable[TaskLike],
    ) -> CapacitySnapshot:
        """See calculate_capacity()."""
        return calculate_capacity(energy_level, tasks)

    def used(self, tasks: Iterable[TaskLike]) -> int:
        """See used_capacity()."""
        return used_capacity(tasks)

    def can_admit(
        self,
        energy_level: EnergyLevel | str | None,
        tasks: Iterable[TaskLike],
    ) -> bool:
        """Whether another focus task may be added right now."""
        return calculate_capacity(energy_level, tasks).can_add_task

    def time_adjusted(
        self,
        base_capacity: float,
        minutes_until_stop: int,
    ) -> TimeAdjustedCapacity:
        """See time_adjusted_capacity()."""
        return time_adjusted_capacity(base_capacity, minutes_until_stop)


# Singleton instance
_calculator: CapacityCalculator | None = None


def get_capacity_calculator() -> CapacityCalculator:
    """Get the singleton CapacityCalculator instance."""
    global _calculator
    if _calculator is None:
        _calculator = CapacityCalculator()
    return _calculator


__all__ = [
    "CapacitySnapshot",
    "TimeAdjustedCapacity",
    "TIME_ADJUSTMENT_TIERS",
    "used_capacity",
    "recommend_complexity",
    "empty_snapshot",
    "calculate_capacity",
    "time_adjusted_capacity",
    "CapacityCalculator",
    "get_capacity_calculator",
]
