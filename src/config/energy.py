"""
Energy-Capacity Configuration for the Compass Capacity Engine.

Maps each self-reported energy level to a task-point budget and the
heaviest task complexity that level should take on. Task complexities
have a fixed point cost. Both tables are product-tuned constants, built
once at import and never mutated.

Energy levels (highest to lowest):
- sparky: Peak focus, deep work welcome
- steady: Good day, deep work possible
- flowing: Gentle energy, keep tasks medium or lighter
- foggy: Very low, quick wins only
- resting: No deep work expected

Life-maintenance tasks are always free: they never consume points.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any

from src.lib.exceptions import InvariantError


class EnergyLevel(StrEnum):
    """Self-reported energy level."""

    SPARKY = "sparky"
    STEADY = "steady"
    FLOWING = "flowing"
    FOGGY = "foggy"
    RESTING = "resting"


class TaskComplexity(StrEnum):
    """Task complexity tier, ordered from lightest to heaviest."""

    QUICK = "quick"
    MEDIUM = "medium"
    DEEP = "deep"


class TaskType(StrEnum):
    """Focus tasks count against capacity; life tasks never do."""

    FOCUS = "focus"
    LIFE = "life"


@dataclass(frozen=True)
class EnergyCapacity:
    """Point budget and complexity ceiling for one energy level."""

    points: int
    max_complexity: TaskComplexity | None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "points": self.points,
            "max_complexity": self.max_complexity.value if self.max_complexity else None,
        }


# Point cost per complexity tier
COMPLEXITY_COST: dict[TaskComplexity, int] = {
    TaskComplexity.QUICK: 1,
    TaskComplexity.MEDIUM: 2,
    TaskComplexity.DEEP: 3,
}

LIFE_TASK_COST = 0

# Hard limit on open focus items, independent of points
MAX_FOCUS_ITEMS = 5

# Heaviest first, for recommendation lookups
COMPLEXITY_TIERS_DESCENDING: tuple[TaskComplexity, ...] = (
    TaskComplexity.DEEP,
    TaskComplexity.MEDIUM,
    TaskComplexity.QUICK,
)

CAPACITY_TABLE: dict[EnergyLevel, EnergyCapacity] = {
    EnergyLevel.SPARKY: EnergyCapacity(points=4, max_complexity=TaskComplexity.DEEP),
    EnergyLevel.STEADY: EnergyCapacity(points=3, max_complexity=TaskComplexity.DEEP),
    EnergyLevel.FLOWING: EnergyCapacity(points=2, max_complexity=TaskComplexity.MEDIUM),
    EnergyLevel.FOGGY: EnergyCapacity(points=1, max_complexity=TaskComplexity.QUICK),
    EnergyLevel.RESTING: EnergyCapacity(points=0, max_complexity=None),
}

# Short status label shown next to the energy level
CAPACITY_LABELS: dict[EnergyLevel, str] = {
    EnergyLevel.SPARKY: "Peak focus",
    EnergyLevel.STEADY: "Good energy",
    EnergyLevel.FLOWING: "Gentle energy",
    EnergyLevel.FOGGY: "Low energy",
    EnergyLevel.RESTING: "Rest mode",
}

DISPLAY_NAMES: dict[EnergyLevel, str] = {
    EnergyLevel.SPARKY: "Sparky",
    EnergyLevel.STEADY: "Steady",
    EnergyLevel.FLOWING: "Flowing",
    EnergyLevel.FOGGY: "Foggy",
    EnergyLevel.RESTING: "Resting",
}

GUIDANCE_MESSAGES: dict[EnergyLevel, str] = {
    EnergyLevel.SPARKY: "Plenty of spark. Pick one meaningful win to protect.",
    EnergyLevel.STEADY: "Steady energy. Take one focused step forward.",
    EnergyLevel.FLOWING: "Gentle flow. Keep things light and breathable.",
    EnergyLevel.FOGGY: "Low energy. Aim for one small win today.",
    EnergyLevel.RESTING: "Rest up. Light maintenance only if it feels good.",
}


def _require_complete(table: dict[Any, Any], enum_type: type[Enum], name: str) -> None:
    """Fail at import if a constant table misses an enum member."""
    missing = [member.value for member in enum_type if member not in table]
    if missing:
        raise InvariantError(f"{name} has no entry for: {', '.join(missing)}")


_require_complete(COMPLEXITY_COST, TaskComplexity, "COMPLEXITY_COST")
_require_complete(CAPACITY_TABLE, EnergyLevel, "CAPACITY_TABLE")
_require_complete(CAPACITY_LABELS, EnergyLevel, "CAPACITY_LABELS")
_require_complete(DISPLAY_NAMES, EnergyLevel, "DISPLAY_NAMES")
_require_complete(GUIDANCE_MESSAGES, EnergyLevel, "GUIDANCE_MESSAGES")


def to_energy_level(value: EnergyLevel | str) -> EnergyLevel:
    """
    Coerce a value into an EnergyLevel.

    Raises:
        InvariantError: If the value is not one of the five levels
    """
    try:
        return EnergyLevel(value)
    except ValueError as e:
        raise InvariantError(f"Unknown energy level: {value!r}") from e


def to_complexity(value: TaskComplexity | str) -> TaskComplexity:
    """
    Coerce a value into a TaskComplexity.

    Raises:
        InvariantError: If the value is not quick, medium or deep
    """
    try:
        return TaskComplexity(value)
    except ValueError as e:
        raise InvariantError(f"Unknown task complexity: {value!r}") from e


def to_task_type(value: TaskType | str) -> TaskType:
    """
    Coerce a value into a TaskType.

    Raises:
        InvariantError: If the value is not focus or life
    """
    try:
        return TaskType(value)
    except ValueError as e:
        raise InvariantError(f"Unknown task type: {value!r}") from e


def cost_of(complexity: TaskComplexity | str) -> int:
    """Point cost of a focus task of the given complexity."""
    return COMPLEXITY_COST[to_complexity(complexity)]


def capacity_for(level: EnergyLevel | str) -> EnergyCapacity:
    """
    Look up the point budget and complexity ceiling for an energy level.

    Example:
        >>> capacity_for("resting").points
        0
        >>> capacity_for(EnergyLevel.FLOWING).max_complexity
        <TaskComplexity.MEDIUM: 'medium'>
    """
    return CAPACITY_TABLE[to_energy_level(level)]


def range_text(level: EnergyLevel | str) -> str:
    """
    Describe how many tasks an energy level's points can buy.

    The low end assumes every task is at the level's heaviest allowed tier,
    the high end assumes every task is quick.

    Example:
        >>> range_text("flowing")
        '1-2 tasks'
        >>> range_text("resting")
        '0 tasks'
    """
    capacity = capacity_for(level)
    if capacity.max_complexity is None or capacity.points <= 0:
        return "0 tasks"

    fewest = capacity.points // COMPLEXITY_COST[capacity.max_complexity]
    most = capacity.points // COMPLEXITY_COST[TaskComplexity.QUICK]

    if fewest == most:
        return f"{most} task" if most == 1 else f"{most} tasks"
    return f"{fewest}-{most} tasks"


def guidance_message(level: EnergyLevel | str) -> str:
    """One fixed sentence of guidance for the energy level."""
    return GUIDANCE_MESSAGES[to_energy_level(level)]


def capacity_label(level: EnergyLevel | str) -> str:
    """Short status label for the energy level (e.g. "Peak focus")."""
    return CAPACITY_LABELS[to_energy_level(level)]


def display_name(level: EnergyLevel | str) -> str:
    """User-facing name of the energy level."""
    return DISPLAY_NAMES[to_energy_level(level)]


def describe_level(level: EnergyLevel | str) -> dict[str, Any]:
    """Everything the presentation layer shows about one energy level."""
    energy = to_energy_level(level)
    return {
        "level": energy.value,
        "name": display_name(energy),
        "label": capacity_label(energy),
        "range_text": range_text(energy),
        "guidance": guidance_message(energy),
        **capacity_for(energy).to_dict(),
    }


__all__ = [
    "EnergyLevel",
    "TaskComplexity",
    "TaskType",
    "EnergyCapacity",
    "COMPLEXITY_COST",
    "COMPLEXITY_TIERS_DESCENDING",
    "LIFE_TASK_COST",
    "MAX_FOCUS_ITEMS",
    "CAPACITY_TABLE",
    "CAPACITY_LABELS",
    "DISPLAY_NAMES",
    "GUIDANCE_MESSAGES",
    "to_energy_level",
    "to_complexity",
    "to_task_type",
    "cost_of",
    "capacity_for",
    "range_text",
    "guidance_message",
    "capacity_label",
    "display_name",
    "describe_level",
]
