"""
Task shape consumed by the capacity core.

The core only reads three attributes of a task: complexity, completed and
type. Sourcing and persisting tasks belongs to the caller, so any object
exposing those attributes (a pydantic request model, an ORM row) is accepted
through the TaskLike protocol.

Task type:
- focus: Counts against the daily capacity budget while not completed
- life: Life-maintenance chore, always free
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from src.config.energy import TaskComplexity, TaskType, to_complexity, to_task_type


class TaskLike(Protocol):
    """Anything exposing the three attributes the core reads."""

    @property
    def complexity(self) -> TaskComplexity | str: ...

    @property
    def completed(self) -> bool: ...

    @property
    def type(self) -> TaskType | str: ...


@dataclass(frozen=True)
class Task:
    """
    A focus or life task as seen by the capacity core.

    Attributes:
        complexity: quick | medium | deep
        completed: Whether the task is done
        type: focus | life
        description: Optional free text, never read by the core
    """

    complexity: TaskComplexity
    completed: bool = False
    type: TaskType = TaskType.FOCUS
    description: str = ""

    @property
    def is_focus(self) -> bool:
        return self.type == TaskType.FOCUS

    @property
    def is_open_focus(self) -> bool:
        """Focus task that still consumes capacity."""
        return self.is_focus and not self.completed

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """
        Build a Task from a plain mapping.

        Raises:
            InvariantError: If complexity or type is outside its enumeration
        """
        return cls(
            complexity=to_complexity(data["complexity"]),
            completed=bool(data.get("completed", False)),
            type=to_task_type(data.get("type", TaskType.FOCUS)),
            description=str(data.get("description", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "complexity": self.complexity.value,
            "completed": self.completed,
            "type": self.type.value,
            "description": self.description,
        }


__all__ = ["Task", "TaskLike"]
