"""
Tests for the Task model (src/models/task.py).
"""

from __future__ import annotations

import pytest

from src.config.energy import TaskComplexity, TaskType
from src.lib.exceptions import InvariantError
from src.models.task import Task


class TestTask:
    """Tests for Task defaults, properties and conversion."""

    def test_defaults(self) -> None:
        task = Task(complexity=TaskComplexity.QUICK)
        assert task.completed is False
        assert task.type == TaskType.FOCUS
        assert task.description == ""

    def test_open_focus(self, deep_focus: Task) -> None:
        assert deep_focus.is_focus
        assert deep_focus.is_open_focus

    def test_completed_focus_is_not_open(self, completed_deep_focus: Task) -> None:
        assert completed_deep_focus.is_focus
        assert not completed_deep_focus.is_open_focus

    def test_life_task_is_not_focus(self, deep_life_task: Task) -> None:
        assert not deep_life_task.is_focus
        assert not deep_life_task.is_open_focus

    def test_from_dict(self) -> None:
        task = Task.from_dict({"complexity": "medium", "completed": True, "type": "life"})
        assert task == Task(
            complexity=TaskComplexity.MEDIUM, completed=True, type=TaskType.LIFE,
        )

    def test_from_dict_defaults_to_open_focus(self) -> None:
        task = Task.from_dict({"complexity": "deep"})
        assert task.is_open_focus

    def test_from_dict_rejects_unknown_complexity(self) -> None:
        with pytest.raises(InvariantError):
            Task.from_dict({"complexity": "gigantic"})

    def test_from_dict_rejects_unknown_type(self) -> None:
        with pytest.raises(InvariantError):
            Task.from_dict({"complexity": "quick", "type": "errand"})

    def test_to_dict(self, quick_focus: Task) -> None:
        assert quick_focus.to_dict() == {
            "complexity": "quick",
            "completed": False,
            "type": "focus",
            "description": "Book dentist",
        }

    def test_is_frozen(self, quick_focus: Task) -> None:
        with pytest.raises(AttributeError):
            quick_focus.completed = True  # type: ignore[misc]
