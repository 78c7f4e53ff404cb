"""
Models package for the Compass Capacity Engine.

Usage:
    from src.models import Task, TaskLike
"""

from src.models.task import Task, TaskLike

__all__ = [
    "Task",
    "TaskLike",
]
