"""Example collection types for collectkit.

This package demonstrates library usage but is not part of the core API.
"""

from .components import Task, TaskQueue

__all__ = [
    "Task",
    "TaskQueue",
]
