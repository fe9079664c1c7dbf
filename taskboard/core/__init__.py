"""Core domain types for Taskboard."""

from .types import ResultStatus, StoreResult, Task, TaskUpdate

__all__ = [
    "ResultStatus",
    "StoreResult",
    "Task",
    "TaskUpdate",
]
