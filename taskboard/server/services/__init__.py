"""Services for Taskboard Server."""

from .task_store import TaskStore, parse_task_id

__all__ = [
    "TaskStore",
    "parse_task_id",
]
