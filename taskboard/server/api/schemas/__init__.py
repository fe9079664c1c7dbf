"""API schemas for Taskboard Server."""

from .common import HealthResponse, MessageResponse
from .todos import TodoCreateRequest, TodoResponse, TodoUpdateRequest

__all__ = [
    "HealthResponse",
    "MessageResponse",
    "TodoCreateRequest",
    "TodoResponse",
    "TodoUpdateRequest",
]
