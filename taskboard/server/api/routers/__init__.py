"""API routers for Taskboard Server."""

from . import health, todos

__all__ = ["health", "todos"]
