"""Request-scoped dependencies for Taskboard Server."""

from typing import Any, Dict

from fastapi import Request

from ..services.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """Return the task store owned by the running application."""
    return request.app.state.task_store


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Read the request body as a JSON object.

    A missing, malformed or non-object body yields an empty dict so the
    store, not the framework, decides whether the input is usable.
    """
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
