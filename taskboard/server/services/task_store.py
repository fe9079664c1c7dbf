"""In-memory task store for Taskboard Server."""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ...core.types import ResultStatus, StoreResult, Task, TaskUpdate
from ..config.logging import get_logger

logger = get_logger(__name__)

TITLE_REQUIRED_MESSAGE = "Validation Error: The task title is required."
TITLE_EMPTY_MESSAGE = "Validation Error: Title cannot be empty."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_task_id(raw: Any) -> Optional[int]:
    """Coerce a route or caller supplied identifier to the integer id space.

    Returns None for anything that is not an integer or a string holding one.
    Booleans are rejected even though they are ints in Python.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def _clean_title(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    title = value.strip()
    return title or None


class TaskStore:
    """Owns all tasks, the id counter and the rules for changing them.

    Operations never raise for expected outcomes; each returns a
    `StoreResult` whose status tells the caller what happened.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """Initialize an empty store."""
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1
        self._clock = clock or _utcnow

    def __len__(self) -> int:
        return len(self._tasks)

    def create(self, title: Any) -> StoreResult:
        """Create a task from a title."""
        clean = _clean_title(title)
        if clean is None:
            logger.info("Rejected task creation: missing title")
            return StoreResult.failure(
                ResultStatus.VALIDATION_ERROR, TITLE_REQUIRED_MESSAGE
            )

        task = Task(id=self._next_id, title=clean, created_at=self._clock())
        self._next_id += 1
        self._tasks[task.id] = task

        logger.info(f"Created task: {task.id}")
        return StoreResult.success(ResultStatus.CREATED, task)

    def list(self) -> StoreResult:
        """List all tasks in insertion order."""
        return StoreResult.success(ResultStatus.OK, list(self._tasks.values()))

    def get_by_id(self, task_id: Union[int, str]) -> StoreResult:
        """Get a task by ID."""
        task = self._find(task_id)
        if task is None:
            return StoreResult.failure(
                ResultStatus.NOT_FOUND, f"Task ID {task_id} is not found"
            )
        return StoreResult.success(ResultStatus.OK, task)

    def update(
        self,
        task_id: Union[int, str],
        fields: Union[TaskUpdate, Mapping[str, Any]],
    ) -> StoreResult:
        """Apply a partial update to a task.

        An invalid title rejects the whole update, so a completion flag sent
        alongside it is not applied either. A non-boolean completion flag is
        ignored.
        """
        task = self._find(task_id)
        if task is None:
            return StoreResult.failure(
                ResultStatus.NOT_FOUND, f"Task ID {task_id} is not found"
            )

        update = (
            fields if isinstance(fields, TaskUpdate) else TaskUpdate.from_mapping(fields)
        )

        new_title = None
        if update.has_title():
            new_title = _clean_title(update.title)
            if new_title is None:
                logger.info(f"Rejected update for task {task.id}: empty title")
                return StoreResult.failure(
                    ResultStatus.VALIDATION_ERROR, TITLE_EMPTY_MESSAGE
                )

        if new_title is not None:
            task.title = new_title
        if update.has_is_completed() and isinstance(update.is_completed, bool):
            task.is_completed = update.is_completed
        task.updated_at = self._clock()

        logger.info(f"Updated task: {task.id}")
        return StoreResult.success(ResultStatus.OK, task)

    def delete(self, task_id: Union[int, str]) -> StoreResult:
        """Delete a task permanently. Its id is never handed out again."""
        task = self._find(task_id)
        if task is None:
            return StoreResult.failure(
                ResultStatus.NOT_FOUND, f"Task ID {task_id} not found."
            )

        del self._tasks[task.id]
        logger.info(f"Deleted task: {task.id}")
        return StoreResult.success(ResultStatus.DELETED)

    def _find(self, task_id: Union[int, str]) -> Optional[Task]:
        key = parse_task_id(task_id)
        if key is None:
            return None
        return self._tasks.get(key)
