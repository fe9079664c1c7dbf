from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field


class Task(BaseModel):
    """A single tracked task"""

    id: int = Field(..., description="Store-assigned identifier, never reused")
    title: str = Field(..., description="Trimmed, non-empty task title")
    is_completed: bool = Field(
        default=False, description="Whether the task has been completed"
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(
        None, description="Timestamp of the last successful update"
    )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation; `updated_at` is omitted until the first update."""
        return self.model_dump(mode="json", exclude_none=True)


class TaskUpdate(BaseModel):
    """Partial update for a task.

    Each field is either present or absent. Presence is tracked separately
    from the value, so an explicit `None` title is present (and invalid)
    while an omitted title is simply left alone. Values are kept as given;
    the store decides what is acceptable.
    """

    title: Any = Field(None, description="New title, if present")
    is_completed: Any = Field(None, description="New completion flag, if present")

    class Config:
        extra = "ignore"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TaskUpdate":
        """Build an update from a loose request body, ignoring unknown keys."""
        return cls.model_validate(dict(data))

    def has_title(self) -> bool:
        return "title" in self.model_fields_set

    def has_is_completed(self) -> bool:
        return "is_completed" in self.model_fields_set


class ResultStatus(str, Enum):
    """Outcome classification of a store operation"""

    CREATED = "created"
    OK = "ok"
    DELETED = "deleted"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"


SUCCESS_STATUSES = frozenset(
    {ResultStatus.CREATED, ResultStatus.OK, ResultStatus.DELETED}
)


class StoreResult(BaseModel):
    """Tagged result returned by every TaskStore operation"""

    status: ResultStatus = Field(..., description="Outcome classification")
    data: Any = Field(None, description="Payload on success")
    message: Optional[str] = Field(None, description="Explanation on failure")

    @property
    def ok(self) -> bool:
        return self.status in SUCCESS_STATUSES

    @classmethod
    def success(cls, status: ResultStatus, data: Any = None) -> "StoreResult":
        return cls(status=status, data=data)

    @classmethod
    def failure(cls, status: ResultStatus, message: str) -> "StoreResult":
        return cls(status=status, message=message)
