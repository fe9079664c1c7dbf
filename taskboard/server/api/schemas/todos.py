"""Todo schemas for Taskboard Server."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TodoCreateRequest(BaseModel):
    """Request model for creating a todo."""

    title: str = Field(..., description="Task title, surrounding whitespace is trimmed")

    class Config:
        json_schema_extra = {"example": {"title": "Buy milk"}}


class TodoUpdateRequest(BaseModel):
    """Request model for partially updating a todo."""

    title: Optional[str] = Field(None, description="New task title")
    is_completed: Optional[bool] = Field(None, description="New completion flag")

    class Config:
        json_schema_extra = {
            "example": {"title": "Walk the dog", "is_completed": True}
        }


class TodoResponse(BaseModel):
    """Response model for todo data."""

    id: int = Field(..., description="Todo ID")
    title: str = Field(..., description="Task title")
    is_completed: bool = Field(..., description="Whether the task is completed")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: Optional[datetime] = Field(
        None, description="Last update timestamp, omitted until the first update"
    )

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 2,
                "title": "Walk the dog",
                "is_completed": True,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:05:00Z",
            }
        }
