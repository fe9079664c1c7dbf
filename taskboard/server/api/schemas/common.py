"""Common schemas for Taskboard Server."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Error response schema."""

    message: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    tasks: int

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "tasks": 3,
            }
        }
