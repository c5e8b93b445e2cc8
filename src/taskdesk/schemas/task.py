"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from ..models import TaskStatus

TASK_READ_EXAMPLE = {
    "id": 1,
    "title": "Fix bug",
    "description": "Login form rejects valid passwords.",
    "deadline": "2024-02-01",
    "executor_id": 1,
    "executor_name": "Alice",
    "created_by": 1,
    "status": TaskStatus.PENDING.value,
    "created_at": "2024-01-01T12:00:00Z",
}


class TaskCreate(BaseModel):
    """Payload for creating a new task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Fix bug",
                "description": "Login form rejects valid passwords.",
                "deadline": "2024-02-01",
                "executor_id": 1,
                "executor_name": "Alice",
                "created_by": 1,
            }
        }
    )

    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None)
    deadline: date | None = Field(default=None)
    executor_id: int | None = Field(default=None, ge=1)
    executor_name: str | None = Field(default=None, max_length=255)
    created_by: int | None = Field(default=None, ge=1)
    status: TaskStatus = Field(default=TaskStatus.PENDING)


class TaskStatusUpdate(BaseModel):
    """Payload for moving a task to another status."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"status": TaskStatus.IN_PROGRESS.value}}
    )

    status: TaskStatus


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": TASK_READ_EXAMPLE},
    )

    id: int
    title: str
    description: str | None = None
    deadline: date | None = None
    executor_id: int | None = None
    executor_name: str | None = None
    created_by: int | None = None
    status: TaskStatus
    created_at: datetime


class TaskCreateResponse(BaseModel):
    """Envelope returned after a task is created."""

    success: bool = True
    task: TaskRead


__all__ = [
    "TaskCreate",
    "TaskCreateResponse",
    "TaskRead",
    "TaskStatusUpdate",
]
