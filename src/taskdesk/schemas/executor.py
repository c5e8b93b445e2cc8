"""Executor-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..models import MAX_RATING, ExecutorStatus

EXECUTOR_READ_EXAMPLE = {
    "id": 1,
    "name": "Alice",
    "specialization": "Backend",
    "rating": 4.5,
    "status": ExecutorStatus.FREE.value,
    "created_at": "2024-01-01T12:00:00Z",
}


class ExecutorCreate(BaseModel):
    """Payload for registering an executor. ``rating`` accepts numeric strings."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice",
                "specialization": "Backend",
                "rating": "4.5",
            }
        }
    )

    name: str = Field(min_length=1, max_length=255)
    specialization: str | None = Field(default=None, max_length=255)
    rating: float = Field(ge=0, le=MAX_RATING, allow_inf_nan=False)


class ExecutorRead(BaseModel):
    """Public representation of an executor."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": EXECUTOR_READ_EXAMPLE},
    )

    id: int
    name: str
    specialization: str | None = None
    rating: float
    status: ExecutorStatus
    created_at: datetime


class ExecutorStatusUpdate(BaseModel):
    """Payload for explicitly setting executor availability."""

    status: ExecutorStatus


class ExecutorCreateResponse(BaseModel):
    """Envelope returned after an executor is created."""

    success: bool = True
    executor: ExecutorRead


__all__ = [
    "ExecutorCreate",
    "ExecutorCreateResponse",
    "ExecutorRead",
    "ExecutorStatusUpdate",
]
