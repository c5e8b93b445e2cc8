"""Task domain models built with SQLModel."""

from __future__ import annotations

from datetime import date
from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin, enum_values


class TaskStatus(str, Enum):
    """Enumeration of possible task states."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TaskBase(SQLModel, table=False):
    """Shared attributes for task models."""

    title: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    description: str | None = Field(
        default=None,
        sa_column=sa.Column(sa.Text(), nullable=True),
    )
    deadline: date | None = Field(
        default=None,
        sa_column=sa.Column(sa.Date(), nullable=True),
    )
    executor_id: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("executors.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    executor_name: str | None = Field(
        default=None,
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=True),
    )
    created_by: int | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        sa_column=sa.Column(
            sa.Enum(
                TaskStatus,
                name="task_status",
                native_enum=False,
                validate_strings=True,
                values_callable=enum_values,
            ),
            nullable=False,
            server_default=TaskStatus.PENDING.value,
        ),
    )


class Task(TaskBase, TimestampMixin, table=True):
    """Persistent task model."""

    __tablename__ = "tasks"
    __table_args__ = (
        sa.CheckConstraint("length(title) > 0", name="ck_tasks_title_length"),
        sa.Index("ix_tasks_executor_id", "executor_id"),
        sa.Index("ix_tasks_status", "status"),
    )

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["Task", "TaskBase", "TaskStatus"]
