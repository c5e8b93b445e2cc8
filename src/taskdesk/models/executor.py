"""Executor domain models built with SQLModel."""

from __future__ import annotations

from enum import Enum

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin, enum_values

# Largest value the NUMERIC(6, 2) rating column holds.
MAX_RATING = 9999.99


class ExecutorStatus(str, Enum):
    """Availability of an executor."""

    FREE = "free"
    BUSY = "busy"


class ExecutorBase(SQLModel, table=False):
    """Shared attributes for executor models."""

    name: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    specialization: str | None = Field(
        default=None,
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=True),
    )
    rating: float = Field(
        default=0.0,
        sa_column=sa.Column(
            sa.Numeric(precision=6, scale=2, asdecimal=False),
            nullable=False,
            server_default="0",
        ),
    )
    status: ExecutorStatus = Field(
        default=ExecutorStatus.FREE,
        sa_column=sa.Column(
            sa.Enum(
                ExecutorStatus,
                name="executor_status",
                native_enum=False,
                validate_strings=True,
                values_callable=enum_values,
            ),
            nullable=False,
            server_default=ExecutorStatus.FREE.value,
        ),
    )


class Executor(ExecutorBase, TimestampMixin, table=True):
    """Persistent executor model."""

    __tablename__ = "executors"

    id: int | None = Field(default=None, primary_key=True)


__all__ = ["MAX_RATING", "Executor", "ExecutorBase", "ExecutorStatus"]
