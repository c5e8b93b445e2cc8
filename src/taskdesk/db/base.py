"""Metadata registry importing every table model."""

from __future__ import annotations

from sqlmodel import SQLModel

from ..models import Executor, Task, User

metadata = SQLModel.metadata

__all__ = ["Executor", "SQLModel", "Task", "User", "metadata"]
