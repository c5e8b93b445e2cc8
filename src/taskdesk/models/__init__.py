"""Domain models exposed by the service."""

from __future__ import annotations

from .common import TimestampMixin, utcnow
from .executor import MAX_RATING, Executor, ExecutorBase, ExecutorStatus
from .task import Task, TaskBase, TaskStatus
from .user import DEFAULT_ROLE, User, UserBase

__all__ = [
    "MAX_RATING",
    "DEFAULT_ROLE",
    "Executor",
    "ExecutorBase",
    "ExecutorStatus",
    "Task",
    "TaskBase",
    "TaskStatus",
    "TimestampMixin",
    "User",
    "UserBase",
    "utcnow",
]
