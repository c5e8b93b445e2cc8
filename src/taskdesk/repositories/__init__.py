"""Database repositories for encapsulating persistence logic."""

from __future__ import annotations

from .executors import ExecutorRepository
from .tasks import TaskRepository
from .users import UserRepository

__all__ = ["ExecutorRepository", "TaskRepository", "UserRepository"]
