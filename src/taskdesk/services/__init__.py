"""Domain service layer package."""

from __future__ import annotations

from .auth import AuthService
from .coordinator import TaskCoordinator, executor_status_for
from .executors import ExecutorService
from .system import SystemService
from .tasks import TaskService
from .users import UserService

__all__ = [
    "AuthService",
    "ExecutorService",
    "SystemService",
    "TaskCoordinator",
    "TaskService",
    "UserService",
    "executor_status_for",
]
