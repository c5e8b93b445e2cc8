"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import LoginRequest, LoginResponse
from .executor import ExecutorCreate, ExecutorCreateResponse, ExecutorRead, ExecutorStatusUpdate
from .system import (
    DatabaseHealthResponse,
    ErrorResponse,
    HealthCheckResponse,
    RootResponse,
    SuccessResponse,
)
from .task import TaskCreate, TaskCreateResponse, TaskRead, TaskStatusUpdate
from .user import UserCreate, UserCreateResponse, UserPublic, UserRoleUpdate

__all__ = [
    "DatabaseHealthResponse",
    "ErrorResponse",
    "ExecutorCreate",
    "ExecutorCreateResponse",
    "ExecutorRead",
    "ExecutorStatusUpdate",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "RootResponse",
    "SuccessResponse",
    "TaskCreate",
    "TaskCreateResponse",
    "TaskRead",
    "TaskStatusUpdate",
    "UserCreate",
    "UserCreateResponse",
    "UserPublic",
    "UserRoleUpdate",
]
