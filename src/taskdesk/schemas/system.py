"""Common system-level response models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Metadata payload returned by the root endpoint."""

    name: str = Field(description="Human-friendly service name")
    environment: str = Field(description="Deployment environment identifier")
    version: str = Field(description="Semantic version of the service")
    api_prefix: str = Field(description="Base path for API routes")


class HealthCheckResponse(BaseModel):
    """Payload returned by the liveness endpoint."""

    status: str = Field(default="OK", description="Service health indicator")
    message: str = Field(default="Server is running")


class DatabaseHealthResponse(BaseModel):
    """Payload returned by the database connectivity probe."""

    status: str = Field(default="OK", description="Database health indicator")
    success: bool = True
    time: datetime = Field(description="Current time reported by the database")


class SuccessResponse(BaseModel):
    """Acknowledgement returned by write endpoints without a body."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Standardised error envelope returned by exception handlers."""

    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error identifier")
    details: Any | None = Field(
        default=None,
        description="Optional structured metadata describing the error context.",
    )
    path: str | None = Field(default=None, description="Request path for unmatched routes")


__all__ = [
    "DatabaseHealthResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "RootResponse",
    "SuccessResponse",
]
