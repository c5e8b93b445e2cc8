"""Health and readiness endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import DatabaseSessionDependency
from ...schemas import DatabaseHealthResponse, HealthCheckResponse
from ...services import SystemService

router = APIRouter(tags=["system"])
api_router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def read_health() -> HealthCheckResponse:
    """Return a simple heartbeat payload for health checks."""
    return HealthCheckResponse()


@router.get(
    "/health-db",
    response_model=DatabaseHealthResponse,
    summary="Database connectivity check",
)
async def read_database_health(session: DatabaseSessionDependency) -> DatabaseHealthResponse:
    """Query the database clock; failures surface as a 500 error envelope."""
    current_time = await SystemService(session).database_time()
    return DatabaseHealthResponse(time=current_time)


api_router.add_api_route(
    "/test-db",
    read_database_health,
    methods=["GET"],
    response_model=DatabaseHealthResponse,
    summary="Database connectivity check (API alias)",
)
