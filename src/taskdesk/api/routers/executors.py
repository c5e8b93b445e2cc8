"""Executor management endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, status

from ...deps import DatabaseSessionDependency
from ...models import ExecutorStatus
from ...schemas import (
    ExecutorCreate,
    ExecutorCreateResponse,
    ExecutorRead,
    ExecutorStatusUpdate,
    SuccessResponse,
)
from ...services import ExecutorService

router = APIRouter(prefix="/executors", tags=["executors"])

StatusQuery = Annotated[
    ExecutorStatus | None,
    Query(description="Filter results to executors with the supplied availability."),
]


@router.get("", response_model=list[ExecutorRead], summary="List executors")
async def list_executors(
    session: DatabaseSessionDependency,
    status: StatusQuery = None,
) -> list[ExecutorRead]:
    executors = await ExecutorService(session).list_executors(status=status)
    return [ExecutorRead.model_validate(executor) for executor in executors]


@router.get("/{executor_id}", response_model=ExecutorRead, summary="Retrieve an executor by id")
async def get_executor(executor_id: int, session: DatabaseSessionDependency) -> ExecutorRead:
    executor = await ExecutorService(session).get_executor(executor_id)
    return ExecutorRead.model_validate(executor)


@router.post(
    "",
    response_model=ExecutorCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an executor",
)
async def create_executor(
    payload: ExecutorCreate,
    session: DatabaseSessionDependency,
) -> ExecutorCreateResponse:
    executor = await ExecutorService(session).create_executor(
        name=payload.name,
        specialization=payload.specialization,
        rating=payload.rating,
    )
    return ExecutorCreateResponse(executor=ExecutorRead.model_validate(executor))


@router.delete("/{executor_id}", response_model=SuccessResponse, summary="Delete an executor")
async def delete_executor(executor_id: int, session: DatabaseSessionDependency) -> SuccessResponse:
    await ExecutorService(session).delete_executor(executor_id)
    return SuccessResponse()


@router.put(
    "/{executor_id}/status",
    response_model=SuccessResponse,
    summary="Set executor availability",
)
async def update_executor_status(
    executor_id: int,
    payload: ExecutorStatusUpdate,
    session: DatabaseSessionDependency,
) -> SuccessResponse:
    await ExecutorService(session).update_status(executor_id, payload.status)
    return SuccessResponse()
