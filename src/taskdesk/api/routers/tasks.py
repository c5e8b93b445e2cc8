"""Task endpoints; writes go through the coordinator."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, status

from ...deps import DatabaseSessionDependency
from ...models import TaskStatus
from ...schemas import (
    SuccessResponse,
    TaskCreate,
    TaskCreateResponse,
    TaskRead,
    TaskStatusUpdate,
)
from ...services import TaskCoordinator, TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])

StatusQuery = Annotated[
    TaskStatus | None,
    Query(description="Filter results to tasks matching the supplied status."),
]
ExecutorQuery = Annotated[
    int | None,
    Query(ge=1, description="Restrict results to tasks assigned to the provided executor id."),
]


@router.get("", response_model=list[TaskRead], summary="List tasks")
async def list_tasks(
    session: DatabaseSessionDependency,
    status: StatusQuery = None,
    executor_id: ExecutorQuery = None,
) -> list[TaskRead]:
    tasks = await TaskService(session).list_tasks(status=status, executor_id=executor_id)
    return [TaskRead.model_validate(task) for task in tasks]


@router.get("/{task_id}", response_model=TaskRead, summary="Retrieve a task by id")
async def get_task(task_id: int, session: DatabaseSessionDependency) -> TaskRead:
    task = await TaskService(session).get_task(task_id)
    return TaskRead.model_validate(task)


@router.post(
    "",
    response_model=TaskCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task and mark its executor busy",
)
async def create_task(
    payload: TaskCreate,
    session: DatabaseSessionDependency,
) -> TaskCreateResponse:
    task = await TaskCoordinator(session).create_task(**payload.model_dump())
    return TaskCreateResponse(task=TaskRead.model_validate(task))


@router.delete(
    "/{task_id}",
    response_model=SuccessResponse,
    summary="Delete a task, freeing its executor if it was in progress",
)
async def delete_task(task_id: int, session: DatabaseSessionDependency) -> SuccessResponse:
    await TaskCoordinator(session).delete_task(task_id)
    return SuccessResponse()


@router.put(
    "/{task_id}/status",
    response_model=SuccessResponse,
    summary="Change task status and cascade executor availability",
)
async def update_task_status(
    task_id: int,
    payload: TaskStatusUpdate,
    session: DatabaseSessionDependency,
) -> SuccessResponse:
    await TaskCoordinator(session).update_task_status(task_id, payload.status)
    return SuccessResponse()
