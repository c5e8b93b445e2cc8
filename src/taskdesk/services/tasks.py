"""Read-side service for tasks."""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..db.session import store_scope
from ..errors import NotFoundError
from ..models import Task, TaskStatus
from ..repositories import TaskRepository


class TaskService:
    """Query operations for ``Task`` entities.

    Writes that touch executor availability live in ``TaskCoordinator``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = TaskRepository(session)

    async def list_tasks(
        self,
        *,
        status: TaskStatus | None = None,
        executor_id: int | None = None,
    ) -> list[Task]:
        """Return tasks ordered by id, optionally filtered."""
        async with store_scope(self._session):
            return await self._repository.list_filtered(status=status, executor_id=executor_id)

    async def get_task(self, task_id: int) -> Task:
        """Retrieve a task by primary key or raise ``NotFoundError``."""
        async with store_scope(self._session):
            task = await self._repository.get(task_id)
        if task is None:
            raise NotFoundError(f"Task {task_id} not found.")
        return task


__all__ = ["TaskService"]
