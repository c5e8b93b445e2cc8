"""Coordinated writes keeping executor availability in step with task status.

Every operation here touches a task row and the row of its assigned executor.
Both writes share one ``store_scope`` so they commit together or not at all.
"""

from __future__ import annotations

import logging
from datetime import date

from sqlmodel.ext.asyncio.session import AsyncSession

from ..db.session import store_scope
from ..errors import NotFoundError, ValidationError
from ..models import Executor, ExecutorStatus, Task, TaskStatus
from ..repositories import ExecutorRepository, TaskRepository, UserRepository

logger = logging.getLogger(__name__)


def executor_status_for(task_status: TaskStatus) -> ExecutorStatus:
    """Return the availability an executor must have for a task in ``task_status``."""
    if task_status == TaskStatus.IN_PROGRESS:
        return ExecutorStatus.BUSY
    return ExecutorStatus.FREE


class TaskCoordinator:
    """Own the task writes that cascade to executor availability."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._tasks = TaskRepository(session)
        self._executors = ExecutorRepository(session)
        self._users = UserRepository(session)

    async def create_task(
        self,
        *,
        title: str,
        description: str | None = None,
        deadline: date | None = None,
        executor_id: int | None = None,
        executor_name: str | None = None,
        created_by: int | None = None,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        """Insert a task and mark its executor busy.

        The executor becomes busy whatever its previous status and whatever
        the initial task status; assigning an already busy executor is allowed.
        An unknown ``executor_id`` or ``created_by`` raises ``ValidationError``.
        """
        async with store_scope(self._session):
            executor: Executor | None = None
            if executor_id is not None:
                executor = await self._executors.get_for_update(executor_id)
                if executor is None:
                    raise ValidationError(
                        f"Executor {executor_id} does not exist.",
                        details={"executor_id": executor_id},
                    )
            if created_by is not None and await self._users.get(created_by) is None:
                raise ValidationError(
                    f"User {created_by} does not exist.",
                    details={"created_by": created_by},
                )
            task = Task(
                title=title,
                description=description,
                deadline=deadline,
                executor_id=executor_id,
                executor_name=executor_name or (executor.name if executor else None),
                created_by=created_by,
                status=status,
            )
            await self._tasks.add(task)
            if executor is not None:
                if executor.status == ExecutorStatus.BUSY:
                    logger.warning(
                        "Executor assigned while already busy",
                        extra={"executor_id": executor.id, "task_id": task.id},
                    )
                await self._set_executor_status(executor, ExecutorStatus.BUSY)
        logger.info(
            "Task created",
            extra={"task_id": task.id, "executor_id": executor_id, "task_status": status.value},
        )
        return task

    async def update_task_status(self, task_id: int, status: TaskStatus) -> Task:
        """Move a task to ``status`` and cascade availability to its executor.

        Raises ``NotFoundError`` when the task does not exist; no executor is
        touched in that case.
        """
        async with store_scope(self._session):
            task = await self._tasks.get_for_update(task_id)
            if task is None:
                raise NotFoundError(f"Task {task_id} not found.")
            task.status = status
            await self._session.flush()
            if task.executor_id is not None:
                executor = await self._executors.get_for_update(task.executor_id)
                if executor is not None:
                    await self._set_executor_status(executor, executor_status_for(status))
        logger.info(
            "Task status updated",
            extra={"task_id": task_id, "executor_id": task.executor_id, "task_status": status.value},
        )
        return task

    async def delete_task(self, task_id: int) -> bool:
        """Delete a task, freeing its executor when the task was in progress.

        Returns ``False`` when the task did not exist.
        """
        async with store_scope(self._session):
            task = await self._tasks.get_for_update(task_id)
            if task is None:
                return False
            executor_id = task.executor_id
            if task.status == TaskStatus.IN_PROGRESS and executor_id is not None:
                executor = await self._executors.get_for_update(executor_id)
                if executor is not None:
                    await self._set_executor_status(executor, ExecutorStatus.FREE)
            await self._tasks.delete(task)
        logger.info("Task deleted", extra={"task_id": task_id, "executor_id": executor_id})
        return True

    async def _set_executor_status(self, executor: Executor, status: ExecutorStatus) -> None:
        executor.status = status
        await self._session.flush()


__all__ = ["TaskCoordinator", "executor_status_for"]
