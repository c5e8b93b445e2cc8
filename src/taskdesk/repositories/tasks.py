"""Repository for interacting with task persistence models."""

from __future__ import annotations

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Task, TaskStatus
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Concrete repository encapsulating ``Task`` persistence operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)

    async def list_filtered(
        self,
        *,
        status: TaskStatus | None = None,
        executor_id: int | None = None,
    ) -> list[Task]:
        """Return tasks matching the provided filters ordered by id."""
        query = select(Task)
        if status is not None:
            query = query.where(Task.status == status)
        if executor_id is not None:
            query = query.where(Task.executor_id == executor_id)
        result = await self.session.execute(query.order_by(Task.id))
        return list(result.scalars().all())

    async def detach_executor(self, executor_id: int) -> int:
        """Clear the executor reference on its tasks, keeping the name snapshot."""
        result = await self.session.execute(
            update(Task).where(Task.executor_id == executor_id).values(executor_id=None)
        )
        return result.rowcount or 0

    async def detach_creator(self, user_id: int) -> int:
        """Clear the creator reference on tasks created by ``user_id``."""
        result = await self.session.execute(
            update(Task).where(Task.created_by == user_id).values(created_by=None)
        )
        return result.rowcount or 0
