"""Service layer encapsulating executor-related operations."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..db.session import store_scope
from ..errors import NotFoundError, ValidationError
from ..models import MAX_RATING, Executor, ExecutorStatus
from ..repositories import ExecutorRepository, TaskRepository

logger = logging.getLogger(__name__)


class ExecutorService:
    """High-level business operations for ``Executor`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = ExecutorRepository(session)
        self._task_repository = TaskRepository(session)

    @property
    def repository(self) -> ExecutorRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def list_executors(self, status: ExecutorStatus | None = None) -> list[Executor]:
        """Return executors ordered by id, optionally filtered by availability."""
        async with store_scope(self._session):
            if status is not None:
                return await self._repository.list_by_status(status)
            return await self._repository.list()

    async def get_executor(self, executor_id: int) -> Executor:
        """Fetch an executor by primary key or raise ``NotFoundError``."""
        async with store_scope(self._session):
            executor = await self._repository.get(executor_id)
        if executor is None:
            raise NotFoundError(f"Executor {executor_id} not found.")
        return executor

    async def create_executor(
        self,
        *,
        name: str,
        rating: float,
        specialization: str | None = None,
    ) -> Executor:
        """Register a new executor; new executors start out free.

        ``rating`` is rounded to the two decimals the column keeps, so the
        returned executor matches what a later read sees.
        """
        stored_rating = round(float(rating), 2)
        if not 0 <= stored_rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between 0 and {MAX_RATING}.",
                details={"rating": rating},
            )
        async with store_scope(self._session):
            executor = Executor(
                name=name,
                specialization=specialization,
                rating=stored_rating,
                status=ExecutorStatus.FREE,
            )
            await self._repository.add(executor)
        logger.info("Executor created", extra={"executor_id": executor.id})
        return executor

    async def update_status(self, executor_id: int, status: ExecutorStatus) -> Executor:
        """Explicitly set executor availability."""
        async with store_scope(self._session):
            executor = await self._repository.get(executor_id)
            if executor is None:
                raise NotFoundError(f"Executor {executor_id} not found.")
            executor.status = status
            await self._session.flush()
        logger.info(
            "Executor status set",
            extra={"executor_id": executor_id, "executor_status": status.value},
        )
        return executor

    async def delete_executor(self, executor_id: int) -> bool:
        """Delete an executor, returning ``True`` if a record was removed.

        Assigned tasks are kept; they lose the reference but keep the
        ``executor_name`` snapshot.
        """
        async with store_scope(self._session):
            executor = await self._repository.get(executor_id)
            if executor is None:
                return False
            detached = await self._task_repository.detach_executor(executor_id)
            await self._repository.delete(executor)
        logger.info(
            "Executor deleted",
            extra={"executor_id": executor_id, "detached_tasks": detached},
        )
        return True


__all__ = ["ExecutorService"]
