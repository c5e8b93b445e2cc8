"""Repository for interacting with executor persistence models."""

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Executor, ExecutorStatus
from .base import BaseRepository


class ExecutorRepository(BaseRepository[Executor]):
    """Concrete repository encapsulating ``Executor`` persistence operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Executor)

    async def list_by_status(self, status: ExecutorStatus) -> list[Executor]:
        """Return executors filtered by availability."""
        result = await self.session.execute(
            select(Executor).where(Executor.status == status).order_by(Executor.id)
        )
        return list(result.scalars().all())
