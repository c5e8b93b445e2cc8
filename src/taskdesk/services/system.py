"""Service exposing database connectivity checks."""

from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlmodel.ext.asyncio.session import AsyncSession

from ..db.session import store_scope


class SystemService:
    """Operational probes against the data store."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def database_time(self) -> datetime:
        """Round-trip to the database and return its current timestamp."""
        async with store_scope(self._session):
            result = await self._session.execute(sa.select(sa.func.current_timestamp()))
            return result.scalar_one()


__all__ = ["SystemService"]
