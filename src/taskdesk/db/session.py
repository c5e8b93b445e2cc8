"""Database engine, session and transaction management."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.config import Settings, get_settings
from ..errors import ConflictError, StoreUnavailableError
from .base import metadata

logger = logging.getLogger(__name__)

_CONNECTION_ERRORS: tuple[type[BaseException], ...] = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.TimeoutError,
    asyncio.TimeoutError,
    OSError,
)


def engine_options(settings: Settings) -> dict[str, Any]:
    """Build ``create_async_engine`` keyword arguments for the configured backend."""

    options: dict[str, Any] = {"echo": settings.db_echo, "pool_pre_ping": True}
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        return options
    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
    )
    if url.get_driver_name() == "asyncpg":
        options["connect_args"] = {"timeout": settings.db_connect_timeout}
    return options


settings = get_settings()

engine: AsyncEngine = create_async_engine(settings.database_url, **engine_options(settings))
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield an ``AsyncSession`` for request-scoped work."""
    async with async_session_maker() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create all database tables (primarily for tests and local development)."""
    async with (bind or engine).begin() as connection:
        await connection.run_sync(metadata.create_all)


def _is_connection_error(error: BaseException) -> bool:
    if isinstance(error, _CONNECTION_ERRORS):
        return True
    return isinstance(error, sa_exc.DBAPIError) and error.connection_invalidated


async def _rollback(session: AsyncSession) -> None:
    try:
        await session.rollback()
    except sa_exc.SQLAlchemyError:
        logger.warning("Rollback failed after store error", exc_info=True)


@asynccontextmanager
async def store_scope(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run the enclosed statements as one unit of work.

    Commits once when the block exits normally and rolls back on every other
    exit path. Integrity violations surface as ``ConflictError`` and
    connection-level failures as ``StoreUnavailableError``.
    """

    try:
        yield session
        await session.commit()
    except sa_exc.IntegrityError as exc:
        await _rollback(session)
        raise ConflictError(
            "Resource conflicts with existing data.",
            details={"reason": str(exc.orig)},
        ) from exc
    except BaseException as exc:
        await _rollback(session)
        if _is_connection_error(exc):
            raise StoreUnavailableError() from exc
        raise


__all__ = [
    "async_session_maker",
    "engine",
    "engine_options",
    "get_session",
    "init_db",
    "store_scope",
]
