"""Seed the database with an administrator account and sample executors."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.config import Settings, get_settings
from ..core.logging import configure_logging
from ..services import ExecutorService, UserService
from .session import async_session_maker, init_db

logger = logging.getLogger(__name__)

SAMPLE_EXECUTORS: tuple[dict[str, object], ...] = (
    {"name": "Alice", "specialization": "Backend", "rating": 4.5},
    {"name": "Bob", "specialization": "Frontend", "rating": 4.0},
    {"name": "Carol", "specialization": "QA", "rating": 3.5},
)


async def seed(
    session_factory: async_sessionmaker[AsyncSession] = async_session_maker,
    settings: Settings | None = None,
) -> dict[str, int]:
    """Create the admin user and sample executors when they are missing.

    Running the seed more than once leaves existing rows untouched.
    """

    settings = settings or get_settings()
    created = {"users": 0, "executors": 0}
    async with session_factory() as session:
        users = UserService(session)
        if await users.get_user_by_username(settings.seed_admin_username) is None:
            await users.create_user(
                username=settings.seed_admin_username,
                password=settings.seed_admin_password,
                name=settings.seed_admin_name,
                role="admin",
            )
            created["users"] += 1

        executors = ExecutorService(session)
        if not await executors.list_executors():
            for sample in SAMPLE_EXECUTORS:
                await executors.create_executor(
                    name=str(sample["name"]),
                    specialization=str(sample["specialization"]),
                    rating=float(sample["rating"]),  # type: ignore[arg-type]
                )
                created["executors"] += 1

    logger.info("Seed completed", extra=created)
    return created


async def _main() -> None:
    settings = get_settings()
    configure_logging(settings)
    await init_db()
    await seed(settings=settings)


def main() -> None:
    """Console entry point for ``taskdesk-seed``."""

    asyncio.run(_main())


if __name__ == "__main__":
    main()
