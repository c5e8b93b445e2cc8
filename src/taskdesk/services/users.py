"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.security import MAX_PASSWORD_BYTES, get_password_hash, password_fits
from ..db.session import store_scope
from ..errors import ConflictError, NotFoundError, ValidationError
from ..models import DEFAULT_ROLE, User
from ..repositories import TaskRepository, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """High-level business operations for ``User`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = UserRepository(session)
        self._task_repository = TaskRepository(session)

    @property
    def repository(self) -> UserRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def list_users(self) -> list[User]:
        """Return all registered users in insertion order."""
        async with store_scope(self._session):
            return await self._repository.list()

    async def get_user(self, user_id: int) -> User:
        """Fetch a user by primary key or raise ``NotFoundError``."""
        async with store_scope(self._session):
            user = await self._repository.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found.")
        return user

    async def get_user_by_username(self, username: str) -> User | None:
        """Fetch a user by login name."""
        async with store_scope(self._session):
            return await self._repository.get_by_username(username)

    async def create_user(
        self,
        *,
        username: str,
        password: str,
        name: str | None = None,
        role: str = DEFAULT_ROLE,
    ) -> User:
        """Create and persist a new user with a hashed credential."""
        if not password_fits(password):
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded.",
                details={"field": "password"},
            )
        hashed_password = get_password_hash(password)
        async with store_scope(self._session):
            if await self._repository.get_by_username(username) is not None:
                raise ConflictError(f"Username '{username}' is already taken.")
            user = User(
                username=username,
                name=name,
                role=role,
                hashed_password=hashed_password,
            )
            await self._repository.add(user)
        logger.info("User created", extra={"user_id": user.id, "role": role})
        return user

    async def update_role(self, user_id: int, role: str) -> User:
        """Change the role of an existing user."""
        async with store_scope(self._session):
            user = await self._repository.get(user_id)
            if user is None:
                raise NotFoundError(f"User {user_id} not found.")
            user.role = role
            await self._session.flush()
        logger.info("User role updated", extra={"user_id": user_id, "role": role})
        return user

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user by ID, returning ``True`` if a record was removed.

        Tasks created by the user survive with their creator reference cleared.
        """
        async with store_scope(self._session):
            user = await self._repository.get(user_id)
            if user is None:
                return False
            await self._task_repository.detach_creator(user_id)
            await self._repository.delete(user)
        logger.info("User deleted", extra={"user_id": user_id})
        return True
