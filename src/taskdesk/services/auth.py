"""Authentication service verifying login credentials."""

from __future__ import annotations

import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from ..core.security import pwd_context, verify_password
from ..errors import InvalidCredentialsError
from ..models import User
from .users import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Check submitted credentials against stored users."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._user_service = UserService(session)

    async def login(self, username: str, password: str) -> User:
        """Return the user matching ``username`` and ``password``.

        Any mismatch raises the same ``InvalidCredentialsError`` so callers
        cannot tell an unknown username from a wrong password.
        """
        user = await self._user_service.get_user_by_username(username)
        if user is None:
            pwd_context.dummy_verify()
            logger.info("Login rejected")
            raise InvalidCredentialsError()
        if not verify_password(password, user.hashed_password):
            logger.info("Login rejected")
            raise InvalidCredentialsError()
        logger.info("Login succeeded", extra={"user_id": user.id})
        return user


__all__ = ["AuthService"]
