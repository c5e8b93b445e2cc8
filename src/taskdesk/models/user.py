"""User domain models built with SQLModel."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from .common import TimestampMixin

DEFAULT_ROLE = "user"


class UserBase(SQLModel, table=False):
    """Shared attributes for user models."""

    username: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )
    name: str | None = Field(
        default=None,
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=True),
    )
    role: str = Field(
        default=DEFAULT_ROLE,
        max_length=50,
        sa_column=sa.Column(
            sa.String(length=50),
            nullable=False,
            server_default=DEFAULT_ROLE,
        ),
    )


class User(UserBase, TimestampMixin, table=True):
    """Persistent user model."""

    __tablename__ = "users"
    __table_args__ = (sa.UniqueConstraint("username", name="uq_users_username"),)

    id: int | None = Field(default=None, primary_key=True)
    hashed_password: str = Field(
        max_length=255,
        sa_column=sa.Column(sa.String(length=255), nullable=False),
    )


__all__ = ["DEFAULT_ROLE", "User", "UserBase"]
