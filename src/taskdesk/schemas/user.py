"""User-facing Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.security import MAX_PASSWORD_BYTES, password_fits
from ..models import DEFAULT_ROLE


class UserPublic(BaseModel):
    """Public representation of a user; never carries the credential."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str | None = None
    role: str
    created_at: datetime


class UserCreate(BaseModel):
    """Payload for creating a new user."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "password": "s3cret-pass",
                "name": "Jane Doe",
                "role": "user",
            }
        }
    )

    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=MAX_PASSWORD_BYTES)
    name: str | None = Field(default=None, max_length=255)
    role: str = Field(default=DEFAULT_ROLE, min_length=1, max_length=50)

    @field_validator("password")
    @classmethod
    def _password_within_hash_limit(cls, value: str) -> str:
        if not password_fits(value):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded.")
        return value


class UserRoleUpdate(BaseModel):
    """Payload for changing a user's role."""

    role: str = Field(min_length=1, max_length=50)


class UserCreateResponse(BaseModel):
    """Envelope returned after a user is created."""

    success: bool = True
    user: UserPublic


__all__ = ["UserCreate", "UserCreateResponse", "UserPublic", "UserRoleUpdate"]
