"""Schemas describing login payloads."""

from __future__ import annotations

from pydantic import BaseModel

from .user import UserPublic


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Successful login result containing the stripped user record."""

    success: bool = True
    user: UserPublic


__all__ = ["LoginRequest", "LoginResponse"]
