"""Route handling the login check."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import DatabaseSessionDependency
from ...schemas import LoginRequest, LoginResponse, UserPublic
from ...services import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Verify a username and password",
)
async def login(payload: LoginRequest, session: DatabaseSessionDependency) -> LoginResponse:
    user = await AuthService(session).login(payload.username, payload.password)
    return LoginResponse(user=UserPublic.model_validate(user))
