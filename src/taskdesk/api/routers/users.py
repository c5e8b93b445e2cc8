"""User management endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import DatabaseSessionDependency
from ...schemas import (
    SuccessResponse,
    UserCreate,
    UserCreateResponse,
    UserPublic,
    UserRoleUpdate,
)
from ...services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserPublic], summary="List users")
async def list_users(session: DatabaseSessionDependency) -> list[UserPublic]:
    users = await UserService(session).list_users()
    return [UserPublic.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserPublic, summary="Retrieve a user by id")
async def get_user(user_id: int, session: DatabaseSessionDependency) -> UserPublic:
    user = await UserService(session).get_user(user_id)
    return UserPublic.model_validate(user)


@router.post(
    "",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    payload: UserCreate,
    session: DatabaseSessionDependency,
) -> UserCreateResponse:
    user = await UserService(session).create_user(
        username=payload.username,
        password=payload.password,
        name=payload.name,
        role=payload.role,
    )
    return UserCreateResponse(user=UserPublic.model_validate(user))


@router.delete("/{user_id}", response_model=SuccessResponse, summary="Delete a user")
async def delete_user(user_id: int, session: DatabaseSessionDependency) -> SuccessResponse:
    await UserService(session).delete_user(user_id)
    return SuccessResponse()


@router.put("/{user_id}/role", response_model=SuccessResponse, summary="Change a user's role")
async def update_user_role(
    user_id: int,
    payload: UserRoleUpdate,
    session: DatabaseSessionDependency,
) -> SuccessResponse:
    await UserService(session).update_role(user_id, payload.role)
    return SuccessResponse()
