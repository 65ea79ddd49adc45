"""User API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from wishlist.api.dependencies import CurrentSession, SettingsDep, get_user_service
from wishlist.models.enums import Role
from wishlist.schemas.user import (
    LoginResponse,
    UserListResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from wishlist.services.session import AuthSession, require_role
from wishlist.services.user_service import LoginData, UserService

router = APIRouter(prefix="/api/users", tags=["users"])

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def to_login_response(login_data: LoginData) -> LoginResponse:
    return LoginResponse(
        user=UserResponse.model_validate(login_data.user),
        token=login_data.token,
    )


def require_self_or_admin(session: AuthSession, user_id: str) -> None:
    """Changing someone else's account is reserved for admins."""
    if session.user_id != user_id:
        require_role(Role.ADMIN, session.roles)


@router.post("/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, service: UserServiceDep):
    """Register a new user and sign them in."""
    login_data = service.register(
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        password=user_data.password,
    )
    return to_login_response(login_data)


@router.post("/login", response_model=LoginResponse)
def login(credentials: UserLogin, service: UserServiceDep):
    """Login with email and password."""
    return to_login_response(service.login(credentials.email, credentials.password))


@router.get("", response_model=UserListResponse)
def get_all_users(
    session: CurrentSession,
    service: UserServiceDep,
    settings: SettingsDep,
    limit: Annotated[int | None, Query(gt=0, le=1000)] = None,
    offset: Annotated[int | None, Query(ge=0)] = None,
):
    """Get all users except the caller."""
    page = service.get_all(
        limit if limit is not None else settings.pagination_limit,
        offset if offset is not None else settings.pagination_offset,
        exclude_user_id=session.user_id,
    )
    return UserListResponse.model_validate(page, from_attributes=True)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UUID, session: CurrentSession, service: UserServiceDep):
    """Get a user by id."""
    return UserResponse.model_validate(service.get_by_id(str(user_id)))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: UUID,
    user_data: UserUpdate,
    session: CurrentSession,
    service: UserServiceDep,
):
    """Update a user's name and email."""
    require_self_or_admin(session, str(user_id))
    user = service.update_by_id(
        str(user_id),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
    )
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: UUID, session: CurrentSession, service: UserServiceDep):
    """Delete a user and all of their gifts."""
    require_self_or_admin(session, str(user_id))
    service.delete_by_id(str(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
