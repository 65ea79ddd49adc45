"""Pydantic schemas for API requests and responses."""

from wishlist.schemas.error import ErrorResponse
from wishlist.schemas.gift import (
    GiftCreate,
    GiftListResponse,
    GiftOwner,
    GiftResponse,
    GiftUpdate,
)
from wishlist.schemas.user import (
    LoginResponse,
    UserListResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "ErrorResponse",
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "LoginResponse",
    "UserListResponse",
    "GiftCreate",
    "GiftUpdate",
    "GiftOwner",
    "GiftResponse",
    "GiftListResponse",
]
