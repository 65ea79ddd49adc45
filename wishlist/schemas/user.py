"""User and authentication schemas."""

from pydantic import ConfigDict, EmailStr, Field

from wishlist.schemas.base import CamelModel


class UserRegister(CamelModel):
    """User registration request."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=30)


class UserLogin(CamelModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserUpdate(CamelModel):
    """Update a user's profile."""

    first_name: str | None = Field(None, min_length=1, max_length=255)
    last_name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)


class UserResponse(CamelModel):
    """Public view of a user; never includes credentials."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    roles: list[str]
    img: str | None = None


class LoginResponse(CamelModel):
    """Authentication response with token and user info."""

    user: UserResponse
    token: str


class UserListResponse(CamelModel):
    """A page of users."""

    data: list[UserResponse]
    count: int
    limit: int
    offset: int
