"""SQLAlchemy models."""

from wishlist.models.enums import Role
from wishlist.models.gift import Gift
from wishlist.models.user import User

__all__ = [
    "Role",
    "User",
    "Gift",
]
