"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Roles granting access to gated parts of the application."""

    USER = "user"
    ADMIN = "admin"
