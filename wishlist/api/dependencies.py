"""FastAPI dependencies for sessions and services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from wishlist.config import Settings, get_settings
from wishlist.database import get_db
from wishlist.logging_config import get_child_logger
from wishlist.services.gift_service import GiftService
from wishlist.services.password import PasswordHasher
from wishlist.services.session import AuthSession, SessionAuthenticator
from wishlist.services.tokens import TokenService
from wishlist.services.user_service import UserService


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher."""
    return PasswordHasher()


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service holding the signing secret."""
    return TokenService(get_settings())


def get_session_authenticator(
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> SessionAuthenticator:
    """Get the session authenticator."""
    return SessionAuthenticator(token_service, get_child_logger("session"))


def get_current_session(
    authenticator: Annotated[SessionAuthenticator, Depends(get_session_authenticator)],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthSession:
    """Get the verified session of the caller from the Authorization header."""
    return authenticator.authenticate(authorization)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db, password_hasher, token_service, get_child_logger("user-service"))


def get_gift_service(
    db: Annotated[Session, Depends(get_db)],
) -> GiftService:
    """Get gift service with dependencies."""
    return GiftService(db, get_child_logger("gift-service"))


SettingsDep = Annotated[Settings, Depends(get_settings)]
CurrentSession = Annotated[AuthSession, Depends(get_current_session)]
