"""User service: registration, login and profile management."""

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from wishlist.models.enums import Role
from wishlist.models.user import User
from wishlist.repositories.user import UserRepository
from wishlist.services.errors import ServiceError
from wishlist.services.password import PasswordHasher
from wishlist.services.tokens import TokenService

LOGIN_FAILED = "The given email and password do not match"


@dataclass
class LoginData:
    """A user together with a freshly issued session token."""

    user: User
    token: str


class UserService:
    """Service for user accounts."""

    def __init__(
        self,
        db: Session,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        logger: logging.Logger,
        repository: UserRepository | None = None,
    ):
        self.db = db
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.logger = logger
        self.repository = repository or UserRepository(db, logger.getChild("repo"))

    def _make_login_data(self, user: User) -> LoginData:
        return LoginData(user=user, token=self.token_service.issue(user))

    def register(self, first_name: str, last_name: str, email: str, password: str) -> LoginData:
        """Create a user with the default role and sign them in."""
        self.logger.debug(f"Creating a new user: {first_name} {last_name} <{email}>")
        user = self.repository.create(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=self.password_hasher.hash(password),
            roles=[Role.USER.value],
        )
        return self._make_login_data(user)

    def login(self, email: str, password: str) -> LoginData:
        """Sign a user in with email and password.

        Unknown emails and wrong passwords are logged separately but
        raise the same error after the same amount of hashing work, so
        callers cannot tell them apart.
        """
        user = self.repository.find_by_email(email)
        if user is None:
            self.password_hasher.dummy_verify()
            self.logger.info(f"Login failed: no user with email {email}")
            raise ServiceError.unauthorized(LOGIN_FAILED)

        if not self.password_hasher.verify(password, user.password_hash):
            self.logger.info(f"Login failed: wrong password for user {user.id}")
            raise ServiceError.unauthorized(LOGIN_FAILED)

        return self._make_login_data(user)

    def get_all(
        self, limit: int, offset: int, exclude_user_id: str | None = None
    ) -> dict[str, Any]:
        """Get a page of users, leaving out the caller."""
        self.logger.debug(f"Fetching all users (limit={limit}, offset={offset})")
        data = self.repository.find_all(limit, offset, exclude_user_id)
        return {
            "data": data,
            "count": self.repository.find_count(),
            "limit": limit,
            "offset": offset,
        }

    def get_by_id(self, user_id: str) -> User:
        self.logger.debug(f"Fetching user with id {user_id}")
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise ServiceError.not_found(f"No user with id {user_id} exists", {"id": user_id})
        return user

    def update_by_id(
        self,
        user_id: str,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
    ) -> User:
        """Update the name and email of a user. Fields left as None are kept."""
        changes = {
            key: value
            for key, value in (
                ("first_name", first_name),
                ("last_name", last_name),
                ("email", email),
            )
            if value is not None
        }
        self.logger.debug(f"Updating user with id {user_id}: {sorted(changes)}")
        user = self.repository.update_by_id(user_id, changes)
        if user is None:
            raise ServiceError.not_found(f"No user with id {user_id} exists", {"id": user_id})
        return user

    def delete_by_id(self, user_id: str) -> None:
        self.logger.debug(f"Deleting user with id {user_id}")
        if not self.repository.delete_by_id(user_id):
            raise ServiceError.not_found(f"No user with id {user_id} exists", {"id": user_id})
