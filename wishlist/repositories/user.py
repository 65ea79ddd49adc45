"""User repository."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wishlist.models.user import User


class UserRepository:
    """CRUD access to the ``user`` table."""

    def __init__(self, db: Session, logger: logging.Logger):
        self.db = db
        self.logger = logger

    def find_all(self, limit: int, offset: int, exclude_user_id: str | None = None) -> list[User]:
        """Get a page of users ordered by first name."""
        query = self.db.query(User)
        if exclude_user_id is not None:
            query = query.filter(User.id != exclude_user_id)
        return query.order_by(User.first_name.asc()).limit(limit).offset(offset).all()

    def find_count(self) -> int:
        """Count all users."""
        return self.db.query(func.count(User.id)).scalar() or 0

    def find_by_id(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
        roles: list[str],
    ) -> User:
        """Insert a new user row."""
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
            roles=roles,
        )
        try:
            self.db.add(user)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.error(f"Error in create: {e}", extra={"email": email})
            raise
        self.db.refresh(user)
        return user

    def update_by_id(self, user_id: str, changes: dict) -> User | None:
        """Apply the given column changes. Returns None when the user is absent."""
        user = self.find_by_id(user_id)
        if user is None:
            return None
        for key, value in changes.items():
            setattr(user, key, value)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.error(f"Error in update_by_id: {e}", extra={"user_id": user_id})
            raise
        self.db.refresh(user)
        return user

    def delete_by_id(self, user_id: str) -> bool:
        """Delete a user and, through the relationship cascade, its gifts."""
        user = self.find_by_id(user_id)
        if user is None:
            return False
        try:
            self.db.delete(user)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.error(f"Error in delete_by_id: {e}", extra={"user_id": user_id})
            raise
        return True
