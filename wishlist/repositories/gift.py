"""Gift repository."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wishlist.models.gift import Gift


class GiftRepository:
    """CRUD access to the ``gift`` table."""

    def __init__(self, db: Session, logger: logging.Logger):
        self.db = db
        self.logger = logger

    def find_all_by_user_id(self, user_id: str, limit: int, offset: int) -> list[Gift]:
        """Get a page of a user's gifts, ordered by name descending."""
        return (
            self.db.query(Gift)
            .filter(Gift.user_id == user_id)
            .order_by(Gift.name.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )

    def find_count(self, user_id: str) -> int:
        """Count the gifts of one user."""
        return self.db.query(func.count(Gift.id)).filter(Gift.user_id == user_id).scalar() or 0

    def find_by_id(self, gift_id: str) -> Gift | None:
        return self.db.query(Gift).filter(Gift.id == gift_id).first()

    def create(
        self,
        *,
        name: str,
        comments: str | None,
        url: str | None,
        user_id: str,
    ) -> Gift:
        """Insert a new, unreserved gift."""
        gift = Gift(
            name=name,
            comments=comments,
            url=url,
            user_id=user_id,
            is_reserved=False,
            is_received=False,
        )
        try:
            self.db.add(gift)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.error(f"Error in create: {e}", extra={"user_id": user_id})
            raise
        self.db.refresh(gift)
        return gift

    def update_by_id(self, gift_id: str, changes: dict) -> Gift | None:
        """Apply the given column changes. Returns None when the gift is absent."""
        gift = self.find_by_id(gift_id)
        if gift is None:
            return None
        for key, value in changes.items():
            setattr(gift, key, value)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.error(f"Error in update_by_id: {e}", extra={"gift_id": gift_id})
            raise
        self.db.refresh(gift)
        return gift

    def delete_by_id(self, gift_id: str) -> bool:
        gift = self.find_by_id(gift_id)
        if gift is None:
            return False
        try:
            self.db.delete(gift)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            self.logger.error(f"Error in delete_by_id: {e}", extra={"gift_id": gift_id})
            raise
        return True
