"""Gift service: wishlist entries and their reservation state."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from wishlist.models.gift import Gift
from wishlist.repositories.gift import GiftRepository
from wishlist.repositories.user import UserRepository
from wishlist.services.errors import ServiceError


class GiftService:
    """Service for gifts on users' wishlists."""

    def __init__(
        self,
        db: Session,
        logger: logging.Logger,
        repository: GiftRepository | None = None,
        user_repository: UserRepository | None = None,
    ):
        self.db = db
        self.logger = logger
        self.repository = repository or GiftRepository(db, logger.getChild("repo"))
        self.user_repository = user_repository or UserRepository(db, logger.getChild("repo"))

    def get_all_by_user_id(self, user_id: str, limit: int, offset: int) -> dict[str, Any]:
        """Get a page of the gifts on one user's wishlist."""
        self.logger.debug(f"Fetching all gifts for user {user_id}")
        return {
            "data": self.repository.find_all_by_user_id(user_id, limit, offset),
            "count": self.repository.find_count(user_id),
            "limit": limit,
            "offset": offset,
        }

    def get_by_id(self, gift_id: str) -> Gift:
        self.logger.debug(f"Fetching gift with id {gift_id}")
        gift = self.repository.find_by_id(gift_id)
        if gift is None:
            raise ServiceError.not_found(f"Gift with id {gift_id} not found", {"id": gift_id})
        return gift

    def create(
        self,
        *,
        name: str,
        user_id: str,
        comments: str | None = None,
        url: str | None = None,
    ) -> Gift:
        """Add a gift to the wishlist of ``user_id``."""
        if self.user_repository.find_by_id(user_id) is None:
            raise ServiceError.not_found(f"No user with id {user_id} exists", {"id": user_id})

        self.logger.debug(f"Creating new gift '{name}' for user {user_id}")
        return self.repository.create(name=name, comments=comments, url=url, user_id=user_id)

    def update_by_id(
        self,
        gift_id: str,
        *,
        is_reserved: bool | None = None,
        reserved_by: str | None = None,
        is_received: bool | None = None,
    ) -> Gift:
        """Update the reservation and received state of a gift.

        Fields left as None are kept, except that un-reserving a gift
        without naming a reserver clears ``reserved_by``.
        """
        changes = {
            key: value
            for key, value in (
                ("is_reserved", is_reserved),
                ("reserved_by", reserved_by),
                ("is_received", is_received),
            )
            if value is not None
        }
        if is_reserved is False and reserved_by is None:
            # Releasing a reservation forgets who held it
            changes["reserved_by"] = None
        self.logger.debug(f"Updating gift with id {gift_id}: {changes}")
        gift = self.repository.update_by_id(gift_id, changes)
        if gift is None:
            raise ServiceError.not_found(f"Gift with id {gift_id} not found", {"id": gift_id})
        return gift

    def delete_by_id(self, gift_id: str) -> None:
        self.logger.debug(f"Deleting gift with id {gift_id}")
        if not self.repository.delete_by_id(gift_id):
            raise ServiceError.not_found(f"Gift with id {gift_id} not found", {"id": gift_id})
