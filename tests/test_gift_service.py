"""Tests for the gift service."""

import logging

import pytest

from wishlist.models.gift import Gift
from wishlist.models.user import User
from wishlist.services.errors import ErrorCode, ServiceError
from wishlist.services.gift_service import GiftService


@pytest.fixture
def owner(db):
    user = User(
        first_name="Gift",
        last_name="Owner",
        email="owner@example.com",
        password_hash="fake",
        roles=["user"],
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def service(db):
    return GiftService(db, logging.getLogger("wishlist.test-gifts"))


def test_create_gift(service, owner):
    """Test that new gifts start unreserved and not received."""
    gift = service.create(name="Broodrooster", comments="zwart of chrome", user_id=owner.id)

    assert gift.id
    assert gift.user_id == owner.id
    assert gift.is_reserved is False
    assert gift.reserved_by is None
    assert gift.is_received is False


def test_create_gift_for_unknown_user(service):
    """Test that gifts need an existing owner."""
    with pytest.raises(ServiceError) as exc_info:
        service.create(name="Socks", user_id="00000000-0000-0000-0000-000000000000")
    assert exc_info.value.code == ErrorCode.NOT_FOUND


def test_gifts_ordered_by_name_descending(service, owner):
    """Test the ordering and paging of a user's gifts."""
    for name in ("Apron", "Candle", "Books"):
        service.create(name=name, user_id=owner.id)

    page = service.get_all_by_user_id(owner.id, limit=2, offset=0)

    assert [gift.name for gift in page["data"]] == ["Candle", "Books"]
    assert page["count"] == 3


def test_reserve_and_release(service, owner):
    """Test reserving a gift and releasing the reservation."""
    gift = service.create(name="Gridlifter", user_id=owner.id)

    reserved = service.update_by_id(gift.id, is_reserved=True, reserved_by="Julie")
    assert reserved.is_reserved is True
    assert reserved.reserved_by == "Julie"

    released = service.update_by_id(gift.id, is_reserved=False)
    assert released.is_reserved is False
    assert released.reserved_by is None


def test_mark_received_keeps_reservation(service, owner):
    """Test that marking a gift received leaves the reservation alone."""
    gift = service.create(name="Gridlifter", user_id=owner.id)
    service.update_by_id(gift.id, is_reserved=True, reserved_by="Julie")

    received = service.update_by_id(gift.id, is_received=True)

    assert received.is_received is True
    assert received.reserved_by == "Julie"


def test_delete_gift(service, owner, db):
    """Test deleting a gift and deleting it again."""
    gift_id = service.create(name="Socks", user_id=owner.id).id

    service.delete_by_id(gift_id)
    assert db.query(Gift).count() == 0

    with pytest.raises(ServiceError) as exc_info:
        service.delete_by_id(gift_id)
    assert exc_info.value.code == ErrorCode.NOT_FOUND


def test_get_missing_gift(service):
    """Test that missing gifts raise NOT_FOUND."""
    with pytest.raises(ServiceError) as exc_info:
        service.get_by_id("00000000-0000-0000-0000-000000000000")
    assert exc_info.value.message == "Gift with id 00000000-0000-0000-0000-000000000000 not found"
