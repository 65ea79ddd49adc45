"""Gift API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from wishlist.api.dependencies import CurrentSession, SettingsDep, get_gift_service
from wishlist.schemas.gift import GiftCreate, GiftListResponse, GiftResponse, GiftUpdate
from wishlist.services.gift_service import GiftService

router = APIRouter(prefix="/api/gifts", tags=["gifts"])

GiftServiceDep = Annotated[GiftService, Depends(get_gift_service)]


@router.get("/{user_id}", response_model=GiftListResponse)
def get_gifts_by_user(
    user_id: UUID,
    session: CurrentSession,
    service: GiftServiceDep,
    settings: SettingsDep,
    limit: Annotated[int | None, Query(gt=0, le=1000)] = None,
    offset: Annotated[int | None, Query(ge=0)] = None,
):
    """Get the gifts on a user's wishlist."""
    page = service.get_all_by_user_id(
        str(user_id),
        limit if limit is not None else settings.pagination_limit,
        offset if offset is not None else settings.pagination_offset,
    )
    return GiftListResponse.model_validate(page, from_attributes=True)


@router.post("", response_model=GiftResponse, status_code=status.HTTP_201_CREATED)
def create_gift(gift_data: GiftCreate, session: CurrentSession, service: GiftServiceDep):
    """Add a gift to a user's wishlist."""
    gift = service.create(
        name=gift_data.name,
        comments=gift_data.comments,
        url=gift_data.url,
        user_id=str(gift_data.user_id),
    )
    return GiftResponse.model_validate(gift)


@router.get("/gift/{gift_id}", response_model=GiftResponse)
def get_gift(gift_id: UUID, session: CurrentSession, service: GiftServiceDep):
    """Get a specific gift."""
    return GiftResponse.model_validate(service.get_by_id(str(gift_id)))


@router.put("/gift/{gift_id}", response_model=GiftResponse)
def update_gift(
    gift_id: UUID,
    gift_data: GiftUpdate,
    session: CurrentSession,
    service: GiftServiceDep,
):
    """Reserve, release or mark a gift as received."""
    gift = service.update_by_id(
        str(gift_id),
        is_reserved=gift_data.is_reserved,
        reserved_by=gift_data.reserved_by,
        is_received=gift_data.is_received,
    )
    return GiftResponse.model_validate(gift)


@router.delete("/gift/{gift_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_gift(gift_id: UUID, session: CurrentSession, service: GiftServiceDep):
    """Delete a gift."""
    service.delete_by_id(str(gift_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
