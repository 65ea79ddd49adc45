"""Gift schemas."""

from uuid import UUID

from pydantic import ConfigDict, Field

from wishlist.schemas.base import CamelModel


class GiftCreate(CamelModel):
    """Create a new gift on a user's wishlist."""

    name: str = Field(..., min_length=1, max_length=255)
    comments: str | None = Field(None, max_length=500)
    url: str | None = Field(None, max_length=2048)
    user_id: UUID


class GiftUpdate(CamelModel):
    """Reserve, release or mark a gift as received."""

    is_reserved: bool | None = None
    reserved_by: str | None = Field(None, max_length=255)
    is_received: bool | None = None


class GiftOwner(CamelModel):
    """Reference to the user whose wishlist holds the gift."""

    model_config = ConfigDict(from_attributes=True)

    id: str


class GiftResponse(CamelModel):
    """Gift response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    comments: str | None
    url: str | None
    is_reserved: bool
    reserved_by: str | None
    is_received: bool
    user: GiftOwner


class GiftListResponse(CamelModel):
    """A page of gifts."""

    data: list[GiftResponse]
    count: int
    limit: int
    offset: int
