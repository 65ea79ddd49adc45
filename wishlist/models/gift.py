"""Gift model."""

from sqlalchemy import Boolean, Column, ForeignKey, String
from sqlalchemy.orm import relationship

from wishlist.database import Base
from wishlist.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Gift(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A wished-for gift on a user's list."""

    __tablename__ = "gift"

    name = Column(String(255), nullable=False)
    comments = Column(String(500), nullable=True)
    url = Column(String(2048), nullable=True)
    is_reserved = Column(Boolean, nullable=False, default=False)
    # Display name of whoever reserved it; reservers need not be registered users
    reserved_by = Column(String(255), nullable=True)
    is_received = Column(Boolean, nullable=False, default=False)
    user_id = Column(
        String(36),
        ForeignKey("user.id", ondelete="CASCADE", name="fk_gift_user"),
        nullable=False,
        index=True,
    )

    # Relationships
    user = relationship("User", back_populates="gifts")
