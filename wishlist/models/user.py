"""User model."""

from sqlalchemy import JSON, Column, String
from sqlalchemy.orm import relationship

from wishlist.database import Base
from wishlist.models.enums import Role
from wishlist.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and gift ownership."""

    __tablename__ = "user"

    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    roles = Column(JSON, nullable=False, default=lambda: [Role.USER.value])
    img = Column(String(255), nullable=True)

    # Relationships
    gifts = relationship("Gift", back_populates="user", cascade="all, delete-orphan")
