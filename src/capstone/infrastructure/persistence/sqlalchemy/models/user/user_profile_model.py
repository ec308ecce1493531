"""SQLAlchemy model for UserProfile aggregate."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from capstone.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserProfileModel(Base, TimestampMixin):
    """
    Public profile of a principal.

    The primary key is the identifier issued by the identity provider, so
    profile writes are upserts keyed on it.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<UserProfileModel(id={self.id}, email={self.email})>"
