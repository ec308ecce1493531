"""SQLAlchemy model for project memberships."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from capstone.infrastructure.persistence.sqlalchemy.models.base import Base

MEMBERSHIP_UNIQUE_CONSTRAINT = "uq_project_members_project_user"


class ProjectMemberModel(Base):
    """Database model for project memberships."""

    __tablename__ = "project_members"

    __table_args__ = (
        # At most one membership per (project, principal)
        UniqueConstraint("project_id", "user_id", name=MEMBERSHIP_UNIQUE_CONSTRAINT),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    project_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    invited_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    responded_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"<ProjectMemberModel(project_id={self.project_id}, "
            f"user_id={self.user_id}, status={self.status})>"
        )
