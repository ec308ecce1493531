"""SQLAlchemy model for system-wide role assignments."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from capstone.domain.shared.time import utc_now
from capstone.infrastructure.persistence.sqlalchemy.models.base import Base


class UserRoleModel(Base):
    """
    One role per principal (user_id is the primary key).

    Table: user_roles
    """

    __tablename__ = "user_roles"

    __table_args__ = (
        CheckConstraint(
            "role IN ('student', 'adviser', 'coordinator')",
            name="ck_user_roles_role",
        ),
    )

    user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserRoleModel(user_id={self.user_id}, role={self.role})>"
