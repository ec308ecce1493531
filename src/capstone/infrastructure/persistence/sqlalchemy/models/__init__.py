"""SQLAlchemy models for persistence layer."""

from capstone.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from capstone.infrastructure.persistence.sqlalchemy.models.projects import (
    MEMBERSHIP_UNIQUE_CONSTRAINT,
    ProjectMemberModel,
    ProjectModel,
)
from capstone.infrastructure.persistence.sqlalchemy.models.user import (
    UserProfileModel,
    UserRoleModel,
)

__all__ = [
    "MEMBERSHIP_UNIQUE_CONSTRAINT",
    "Base",
    "ProjectMemberModel",
    "ProjectModel",
    "TimestampMixin",
    "UserProfileModel",
    "UserRoleModel",
]
