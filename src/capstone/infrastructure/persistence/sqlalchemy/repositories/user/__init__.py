"""SQLAlchemy repository implementations for user domain."""

from capstone.infrastructure.persistence.sqlalchemy.repositories.user.user_profile_repository import (  # NOQA: E501
    UserProfileRepositorySQLAlchemy,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories.user.user_role_repository import (  # NOQA: E501
    UserRoleRepositorySQLAlchemy,
)

__all__ = ["UserProfileRepositorySQLAlchemy", "UserRoleRepositorySQLAlchemy"]
