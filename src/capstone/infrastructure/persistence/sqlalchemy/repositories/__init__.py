"""SQLAlchemy repository implementations."""

from capstone.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories.projects import (
    ProjectMembershipRepositorySQLAlchemy,
    ProjectRepositorySQLAlchemy,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserProfileRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)

__all__ = [
    "ProjectMembershipRepositorySQLAlchemy",
    "ProjectRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserProfileRepositorySQLAlchemy",
    "UserRoleRepositorySQLAlchemy",
]
