"""SQLAlchemy repository implementations for projects domain."""

from capstone.infrastructure.persistence.sqlalchemy.repositories.projects.membership_repository import (  # NOQA: E501
    ProjectMembershipRepositorySQLAlchemy,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories.projects.project_repository import (  # NOQA: E501
    ProjectRepositorySQLAlchemy,
)

__all__ = ["ProjectMembershipRepositorySQLAlchemy", "ProjectRepositorySQLAlchemy"]
