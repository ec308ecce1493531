"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from capstone.domain.projects import ProjectMembershipRepository, ProjectRepository
from capstone.domain.user import UserProfileRepository, UserRoleRepository


class RepositoryFactory(Protocol):
    """Protocol for creating request-scoped repositories."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_profile_repository(self) -> UserProfileRepository:
        """Get user profile repository."""
        ...

    def user_role_repository(self) -> UserRoleRepository:
        """Get user role repository."""
        ...

    def project_repository(self) -> ProjectRepository:
        """Get project repository."""
        ...

    def membership_repository(self) -> ProjectMembershipRepository:
        """Get project membership repository."""
        ...
