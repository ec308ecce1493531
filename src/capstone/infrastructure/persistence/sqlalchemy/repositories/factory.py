"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from capstone.infrastructure.persistence.sqlalchemy.repositories.projects import (
    ProjectMembershipRepositorySQLAlchemy,
    ProjectRepositorySQLAlchemy,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserProfileRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share one session, so they share one transaction.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._profile_repo: UserProfileRepositorySQLAlchemy | None = None
        self._role_repo: UserRoleRepositorySQLAlchemy | None = None
        self._project_repo: ProjectRepositorySQLAlchemy | None = None
        self._membership_repo: ProjectMembershipRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_profile_repository(self) -> UserProfileRepositorySQLAlchemy:
        if self._profile_repo is None:
            self._profile_repo = UserProfileRepositorySQLAlchemy(self._session)
        return self._profile_repo

    def user_role_repository(self) -> UserRoleRepositorySQLAlchemy:
        if self._role_repo is None:
            self._role_repo = UserRoleRepositorySQLAlchemy(self._session)
        return self._role_repo

    def project_repository(self) -> ProjectRepositorySQLAlchemy:
        if self._project_repo is None:
            self._project_repo = ProjectRepositorySQLAlchemy(self._session)
        return self._project_repo

    def membership_repository(self) -> ProjectMembershipRepositorySQLAlchemy:
        if self._membership_repo is None:
            self._membership_repo = ProjectMembershipRepositorySQLAlchemy(
                self._session,
            )
        return self._membership_repo
