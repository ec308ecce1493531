"""Project membership repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from capstone.domain.projects.entities import ProjectMembership


class ProjectMembershipRepository(ABC):
    """
    Repository interface for ProjectMembership entities.

    Implementations must enforce uniqueness of (project_id, user_id) and raise
    MembershipAlreadyExistsError when ``add`` would violate it.
    """

    @abstractmethod
    async def find(self, project_id: UUID, user_id: str) -> Optional[ProjectMembership]:
        """Find the membership of a principal in a project."""

    @abstractmethod
    async def add(self, membership: ProjectMembership) -> None:
        """Insert a new membership."""

    @abstractmethod
    async def accept(self, membership: ProjectMembership) -> None:
        """Persist the accepted status and response time of a membership."""

    @abstractmethod
    async def list_for_user(self, user_id: str) -> List[ProjectMembership]:
        """All memberships of a principal, newest first."""

    @abstractmethod
    async def list_for_project(self, project_id: UUID) -> List[ProjectMembership]:
        """All memberships of a project, oldest first, any status."""
