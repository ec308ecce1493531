"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from capstone.domain.projects.aggregates import Project


class ProjectRepository(ABC):
    """Repository interface for Project aggregates."""

    @abstractmethod
    async def find_by_id(self, project_id: UUID) -> Optional[Project]:
        """Find project by ID."""

    @abstractmethod
    async def find_by_code(self, project_code: str) -> Optional[Project]:
        """Find project by exact join code."""

    @abstractmethod
    async def add(self, project: Project) -> None:
        """Insert a new project."""

    @abstractmethod
    async def set_document_reference(self, project_id: UUID, url: str) -> None:
        """Store the public URL of the project's document."""
