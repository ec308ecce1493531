"""Query to list the projects the caller belongs to."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from capstone.application.dtos import MyProjectDTO
from capstone.domain.projects import ProjectMembershipRepository, ProjectRepository

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class ListMyProjectsQuery:
    """List memberships of a principal with a summary of each project."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        membership_repo: ProjectMembershipRepository,
    ) -> None:
        self._project_repo = project_repo
        self._membership_repo = membership_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListMyProjectsQuery:
        return cls(
            project_repo=factory.project_repository(),
            membership_repo=factory.membership_repository(),
        )

    async def execute(self, user_id: str) -> list[MyProjectDTO]:
        memberships = await self._membership_repo.list_for_user(user_id)
        result: list[MyProjectDTO] = []
        for membership in memberships:
            project = await self._project_repo.find_by_id(membership.project_id)
            if project is None:
                logger.warning(
                    "Membership %s points to missing project %s",
                    membership.id,
                    membership.project_id,
                )
                continue
            result.append(MyProjectDTO.from_domain(project, membership))
        return result
