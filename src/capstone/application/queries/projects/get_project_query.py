"""Query to get one project with its creator and accepted members."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from capstone.application.dtos import (
    MemberProfileDTO,
    ProjectDetailDTO,
    ProjectMemberDTO,
)
from capstone.domain.projects import (
    ProjectMembershipRepository,
    ProjectRepository,
    ProjectUnavailableError,
)
from capstone.domain.user import UserProfileRepository

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory


class GetProjectQuery:
    """
    Load a project for one of its participants.

    The creator and accepted members may read the project. Anyone else gets
    ProjectUnavailableError, the same error as for an unknown id.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        membership_repo: ProjectMembershipRepository,
        profile_repo: UserProfileRepository,
    ) -> None:
        self._project_repo = project_repo
        self._membership_repo = membership_repo
        self._profile_repo = profile_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProjectQuery:
        return cls(
            project_repo=factory.project_repository(),
            membership_repo=factory.membership_repository(),
            profile_repo=factory.user_profile_repository(),
        )

    async def execute(self, project_id: UUID, user_id: str) -> ProjectDetailDTO:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            raise ProjectUnavailableError(str(project_id), user_id)

        accepted = [
            m
            for m in await self._membership_repo.list_for_project(project_id)
            if m.is_accepted
        ]
        is_member = any(m.user_id == user_id for m in accepted)
        if project.created_by != user_id and not is_member:
            raise ProjectUnavailableError(str(project_id), user_id)

        creator = await self._load_profile(project.created_by)
        members = []
        for membership in accepted:
            profile = await self._load_profile(membership.user_id)
            members.append(
                ProjectMemberDTO(
                    profile=profile,
                    role=membership.role.value,
                    joined_at=membership.responded_at,
                )
            )
        return ProjectDetailDTO.from_domain(project, creator, members)

    async def _load_profile(self, user_id: str) -> MemberProfileDTO:
        profile = await self._profile_repo.find_by_id(user_id)
        return MemberProfileDTO.from_domain(user_id, profile)
