"""Query to get the caller's profile and system role."""

from __future__ import annotations

from typing import TYPE_CHECKING

from capstone.application.dtos import ProfileDTO
from capstone.domain.user import (
    ProfileNotFoundError,
    UserProfileRepository,
    UserRoleRepository,
)

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory


class GetProfileQuery:
    def __init__(
        self,
        profile_repo: UserProfileRepository,
        role_repo: UserRoleRepository,
    ) -> None:
        self._profile_repo = profile_repo
        self._role_repo = role_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProfileQuery:
        return cls(
            profile_repo=factory.user_profile_repository(),
            role_repo=factory.user_role_repository(),
        )

    async def execute(self, user_id: str) -> ProfileDTO:
        profile = await self._profile_repo.find_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        assignment = await self._role_repo.find_by_user_id(user_id)
        return ProfileDTO.from_domain(profile, assignment)
