"""Decide where a freshly signed-in principal should land."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from capstone.application.dtos import LandingResolved, ResolveLandingResult
from capstone.domain.shared.exceptions import ExternalServiceError
from capstone.domain.user import UserProfileRepository, UserRoleRepository

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory
    from capstone.application.ports import Principal

logger = logging.getLogger(__name__)

ONBOARDING_PATH = "/onboarding"
LOGIN_PATH = "/login"


class ResolveLandingCommand:
    """
    Route a principal after sign-in.

    - no profile yet: onboarding
    - profile without avatar: back-fill it from the OAuth photo, if any
    - then the landing area of the assigned role, or onboarding when the
      role is still missing

    Store failures send the principal back to the login page.
    """

    def __init__(
        self,
        profile_repo: UserProfileRepository,
        role_repo: UserRoleRepository,
    ):
        self._profile_repo = profile_repo
        self._role_repo = role_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ResolveLandingCommand:
        return cls(
            profile_repo=factory.user_profile_repository(),
            role_repo=factory.user_role_repository(),
        )

    async def execute(self, principal: Principal) -> ResolveLandingResult:
        try:
            profile = await self._profile_repo.find_by_id(principal.user_id)
            if profile is None:
                return LandingResolved(redirect_path=ONBOARDING_PATH)

            backfilled = False
            if not profile.has_avatar and principal.avatar_url:
                profile.change_avatar(principal.avatar_url)
                try:
                    await self._profile_repo.upsert(profile)
                    backfilled = True
                except ExternalServiceError as e:
                    logger.warning(
                        "Could not back-fill avatar for %s: %s",
                        principal.user_id,
                        e,
                    )

            assignment = await self._role_repo.find_by_user_id(principal.user_id)
        except ExternalServiceError as e:
            logger.error("Landing resolution failed for %s: %s", principal.user_id, e)
            return LandingResolved(redirect_path=LOGIN_PATH)

        if assignment is None:
            return LandingResolved(
                redirect_path=ONBOARDING_PATH,
                avatar_backfilled=backfilled,
            )
        return LandingResolved(
            redirect_path=assignment.role.landing_path,
            role=assignment.role,
            avatar_backfilled=backfilled,
        )
