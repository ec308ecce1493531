"""SQLAlchemy implementation of UserProfileRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from capstone.domain.shared.time import ensure_tz_aware
from capstone.domain.user import UserProfile, UserProfileRepository
from capstone.infrastructure.persistence.sqlalchemy.models.user import (
    UserProfileModel,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories._utils import (
    to_store_error,
)

logger = logging.getLogger(__name__)


class UserProfileRepositorySQLAlchemy(UserProfileRepository):
    """SQLAlchemy implementation of the UserProfileRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: str) -> Optional[UserProfile]:
        try:
            model = await self._find_model(user_id)
        except SQLAlchemyError as e:
            raise to_store_error(e, "find_profile") from e

        if model is None:
            return None
        return self._map_to_domain(model)

    async def upsert(self, profile: UserProfile) -> None:
        try:
            existing = await self._find_model(profile.id)
            if existing:
                existing.full_name = profile.full_name
                existing.email = profile.email
                existing.avatar_url = profile.avatar_url
                existing.updated_at = profile.updated_at
                logger.debug("Updated profile: %s", profile.id)
            else:
                self._session.add(
                    UserProfileModel(
                        id=profile.id,
                        full_name=profile.full_name,
                        email=profile.email,
                        avatar_url=profile.avatar_url,
                        created_at=profile.created_at,
                        updated_at=profile.updated_at,
                    ),
                )
                logger.info("Created profile: %s (email: %s)", profile.id, profile.email)

            await self._session.flush()
        except SQLAlchemyError as e:
            raise to_store_error(e, "upsert_profile") from e

    async def _find_model(self, user_id: str) -> Optional[UserProfileModel]:
        stmt = select(UserProfileModel).where(UserProfileModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserProfileModel) -> UserProfile:
        return UserProfile.reconstitute(
            user_id=model.id,
            full_name=model.full_name,
            email=model.email,
            avatar_url=model.avatar_url,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
