"""SQLAlchemy implementation of UserRoleRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from capstone.domain.shared.time import ensure_tz_aware
from capstone.domain.user import RoleAssignment, SystemRole, UserRoleRepository
from capstone.infrastructure.persistence.sqlalchemy.models.user import UserRoleModel
from capstone.infrastructure.persistence.sqlalchemy.repositories._utils import (
    to_store_error,
)

logger = logging.getLogger(__name__)


class UserRoleRepositorySQLAlchemy(UserRoleRepository):
    """Role assignments keyed on user_id; assigning twice replaces the role."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_id(self, user_id: str) -> Optional[RoleAssignment]:
        try:
            model = await self._find_model(user_id)
        except SQLAlchemyError as e:
            raise to_store_error(e, "find_role") from e

        if model is None:
            return None
        return RoleAssignment(
            user_id=model.user_id,
            role=SystemRole(model.role),
            created_at=ensure_tz_aware(model.created_at),
        )

    async def assign(self, assignment: RoleAssignment) -> None:
        try:
            existing = await self._find_model(assignment.user_id)
            if existing:
                if existing.role != assignment.role.value:
                    logger.info(
                        "Changing role of %s: %s -> %s",
                        assignment.user_id,
                        existing.role,
                        assignment.role.value,
                    )
                existing.role = assignment.role.value
            else:
                self._session.add(
                    UserRoleModel(
                        user_id=assignment.user_id,
                        role=assignment.role.value,
                        created_at=assignment.created_at,
                    ),
                )
                logger.info(
                    "Assigned role %s to %s",
                    assignment.role.value,
                    assignment.user_id,
                )

            await self._session.flush()
        except SQLAlchemyError as e:
            raise to_store_error(e, "assign_role") from e

    async def _find_model(self, user_id: str) -> Optional[UserRoleModel]:
        stmt = select(UserRoleModel).where(UserRoleModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
