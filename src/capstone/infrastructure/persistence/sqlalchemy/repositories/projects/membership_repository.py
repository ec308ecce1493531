"""SQLAlchemy implementation of ProjectMembershipRepository."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from capstone.domain.projects import (
    MemberRole,
    MembershipAlreadyExistsError,
    MembershipStatus,
    ProjectMembership,
    ProjectMembershipRepository,
)
from capstone.domain.shared.exceptions import RecordStoreError
from capstone.domain.shared.time import ensure_tz_aware
from capstone.infrastructure.persistence.sqlalchemy.models.projects import (
    MEMBERSHIP_UNIQUE_CONSTRAINT,
    ProjectMemberModel,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories._utils import (
    to_store_error,
)

logger = logging.getLogger(__name__)

# SQLite names the columns, PostgreSQL names the constraint
_SQLITE_UNIQUE_MESSAGE = "project_members.project_id, project_members.user_id"


def _is_duplicate_membership(exc: IntegrityError) -> bool:
    msg = str(getattr(exc, "orig", exc))
    return MEMBERSHIP_UNIQUE_CONSTRAINT in msg or _SQLITE_UNIQUE_MESSAGE in msg


class ProjectMembershipRepositorySQLAlchemy(ProjectMembershipRepository):
    """SQLAlchemy implementation of the membership repository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find(self, project_id: UUID, user_id: str) -> Optional[ProjectMembership]:
        try:
            model = await self._find_model(project_id, user_id)
        except SQLAlchemyError as e:
            raise to_store_error(e, "find_membership") from e

        if model is None:
            return None
        return self._map_to_domain(model)

    async def add(self, membership: ProjectMembership) -> None:
        """Insert inside a SAVEPOINT so a duplicate does not poison the session.

        Raises
        ------
        MembershipAlreadyExistsError
            If (project_id, user_id) is already stored
        RecordStoreError
            For any other database failure
        """
        try:
            async with self._session.begin_nested():
                self._session.add(self._map_to_model(membership))
                await self._session.flush()
        except IntegrityError as e:
            if _is_duplicate_membership(e):
                raise MembershipAlreadyExistsError(
                    str(membership.project_id),
                    membership.user_id,
                ) from e
            raise to_store_error(e, "add_membership") from e
        except SQLAlchemyError as e:
            raise to_store_error(e, "add_membership") from e

        logger.debug(
            "Inserted membership %s (%s in %s)",
            membership.id,
            membership.user_id,
            membership.project_id,
        )

    async def accept(self, membership: ProjectMembership) -> None:
        try:
            model = await self._session.get(ProjectMemberModel, membership.id)
            if model is None:
                msg = f"Membership {membership.id} does not exist"
                raise RecordStoreError(msg, details={"membership_id": str(membership.id)})
            model.status = membership.status.value
            model.responded_at = membership.responded_at
            await self._session.flush()
        except SQLAlchemyError as e:
            raise to_store_error(e, "accept_membership") from e

    async def list_for_user(self, user_id: str) -> List[ProjectMembership]:
        stmt = (
            select(ProjectMemberModel)
            .where(ProjectMemberModel.user_id == user_id)
            .order_by(ProjectMemberModel.invited_at.desc())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise to_store_error(e, "list_memberships") from e
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def list_for_project(self, project_id: UUID) -> List[ProjectMembership]:
        stmt = (
            select(ProjectMemberModel)
            .where(ProjectMemberModel.project_id == project_id)
            .order_by(ProjectMemberModel.invited_at.asc())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise to_store_error(e, "list_project_memberships") from e
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def _find_model(
        self,
        project_id: UUID,
        user_id: str,
    ) -> Optional[ProjectMemberModel]:
        stmt = select(ProjectMemberModel).where(
            ProjectMemberModel.project_id == project_id,
            ProjectMemberModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_model(self, membership: ProjectMembership) -> ProjectMemberModel:
        return ProjectMemberModel(
            id=membership.id,
            project_id=membership.project_id,
            user_id=membership.user_id,
            role=membership.role.value,
            status=membership.status.value,
            invited_at=membership.invited_at,
            responded_at=membership.responded_at,
        )

    def _map_to_domain(self, model: ProjectMemberModel) -> ProjectMembership:
        return ProjectMembership(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            role=MemberRole(model.role),
            status=MembershipStatus(model.status),
            invited_at=ensure_tz_aware(model.invited_at),
            responded_at=(
                ensure_tz_aware(model.responded_at) if model.responded_at else None
            ),
        )
