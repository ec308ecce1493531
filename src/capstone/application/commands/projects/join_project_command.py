"""Join a project by its shareable code."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from capstone.application.dtos import JoinProjectResult, OperationFailure, ProjectJoined
from capstone.domain.projects import (
    MemberRole,
    MembershipAlreadyExistsError,
    Project,
    ProjectMembership,
    ProjectMembershipRepository,
    ProjectNotFoundError,
    ProjectRepository,
)
from capstone.domain.shared.exceptions import (
    AuthorizationError,
    DomainException,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from capstone.domain.user import RoleAssignment, UserRoleRepository

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory
    from capstone.application.ports import Principal

logger = logging.getLogger(__name__)

ROLE_UNKNOWN_MESSAGE = "Unable to determine user role"


class JoinProjectCommand:
    """
    Join a project, or accept a pending invitation to it.

    Membership state is re-read on every call:

    - no membership: insert an accepted one with the role mapped from the
      caller's system role
    - accepted membership: rejected as already a member, nothing changes
    - any other status: accepted in place, keeping the invited role

    A concurrent insert that trips the (project, principal) uniqueness
    constraint is reported as already a member.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        role_repo: UserRoleRepository,
        membership_repo: ProjectMembershipRepository,
    ):
        self._project_repo = project_repo
        self._role_repo = role_repo
        self._membership_repo = membership_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> JoinProjectCommand:
        return cls(
            project_repo=factory.project_repository(),
            role_repo=factory.user_role_repository(),
            membership_repo=factory.membership_repository(),
        )

    async def execute(
        self,
        project_code: str,
        user_id: str,
        principal: Optional[Principal],
    ) -> JoinProjectResult:
        """Join as ``user_id``, who must be the authenticated ``principal``."""
        try:
            if not project_code or not user_id:
                raise ValidationError(
                    "Project code and user ID are required",
                    code=ErrorCode.MISSING_REQUIRED_FIELDS,
                )
            if principal is None or principal.user_id != user_id:
                raise AuthorizationError

            project = await self._find_project(project_code)
            assignment = await self._find_role(user_id)
            member_role = MemberRole.for_system_role(assignment.role)

            membership = await self._reconcile(project, user_id, member_role)

        except DomainException as e:
            return OperationFailure.from_exception(e)
        except Exception as e:
            logger.exception("Unexpected error joining project %s", project_code)
            return OperationFailure(
                ErrorCode.INTERNAL_ERROR,
                str(e) or "Internal server error",
            )

        return ProjectJoined(
            project_id=project.id,
            project_title=project.title,
            membership=membership,
        )

    async def _find_project(self, project_code: str) -> Project:
        try:
            project = await self._project_repo.find_by_code(project_code)
        except ExternalServiceError as e:
            logger.error("Project lookup error for code %s: %s", project_code, e)
            raise ProjectNotFoundError(project_code, diagnostic=e.message) from e
        if project is None:
            raise ProjectNotFoundError(project_code)
        return project

    async def _find_role(self, user_id: str) -> RoleAssignment:
        try:
            assignment = await self._role_repo.find_by_user_id(user_id)
        except ExternalServiceError as e:
            logger.error("User role lookup error for %s: %s", user_id, e)
            raise ValidationError(
                f"{ROLE_UNKNOWN_MESSAGE}. Details: {e.message}",
                code=ErrorCode.ROLE_NOT_FOUND,
            ) from e
        if assignment is None:
            raise ValidationError(ROLE_UNKNOWN_MESSAGE, code=ErrorCode.ROLE_NOT_FOUND)
        return assignment

    async def _reconcile(
        self,
        project: Project,
        user_id: str,
        member_role: MemberRole,
    ) -> ProjectMembership:
        try:
            existing = await self._membership_repo.find(project.id, user_id)
        except ExternalServiceError as e:
            logger.error("Error checking existing membership: %s", e)
            raise ExternalServiceError(
                f"Failed to check membership status. Details: {e.message}",
            ) from e

        if existing is not None:
            if existing.is_accepted:
                raise MembershipAlreadyExistsError(str(project.id), user_id)

            existing.accept()
            try:
                await self._membership_repo.accept(existing)
            except ExternalServiceError as e:
                logger.error("Error updating membership: %s", e)
                raise ExternalServiceError(
                    f"Failed to join project. Details: {e.message}",
                ) from e
            logger.info(
                "Invitation accepted: %s joined %s as %s",
                user_id,
                project.id,
                existing.role.value,
            )
            return existing

        membership = ProjectMembership.accepted(
            project_id=project.id,
            user_id=user_id,
            role=member_role,
        )
        try:
            await self._membership_repo.add(membership)
        except MembershipAlreadyExistsError:
            logger.info(
                "Concurrent join detected for %s in %s",
                user_id,
                project.id,
            )
            raise
        except ExternalServiceError as e:
            logger.error("Error adding member: %s", e)
            raise ExternalServiceError(
                f"Failed to join project. Details: {e.message}",
            ) from e

        logger.info("%s joined %s as %s", user_id, project.id, member_role.value)
        return membership
