"""Unit tests for JoinProjectCommand.

Tests verify:
- Input and caller checks run before any lookup
- Role mapping for new memberships
- The three-way reconciliation against existing membership state
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from capstone.application.commands.projects import JoinProjectCommand
from capstone.domain.projects import (
    MemberRole,
    MembershipAlreadyExistsError,
    MembershipStatus,
    ProjectMembership,
)
from capstone.domain.shared.exceptions import ErrorCode, RecordStoreError
from capstone.domain.user import RoleAssignment, SystemRole
from tests.shared.fixtures.factories import TestPrincipalFactory, make_project

CALLER = TestPrincipalFactory.bob()


def _make_command(role: SystemRole | None = SystemRole.STUDENT):
    project = make_project()
    project_repo = AsyncMock()
    project_repo.find_by_code.return_value = project
    role_repo = AsyncMock()
    role_repo.find_by_user_id.return_value = (
        RoleAssignment(user_id=CALLER.user_id, role=role) if role else None
    )
    membership_repo = AsyncMock()
    membership_repo.find.return_value = None
    command = JoinProjectCommand(
        project_repo=project_repo,
        role_repo=role_repo,
        membership_repo=membership_repo,
    )
    return command, project, project_repo, role_repo, membership_repo


async def _join(command, project_code="code-1", user_id=CALLER.user_id, principal=CALLER):
    return await command.execute(
        project_code=project_code,
        user_id=user_id,
        principal=principal,
    )


class TestPreconditions:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("code", "user_id"),
        [("", CALLER.user_id), ("code-1", ""), ("", "")],
    )
    async def test_missing_fields_checked_before_auth(self, code, user_id):
        command, _, project_repo, _, _ = _make_command()

        result = await _join(command, code, user_id, principal=None)

        assert result.success is False
        assert result.code == ErrorCode.MISSING_REQUIRED_FIELDS
        assert result.message == "Project code and user ID are required"
        project_repo.find_by_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_unauthenticated_caller_rejected(self):
        command, _, project_repo, _, _ = _make_command()

        result = await _join(command, principal=None)

        assert result.code == ErrorCode.UNAUTHORIZED
        project_repo.find_by_code.assert_not_called()

    @pytest.mark.asyncio
    async def test_caller_acting_for_someone_else_rejected(self):
        command, _, project_repo, _, membership_repo = _make_command()

        result = await _join(command, principal=TestPrincipalFactory.alice())

        assert result.code == ErrorCode.UNAUTHORIZED
        project_repo.find_by_code.assert_not_called()
        membership_repo.add.assert_not_called()


class TestLookups:
    @pytest.mark.asyncio
    async def test_unknown_code(self):
        command, _, project_repo, _, membership_repo = _make_command()
        project_repo.find_by_code.return_value = None

        result = await _join(command, project_code="nope")

        assert result.code == ErrorCode.PROJECT_NOT_FOUND
        assert result.message == "Invalid project code. Project not found."
        membership_repo.find.assert_not_called()

    @pytest.mark.asyncio
    async def test_lookup_failure_carries_diagnostic(self):
        command, _, project_repo, _, _ = _make_command()
        project_repo.find_by_code.side_effect = RecordStoreError("timeout")

        result = await _join(command)

        assert result.code == ErrorCode.PROJECT_NOT_FOUND
        assert result.message == (
            "Invalid project code. Project not found. Details: timeout"
        )

    @pytest.mark.asyncio
    async def test_missing_role(self):
        command, _, _, _, membership_repo = _make_command(role=None)

        result = await _join(command)

        assert result.code == ErrorCode.ROLE_NOT_FOUND
        assert result.message == "Unable to determine user role"
        membership_repo.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_role_lookup_failure(self):
        command, _, _, role_repo, _ = _make_command()
        role_repo.find_by_user_id.side_effect = RecordStoreError("timeout")

        result = await _join(command)

        assert result.code == ErrorCode.ROLE_NOT_FOUND
        assert "Details: timeout" in result.message


class TestNewMembership:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("system_role", "member_role"),
        [
            (SystemRole.STUDENT, MemberRole.STUDENT),
            (SystemRole.ADVISER, MemberRole.ADVISER),
            (SystemRole.COORDINATOR, MemberRole.STUDENT),
        ],
    )
    async def test_inserted_accepted_with_mapped_role(self, system_role, member_role):
        command, project, _, _, membership_repo = _make_command(role=system_role)

        result = await _join(command)

        assert result.success is True
        assert result.message == "Successfully joined the project"
        assert result.project_id == project.id
        assert result.project_title == project.title
        membership_repo.add.assert_called_once()
        inserted = membership_repo.add.call_args.args[0]
        assert inserted.project_id == project.id
        assert inserted.user_id == CALLER.user_id
        assert inserted.role is member_role
        assert inserted.status is MembershipStatus.ACCEPTED
        assert inserted.responded_at is not None
        assert result.membership is inserted

    @pytest.mark.asyncio
    async def test_concurrent_insert_reported_as_already_member(self):
        command, project, _, _, membership_repo = _make_command()
        membership_repo.add.side_effect = MembershipAlreadyExistsError(
            str(project.id),
            CALLER.user_id,
        )

        result = await _join(command)

        assert result.code == ErrorCode.ALREADY_MEMBER
        assert result.message == "You are already a member of this project"

    @pytest.mark.asyncio
    async def test_insert_failure(self):
        command, _, _, _, membership_repo = _make_command()
        membership_repo.add.side_effect = RecordStoreError("disk full")

        result = await _join(command)

        assert result.code == ErrorCode.STORE_ERROR
        assert result.message == "Failed to join project. Details: disk full"


class TestExistingMembership:
    @pytest.mark.asyncio
    async def test_accepted_membership_is_not_touched(self):
        command, project, _, _, membership_repo = _make_command()
        membership_repo.find.return_value = ProjectMembership.accepted(
            project.id,
            CALLER.user_id,
            MemberRole.STUDENT,
        )

        result = await _join(command)

        assert result.code == ErrorCode.ALREADY_MEMBER
        membership_repo.add.assert_not_called()
        membership_repo.accept.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status",
        [MembershipStatus.PENDING, MembershipStatus.DECLINED],
    )
    async def test_invitation_accepted_in_place_keeping_role(self, status):
        command, project, _, _, membership_repo = _make_command(
            role=SystemRole.STUDENT,
        )
        invitation = ProjectMembership(
            project_id=project.id,
            user_id=CALLER.user_id,
            role=MemberRole.CO_ADVISER,
            status=status,
            id=uuid4(),
        )
        membership_repo.find.return_value = invitation

        result = await _join(command)

        assert result.success is True
        membership_repo.add.assert_not_called()
        membership_repo.accept.assert_called_once_with(invitation)
        assert result.membership.status is MembershipStatus.ACCEPTED
        assert result.membership.role is MemberRole.CO_ADVISER
        assert result.membership.responded_at is not None

    @pytest.mark.asyncio
    async def test_state_is_reread_on_every_call(self):
        command, project, _, _, membership_repo = _make_command()

        first = await _join(command)
        membership_repo.find.return_value = first.membership
        second = await _join(command)

        assert first.success is True
        assert second.code == ErrorCode.ALREADY_MEMBER
        assert membership_repo.find.call_count == 2
        membership_repo.add.assert_called_once()

    @pytest.mark.asyncio
    async def test_membership_check_failure(self):
        command, _, _, _, membership_repo = _make_command()
        membership_repo.find.side_effect = RecordStoreError("timeout")

        result = await _join(command)

        assert result.code == ErrorCode.STORE_ERROR
        assert result.message == (
            "Failed to check membership status. Details: timeout"
        )

    @pytest.mark.asyncio
    async def test_update_failure(self):
        command, project, _, _, membership_repo = _make_command()
        membership_repo.find.return_value = ProjectMembership(
            project_id=project.id,
            user_id=CALLER.user_id,
            role=MemberRole.STUDENT,
        )
        membership_repo.accept.side_effect = RecordStoreError("locked")

        result = await _join(command)

        assert result.code == ErrorCode.STORE_ERROR
        assert result.message == "Failed to join project. Details: locked"

