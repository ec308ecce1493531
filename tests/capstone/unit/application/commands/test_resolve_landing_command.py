"""Unit tests for ResolveLandingCommand (post sign-in routing)."""

from unittest.mock import AsyncMock

import pytest

from capstone.application.commands.auth import (
    LOGIN_PATH,
    ONBOARDING_PATH,
    ResolveLandingCommand,
)
from capstone.domain.shared.exceptions import RecordStoreError
from capstone.domain.user import RoleAssignment, SystemRole
from tests.shared.fixtures.factories import TestPrincipalFactory, make_profile

PHOTO = TestPrincipalFactory.OAUTH_PHOTO


def _make_command(profile=None, role=None):
    profile_repo = AsyncMock()
    profile_repo.find_by_id.return_value = profile
    role_repo = AsyncMock()
    role_repo.find_by_user_id.return_value = (
        RoleAssignment(user_id="u1", role=role) if role else None
    )
    command = ResolveLandingCommand(profile_repo=profile_repo, role_repo=role_repo)
    return command, profile_repo, role_repo


class TestResolveLandingCommand:
    @pytest.mark.asyncio
    async def test_no_profile_goes_to_onboarding(self):
        command, _, role_repo = _make_command()

        result = await command.execute(TestPrincipalFactory.default(PHOTO))

        assert result.redirect_path == ONBOARDING_PATH
        role_repo.find_by_user_id.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("role", "path"),
        [
            (SystemRole.STUDENT, "/student"),
            (SystemRole.ADVISER, "/adviser"),
            (SystemRole.COORDINATOR, "/coordinator"),
        ],
    )
    async def test_role_landing(self, role, path):
        command, _, _ = _make_command(make_profile(avatar_url="x"), role)

        result = await command.execute(TestPrincipalFactory.default())

        assert result.redirect_path == path
        assert result.role is role
        assert result.avatar_backfilled is False

    @pytest.mark.asyncio
    async def test_profile_without_role_goes_to_onboarding(self):
        command, _, _ = _make_command(make_profile())

        result = await command.execute(TestPrincipalFactory.default())

        assert result.redirect_path == ONBOARDING_PATH

    @pytest.mark.asyncio
    async def test_missing_avatar_backfilled_from_oauth_photo(self):
        command, profile_repo, _ = _make_command(make_profile(), SystemRole.STUDENT)

        result = await command.execute(TestPrincipalFactory.default(PHOTO))

        assert result.avatar_backfilled is True
        assert profile_repo.upsert.call_args.args[0].avatar_url == PHOTO

    @pytest.mark.asyncio
    async def test_existing_avatar_kept(self):
        profile = make_profile(avatar_url="https://mine.example/a.png")
        command, profile_repo, _ = _make_command(profile, SystemRole.STUDENT)

        result = await command.execute(TestPrincipalFactory.default(PHOTO))

        assert result.avatar_backfilled is False
        profile_repo.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_backfill_failure_does_not_block_landing(self):
        command, profile_repo, _ = _make_command(make_profile(), SystemRole.ADVISER)
        profile_repo.upsert.side_effect = RecordStoreError("read-only")

        result = await command.execute(TestPrincipalFactory.default(PHOTO))

        assert result.redirect_path == "/adviser"
        assert result.avatar_backfilled is False

    @pytest.mark.asyncio
    async def test_store_failure_goes_to_login(self):
        command, profile_repo, _ = _make_command()
        profile_repo.find_by_id.side_effect = RecordStoreError("down")

        result = await command.execute(TestPrincipalFactory.default())

        assert result.redirect_path == LOGIN_PATH
