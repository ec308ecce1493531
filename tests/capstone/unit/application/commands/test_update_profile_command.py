"""Unit tests for UpdateProfileCommand."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from capstone.application.commands.user import UpdateProfileCommand
from capstone.application.ports import BlobUploadError
from capstone.domain.shared.exceptions import ErrorCode, RecordStoreError
from tests.shared.fixtures.factories import TestFiles, make_profile

PUBLIC_URL = "https://storage.test/public/Profile_pictures/u1/u1-2.png"


def _make_command(profile=None):
    profile_repo = AsyncMock()
    profile_repo.find_by_id.return_value = profile
    blob_store = AsyncMock()
    blob_store.public_url = MagicMock(return_value=PUBLIC_URL)
    command = UpdateProfileCommand(profile_repo=profile_repo, blob_store=blob_store)
    return command, profile_repo, blob_store


class TestUpdateProfileCommand:
    @pytest.mark.asyncio
    async def test_nothing_to_update(self):
        command, profile_repo, _ = _make_command(make_profile())

        result = await command.execute("u1")

        assert result.success is False
        assert result.code == ErrorCode.VALIDATION_ERROR
        profile_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self):
        command, profile_repo, _ = _make_command(make_profile())

        result = await command.execute("u1", display_name="  ")

        assert result.code == ErrorCode.MISSING_REQUIRED_FIELDS
        profile_repo.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_profile_must_exist(self):
        command, profile_repo, blob_store = _make_command(profile=None)

        result = await command.execute("u1", avatar_file=TestFiles.png())

        assert result.code == ErrorCode.PROFILE_NOT_FOUND
        blob_store.upload.assert_not_called()
        profile_repo.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_rename_keeps_avatar(self):
        profile = make_profile(avatar_url="https://old.example/a.png")
        command, profile_repo, blob_store = _make_command(profile)

        result = await command.execute("u1", display_name=" Jane Doe ")

        assert result.success is True
        saved = profile_repo.upsert.call_args.args[0]
        assert saved.full_name == "Jane Doe"
        assert saved.avatar_url == "https://old.example/a.png"
        blob_store.upload.assert_not_called()

    @pytest.mark.asyncio
    async def test_new_avatar_replaces_old(self):
        profile = make_profile(avatar_url="https://old.example/a.png")
        command, profile_repo, blob_store = _make_command(profile)

        result = await command.execute("u1", avatar_file=TestFiles.png())

        assert result.success is True
        assert result.profile.avatar_url == PUBLIC_URL
        assert result.profile.full_name == "John Doe"
        assert blob_store.upload.call_args.kwargs["upsert"] is True
        assert blob_store.upload.call_args.args[1].startswith("u1/u1-")

    @pytest.mark.asyncio
    async def test_invalid_avatar_rejected(self):
        command, _, blob_store = _make_command(make_profile())

        result = await command.execute("u1", avatar_file=TestFiles.gif())

        assert result.code == ErrorCode.INVALID_FILE_TYPE
        blob_store.upload.assert_not_called()

    @pytest.mark.asyncio
    async def test_upload_failure(self):
        command, profile_repo, blob_store = _make_command(make_profile())
        blob_store.upload.side_effect = BlobUploadError("quota exceeded")

        result = await command.execute(
            "u1",
            display_name="Jane",
            avatar_file=TestFiles.png(),
        )

        assert result.code == ErrorCode.AVATAR_UPLOAD_FAILED
        assert result.message == "Failed to upload avatar: quota exceeded"
        profile_repo.upsert.assert_not_called()

    @pytest.mark.asyncio
    async def test_save_failure(self):
        command, profile_repo, _ = _make_command(make_profile())
        profile_repo.upsert.side_effect = RecordStoreError("read-only")

        result = await command.execute("u1", display_name="Jane")

        assert result.code == ErrorCode.PROFILE_SAVE_FAILED
        assert result.message == "Failed to save profile: read-only"
