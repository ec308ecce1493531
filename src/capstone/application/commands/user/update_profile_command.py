"""Edit the caller's display name and/or avatar."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from capstone.application.commands.onboarding import DEFAULT_AVATAR_BUCKET
from capstone.application.dtos import (
    OperationFailure,
    ProfileUpdated,
    UpdateProfileResult,
)
from capstone.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from capstone.domain.shared.time import epoch_millis
from capstone.domain.shared.value_objects import UploadedFile
from capstone.domain.user import (
    AVATAR_MAX_BYTES,
    ProfileNotFoundError,
    UserProfileRepository,
    avatar_storage_path,
    validate_avatar,
)

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory
    from capstone.application.ports import BlobStore

logger = logging.getLogger(__name__)


class UpdateProfileCommand:
    """Update an existing profile. Only the supplied fields change."""

    def __init__(
        self,
        profile_repo: UserProfileRepository,
        blob_store: BlobStore,
        avatar_bucket: str = DEFAULT_AVATAR_BUCKET,
        avatar_max_bytes: int = AVATAR_MAX_BYTES,
    ):
        self._profile_repo = profile_repo
        self._blob_store = blob_store
        self._avatar_bucket = avatar_bucket
        self._avatar_max_bytes = avatar_max_bytes

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        blob_store: BlobStore,
        avatar_bucket: str = DEFAULT_AVATAR_BUCKET,
        avatar_max_bytes: int = AVATAR_MAX_BYTES,
    ) -> UpdateProfileCommand:
        return cls(
            profile_repo=factory.user_profile_repository(),
            blob_store=blob_store,
            avatar_bucket=avatar_bucket,
            avatar_max_bytes=avatar_max_bytes,
        )

    async def execute(
        self,
        user_id: str,
        display_name: Optional[str] = None,
        avatar_file: Optional[UploadedFile] = None,
    ) -> UpdateProfileResult:
        try:
            if display_name is None and avatar_file is None:
                raise ValidationError("At least one field must be specified for update")
            if display_name is not None and not display_name.strip():
                raise ValidationError(
                    "Display name cannot be empty",
                    code=ErrorCode.MISSING_REQUIRED_FIELDS,
                )
            if avatar_file is not None:
                validate_avatar(avatar_file, self._avatar_max_bytes)

            profile = await self._profile_repo.find_by_id(user_id)
            if profile is None:
                raise ProfileNotFoundError(user_id)

            if avatar_file is not None:
                path = avatar_storage_path(user_id, avatar_file, epoch_millis())
                try:
                    await self._blob_store.upload(
                        self._avatar_bucket,
                        path,
                        avatar_file.content,
                        avatar_file.content_type,
                        upsert=True,
                    )
                except ExternalServiceError as e:
                    return OperationFailure(
                        ErrorCode.AVATAR_UPLOAD_FAILED,
                        f"Failed to upload avatar: {e.message}",
                    )
                profile.change_avatar(
                    self._blob_store.public_url(self._avatar_bucket, path),
                )

            if display_name is not None:
                profile.rename(display_name.strip())

            try:
                await self._profile_repo.upsert(profile)
            except ExternalServiceError as e:
                return OperationFailure(
                    ErrorCode.PROFILE_SAVE_FAILED,
                    f"Failed to save profile: {e.message}",
                )

        except DomainException as e:
            return OperationFailure.from_exception(e)
        except Exception as e:
            logger.exception("Unexpected error updating profile %s", user_id)
            return OperationFailure(ErrorCode.INTERNAL_ERROR, str(e))

        logger.info("Profile updated: %s", user_id)
        return ProfileUpdated(profile=profile)
