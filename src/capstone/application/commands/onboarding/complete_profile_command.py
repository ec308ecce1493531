"""Complete the profile of a newly authenticated principal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from capstone.application.dtos import (
    CompleteProfileResult,
    OperationFailure,
    ProfileCompleted,
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
    OnboardingRole,
    RoleAssignment,
    UserProfile,
    UserProfileRepository,
    UserRoleRepository,
    avatar_storage_path,
    validate_avatar,
    validate_photo_url,
)

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory
    from capstone.application.ports import BlobStore

logger = logging.getLogger(__name__)

DEFAULT_AVATAR_BUCKET = "Profile_pictures"
MISSING_FIELDS_MESSAGE = (
    "Missing required fields: userId, displayName, role, and email are required"
)


class CompleteProfileCommand:
    """
    Onboard a principal: resolve the avatar, save the profile, assign the role.

    Steps run strictly in order and the first failure ends the operation:

    1. Avatar: upload the supplied file, else use the external photo URL
    2. Upsert the profile keyed on the principal ID
    3. Assign the system role mapped from the onboarding role
    4. Resolve the landing path for that role

    No store is touched before all inputs are validated.
    """

    def __init__(
        self,
        profile_repo: UserProfileRepository,
        role_repo: UserRoleRepository,
        blob_store: BlobStore,
        avatar_bucket: str = DEFAULT_AVATAR_BUCKET,
        avatar_max_bytes: int = AVATAR_MAX_BYTES,
    ):
        self._profile_repo = profile_repo
        self._role_repo = role_repo
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
    ) -> CompleteProfileCommand:
        return cls(
            profile_repo=factory.user_profile_repository(),
            role_repo=factory.user_role_repository(),
            blob_store=blob_store,
            avatar_bucket=avatar_bucket,
            avatar_max_bytes=avatar_max_bytes,
        )

    async def execute(  # NOQA: PLR0913
        self,
        user_id: str,
        email: str,
        display_name: str,
        role: str,
        avatar_file: Optional[UploadedFile] = None,
        external_photo_url: Optional[str] = None,
    ) -> CompleteProfileResult:
        try:
            onboarding_role = self._validate(
                user_id=user_id,
                email=email,
                display_name=display_name,
                role=role,
                avatar_file=avatar_file,
                external_photo_url=external_photo_url,
            )

            try:
                avatar_url = await self._resolve_avatar(
                    user_id,
                    avatar_file,
                    external_photo_url,
                )
            except ExternalServiceError as e:
                logger.error("Avatar upload failed for %s: %s", user_id, e)
                return OperationFailure(
                    ErrorCode.AVATAR_UPLOAD_FAILED,
                    f"Failed to upload avatar: {e.message}",
                )

            profile = UserProfile.create(
                user_id=user_id,
                full_name=display_name.strip(),
                email=email.strip(),
                avatar_url=avatar_url,
            )
            try:
                await self._profile_repo.upsert(profile)
            except ExternalServiceError as e:
                logger.error("Profile upsert failed for %s: %s", user_id, e)
                return OperationFailure(
                    ErrorCode.PROFILE_SAVE_FAILED,
                    f"Failed to save profile: {e.message}",
                )

            assignment = RoleAssignment(
                user_id=user_id,
                role=onboarding_role.system_role,
            )
            try:
                await self._role_repo.assign(assignment)
            except ExternalServiceError as e:
                logger.error("Role assignment failed for %s: %s", user_id, e)
                return OperationFailure(
                    ErrorCode.ROLE_ASSIGNMENT_FAILED,
                    f"Failed to assign role: {e.message}",
                )

        except DomainException as e:
            return OperationFailure.from_exception(e)
        except Exception as e:
            logger.exception("Unexpected error completing profile for %s", user_id)
            return OperationFailure(
                ErrorCode.INTERNAL_ERROR,
                str(e) or "An unexpected error occurred",
            )

        logger.info(
            "Profile completed for %s (role: %s)",
            user_id,
            assignment.role.value,
        )
        return ProfileCompleted(
            redirect_path=onboarding_role.redirect_path,
            avatar_url=avatar_url,
        )

    def _validate(  # NOQA: PLR0913
        self,
        user_id: str,
        email: str,
        display_name: str,
        role: str,
        avatar_file: Optional[UploadedFile],
        external_photo_url: Optional[str],
    ) -> OnboardingRole:
        if not all(_filled(v) for v in (user_id, display_name, role, email)):
            raise ValidationError(
                MISSING_FIELDS_MESSAGE,
                code=ErrorCode.MISSING_REQUIRED_FIELDS,
            )

        try:
            onboarding_role = OnboardingRole(role)
        except ValueError as e:
            raise ValidationError(
                "Invalid role. Must be one of: student, teacher",
                code=ErrorCode.INVALID_ROLE,
                details={"role": role},
            ) from e

        if avatar_file is not None:
            validate_avatar(avatar_file, self._avatar_max_bytes)
        elif external_photo_url:
            validate_photo_url(external_photo_url)

        return onboarding_role

    async def _resolve_avatar(
        self,
        user_id: str,
        avatar_file: Optional[UploadedFile],
        external_photo_url: Optional[str],
    ) -> Optional[str]:
        if avatar_file is not None:
            path = avatar_storage_path(user_id, avatar_file, epoch_millis())
            await self._blob_store.upload(
                self._avatar_bucket,
                path,
                avatar_file.content,
                avatar_file.content_type,
                upsert=True,
            )
            return self._blob_store.public_url(self._avatar_bucket, path)
        if external_photo_url:
            return external_photo_url
        return None


def _filled(value: Optional[str]) -> bool:
    return bool(value and value.strip())
