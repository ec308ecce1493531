from capstone.domain.user.value_objects.avatar import (
    AVATAR_CONTENT_TYPES,
    AVATAR_MAX_BYTES,
    avatar_storage_path,
    validate_avatar,
    validate_photo_url,
)
from capstone.domain.user.value_objects.system_role import OnboardingRole, SystemRole

__all__ = [
    "AVATAR_CONTENT_TYPES",
    "AVATAR_MAX_BYTES",
    "OnboardingRole",
    "SystemRole",
    "avatar_storage_path",
    "validate_avatar",
    "validate_photo_url",
]
