"""User domain - profile and system-wide role of a principal.

This domain handles:
- UserProfile aggregate (display name, email, avatar)
- RoleAssignment (student / adviser / coordinator)
- The fixed onboarding-role to system-role mapping

Design notes:
- Principal IDs are opaque strings issued by the identity provider
- Profile and role live in separate tables; a principal may briefly have a
  profile without a role while onboarding
- Repository interfaces defined here, implementations in infrastructure
"""

from capstone.domain.user.aggregates import RoleAssignment, UserProfile
from capstone.domain.user.exceptions import ProfileNotFoundError
from capstone.domain.user.repositories import (
    UserProfileRepository,
    UserRoleRepository,
)
from capstone.domain.user.value_objects import (
    AVATAR_CONTENT_TYPES,
    AVATAR_MAX_BYTES,
    OnboardingRole,
    SystemRole,
    avatar_storage_path,
    validate_avatar,
    validate_photo_url,
)

__all__ = [
    "AVATAR_CONTENT_TYPES",
    "AVATAR_MAX_BYTES",
    "OnboardingRole",
    "ProfileNotFoundError",
    "RoleAssignment",
    "SystemRole",
    "UserProfile",
    "UserProfileRepository",
    "UserRoleRepository",
    "avatar_storage_path",
    "validate_avatar",
    "validate_photo_url",
]
