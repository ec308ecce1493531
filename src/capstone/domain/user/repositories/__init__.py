from capstone.domain.user.repositories.user_profile_repository import (
    UserProfileRepository,
)
from capstone.domain.user.repositories.user_role_repository import UserRoleRepository

__all__ = ["UserProfileRepository", "UserRoleRepository"]
