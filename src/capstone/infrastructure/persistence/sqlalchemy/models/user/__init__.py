from capstone.infrastructure.persistence.sqlalchemy.models.user.user_profile_model import (  # NOQA: E501
    UserProfileModel,
)
from capstone.infrastructure.persistence.sqlalchemy.models.user.user_role_model import (
    UserRoleModel,
)

__all__ = ["UserProfileModel", "UserRoleModel"]
