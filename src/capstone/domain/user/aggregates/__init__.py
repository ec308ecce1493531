from capstone.domain.user.aggregates.role_assignment import RoleAssignment
from capstone.domain.user.aggregates.user_profile import UserProfile

__all__ = ["RoleAssignment", "UserProfile"]
