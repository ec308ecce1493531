"""Membership role and status value objects."""

from enum import Enum

from capstone.domain.user.value_objects import SystemRole


class MemberRole(str, Enum):
    """Role of a principal within one project."""

    LEADER = "leader"
    ADVISER = "adviser"
    STUDENT = "student"
    CO_ADVISER = "co_adviser"

    @classmethod
    def for_system_role(cls, role: SystemRole | None) -> "MemberRole":
        """Role granted when joining by code. Anything unmapped joins as student."""
        if role is SystemRole.ADVISER:
            return cls.ADVISER
        return cls.STUDENT


class MembershipStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
