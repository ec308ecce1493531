"""Profile read model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from capstone.domain.user import RoleAssignment, UserProfile


@dataclass(frozen=True)
class ProfileDTO:
    user_id: str
    full_name: str
    email: str
    avatar_url: Optional[str]
    role: Optional[str]
    updated_at: datetime

    @classmethod
    def from_domain(
        cls,
        profile: UserProfile,
        assignment: Optional[RoleAssignment],
    ) -> "ProfileDTO":
        return cls(
            user_id=profile.id,
            full_name=profile.full_name,
            email=profile.email,
            avatar_url=profile.avatar_url,
            role=assignment.role.value if assignment else None,
            updated_at=profile.updated_at,
        )
