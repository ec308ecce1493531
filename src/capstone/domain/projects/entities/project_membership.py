"""Project membership entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from capstone.domain.projects.value_objects import MemberRole, MembershipStatus
from capstone.domain.shared.time import utc_now


@dataclass
class ProjectMembership:
    """Association of one principal with one project.

    At most one membership exists per (project_id, user_id).
    """

    project_id: UUID
    user_id: str
    role: MemberRole
    status: MembershipStatus = MembershipStatus.PENDING
    invited_at: datetime = field(default_factory=utc_now)
    responded_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def accepted(
        cls,
        project_id: UUID,
        user_id: str,
        role: MemberRole,
    ) -> "ProjectMembership":
        """A membership that is accepted the moment it is created."""
        now = utc_now()
        return cls(
            project_id=project_id,
            user_id=user_id,
            role=role,
            status=MembershipStatus.ACCEPTED,
            invited_at=now,
            responded_at=now,
        )

    @property
    def is_accepted(self) -> bool:
        return self.status is MembershipStatus.ACCEPTED

    def accept(self) -> None:
        """Accept a pending or declined membership. The role is kept."""
        self.status = MembershipStatus.ACCEPTED
        self.responded_at = utc_now()
