"""System-wide role held by a principal."""

from dataclasses import dataclass, field
from datetime import datetime

from capstone.domain.shared.time import utc_now
from capstone.domain.user.value_objects import SystemRole


@dataclass(frozen=True)
class RoleAssignment:
    """The single system role of a principal (separate from the profile)."""

    user_id: str
    role: SystemRole
    created_at: datetime = field(default_factory=utc_now)
