"""User role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from capstone.domain.user.aggregates import RoleAssignment


class UserRoleRepository(ABC):
    """Repository interface for system-wide role assignments."""

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[RoleAssignment]:
        """Find the role assigned to a principal."""

    @abstractmethod
    async def assign(self, assignment: RoleAssignment) -> None:
        """Store the role, replacing any role already held by the principal."""
