"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from capstone.domain.user.aggregates import UserProfile


class UserProfileRepository(ABC):
    """Repository interface for UserProfile aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Find a profile by principal ID."""

    @abstractmethod
    async def upsert(self, profile: UserProfile) -> None:
        """Insert the profile, or overwrite the existing row with the same ID."""
