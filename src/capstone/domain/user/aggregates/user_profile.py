"""User profile aggregate."""

from datetime import datetime
from typing import Optional

from capstone.domain.shared.time import utc_now


class UserProfile:
    """
    Public profile of a principal.

    Keyed 1:1 by the identifier issued by the identity provider, so saving
    the same profile twice overwrites rather than duplicates it.
    """

    def __init__(
        self,
        user_id: str,
        full_name: str,
        email: str,
        avatar_url: Optional[str] = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = user_id
        self._full_name = full_name
        self._email = email
        self._avatar_url = avatar_url
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> str:
        return self._id

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> str:
        return self._email

    @property
    def avatar_url(self) -> Optional[str]:
        return self._avatar_url

    @property
    def has_avatar(self) -> bool:
        return bool(self._avatar_url)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, full_name: str) -> None:
        self._full_name = full_name
        self._updated_at = utc_now()

    def change_avatar(self, avatar_url: Optional[str]) -> None:
        self._avatar_url = avatar_url
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        user_id: str,
        full_name: str,
        email: str,
        avatar_url: Optional[str] = None,
    ) -> "UserProfile":
        return cls(
            user_id=user_id,
            full_name=full_name,
            email=email,
            avatar_url=avatar_url,
        )

    @classmethod
    def reconstitute(
        cls,
        user_id: str,
        full_name: str,
        email: str,
        avatar_url: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "UserProfile":
        return cls(
            user_id=user_id,
            full_name=full_name,
            email=email,
            avatar_url=avatar_url,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserProfile):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"UserProfile(id={self._id!r}, email={self._email!r})"
