"""Data classes shared by the auth services."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class TokenPayload:
    """Decoded and verified content of an access token."""

    user_id: str
    email: str
    exp: datetime
    user_metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def avatar_url(self) -> str | None:
        """Photo URL supplied by an OAuth provider, if any."""
        url = self.user_metadata.get("avatar_url") or self.user_metadata.get(
            "picture"
        )
        return str(url) if url else None
