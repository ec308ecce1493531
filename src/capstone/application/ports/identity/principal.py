"""Principal - capstone's view of the authenticated caller.

This is a port that defines what capstone needs from the identity provider.
The adapter translates verified tokens into this type.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """Immutable representation of the authenticated caller.

    ``avatar_url`` is the photo supplied by an OAuth provider, if any.
    """

    user_id: str
    email: str
    avatar_url: Optional[str] = None

    def __str__(self) -> str:
        return f"Principal({self.email})"
