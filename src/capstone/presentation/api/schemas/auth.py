"""Sign-in flow schemas."""

from typing import Optional

from pydantic import Field

from capstone.presentation.api.schemas.common import CamelModel


class LandingResponse(CamelModel):
    """Where a freshly signed-in principal should be sent."""

    redirect_path: str = Field(..., description="Client route to navigate to")
    role: Optional[str] = Field(None, description="System role, if assigned")
    avatar_backfilled: bool = Field(
        False,
        description="True when the OAuth photo was copied onto the profile",
    )


class SignOutResponse(CamelModel):
    message: str = "Signed out"
