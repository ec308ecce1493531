"""Profile and onboarding schemas for API request/response models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from capstone.application.dtos import ProfileDTO
from capstone.presentation.api.schemas.common import CamelModel


class CompleteProfileResponse(CamelModel):
    """Response after a successful profile completion."""

    success: bool = True
    redirect_path: str = Field(..., description="Where the client goes next")
    avatar_url: Optional[str] = Field(None, description="Resolved avatar URL")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "redirectPath": "/student",
                "avatarUrl": None,
            },
        },
    }


class ProfileResponse(CamelModel):
    """The caller's profile with their system role."""

    user_id: str
    full_name: str
    email: str
    avatar_url: Optional[str] = None
    role: Optional[str] = Field(None, description="System role, if assigned")
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: ProfileDTO) -> "ProfileResponse":
        return cls(
            user_id=dto.user_id,
            full_name=dto.full_name,
            email=dto.email,
            avatar_url=dto.avatar_url,
            role=dto.role,
            updated_at=dto.updated_at,
        )
