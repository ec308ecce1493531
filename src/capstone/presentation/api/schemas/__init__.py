"""API request/response schemas."""

from capstone.presentation.api.schemas.auth import LandingResponse, SignOutResponse
from capstone.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    FailureResponse,
    HealthResponse,
)
from capstone.presentation.api.schemas.profile import (
    CompleteProfileResponse,
    ProfileResponse,
)
from capstone.presentation.api.schemas.projects import (
    CreateProjectResponse,
    JoinProjectRequest,
    JoinProjectResponse,
    MemberResponse,
    MyProjectResponse,
    ParticipantProfile,
    ProjectDetailResponse,
    ProjectMemberResponse,
    ProjectSummary,
)

__all__ = [
    "CamelModel",
    "CompleteProfileResponse",
    "CreateProjectResponse",
    "ErrorResponse",
    "FailureResponse",
    "HealthResponse",
    "JoinProjectRequest",
    "JoinProjectResponse",
    "LandingResponse",
    "MemberResponse",
    "MyProjectResponse",
    "ParticipantProfile",
    "ProfileResponse",
    "ProjectDetailResponse",
    "ProjectMemberResponse",
    "ProjectSummary",
    "SignOutResponse",
]
