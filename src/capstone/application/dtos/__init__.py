"""Data transfer objects returned by the application layer."""

from capstone.application.dtos.profile_dto import ProfileDTO
from capstone.application.dtos.project_dto import (
    MemberProfileDTO,
    MyProjectDTO,
    ProjectDetailDTO,
    ProjectMemberDTO,
)
from capstone.application.dtos.results import (
    CREATED_MESSAGE,
    JOINED_MESSAGE,
    CompleteProfileResult,
    CreateProjectResult,
    JoinProjectResult,
    LandingResolved,
    OperationFailure,
    OperationSuccess,
    ProfileCompleted,
    ProfileUpdated,
    ProjectCreated,
    ProjectJoined,
    ResolveLandingResult,
    UpdateProfileResult,
)

__all__ = [
    "CREATED_MESSAGE",
    "JOINED_MESSAGE",
    "CompleteProfileResult",
    "CreateProjectResult",
    "JoinProjectResult",
    "LandingResolved",
    "MemberProfileDTO",
    "MyProjectDTO",
    "OperationFailure",
    "OperationSuccess",
    "ProfileCompleted",
    "ProfileDTO",
    "ProfileUpdated",
    "ProjectCreated",
    "ProjectDetailDTO",
    "ProjectJoined",
    "ProjectMemberDTO",
    "ResolveLandingResult",
    "UpdateProfileResult",
]
