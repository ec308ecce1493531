"""Project schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from capstone.application.dtos import (
    MemberProfileDTO,
    MyProjectDTO,
    ProjectDetailDTO,
    ProjectMemberDTO,
)
from capstone.domain.projects import ProjectMembership
from capstone.presentation.api.schemas.common import CamelModel


class JoinProjectRequest(CamelModel):
    """Request to join a project by its shareable code.

    Absent or null fields are reported as missing by the command.
    """

    project_code: Optional[str] = Field(None, description="Shareable project code")
    user_id: Optional[str] = Field(
        None,
        description="Must match the authenticated principal",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "projectCode": "1f0b6c1e-5d3a-4b8e-9a41-0c2d7e9f3a10",
                "userId": "6b1d5c7e-0000-4000-8000-000000000001",
            },
        },
    }


class ProjectSummary(CamelModel):
    id: UUID
    title: str


class MemberResponse(CamelModel):
    """A project membership row."""

    id: UUID
    project_id: UUID
    user_id: str
    role: str
    status: str
    invited_at: datetime
    responded_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, membership: ProjectMembership) -> "MemberResponse":
        return cls(
            id=membership.id,
            project_id=membership.project_id,
            user_id=membership.user_id,
            role=membership.role.value,
            status=membership.status.value,
            invited_at=membership.invited_at,
            responded_at=membership.responded_at,
        )


class JoinProjectResponse(CamelModel):
    success: bool = True
    message: str
    project: ProjectSummary
    member: Optional[MemberResponse] = None


class CreateProjectResponse(CamelModel):
    """Response after creating a project."""

    success: bool = True
    project_id: UUID
    project_code: str
    message: str
    warning: Optional[str] = Field(
        None,
        description="Set when the project was created but the document did not attach",
    )


class MyProjectResponse(CamelModel):
    """A project the caller belongs to."""

    project_id: UUID
    title: str
    project_code: str
    status: str
    paper_standard: str
    member_role: str
    membership_status: str
    joined_at: Optional[datetime] = None

    @classmethod
    def from_dto(cls, dto: MyProjectDTO) -> "MyProjectResponse":
        return cls(
            project_id=dto.project_id,
            title=dto.title,
            project_code=dto.project_code,
            status=dto.status,
            paper_standard=dto.paper_standard,
            member_role=dto.member_role,
            membership_status=dto.membership_status,
            joined_at=dto.joined_at,
        )


class ParticipantProfile(CamelModel):
    """Profile fields of a creator or member. Unset when no profile is stored."""

    user_id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_dto(cls, dto: MemberProfileDTO) -> "ParticipantProfile":
        return cls(
            user_id=dto.user_id,
            full_name=dto.full_name,
            email=dto.email,
            avatar_url=dto.avatar_url,
        )


class ProjectMemberResponse(ParticipantProfile):
    role: str
    joined_at: Optional[datetime] = None

    @classmethod
    def from_member(cls, dto: ProjectMemberDTO) -> "ProjectMemberResponse":
        return cls(
            user_id=dto.profile.user_id,
            full_name=dto.profile.full_name,
            email=dto.profile.email,
            avatar_url=dto.profile.avatar_url,
            role=dto.role,
            joined_at=dto.joined_at,
        )


class ProjectDetailResponse(CamelModel):
    """A project with its creator and accepted members."""

    id: UUID
    project_code: str
    title: str
    description: str
    abstract: Optional[str] = None
    paper_standard: str
    project_type: str
    status: str
    program: Optional[str] = None
    course: Optional[str] = None
    section: Optional[str] = None
    keywords: list[str] = Field(default_factory=list)
    document_url: Optional[str] = None
    created_at: datetime
    creator: ParticipantProfile
    members: list[ProjectMemberResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: ProjectDetailDTO) -> "ProjectDetailResponse":
        return cls(
            id=dto.project_id,
            project_code=dto.project_code,
            title=dto.title,
            description=dto.description,
            abstract=dto.abstract,
            paper_standard=dto.paper_standard,
            project_type=dto.project_type,
            status=dto.status,
            program=dto.program,
            course=dto.course,
            section=dto.section,
            keywords=list(dto.keywords),
            document_url=dto.document_reference,
            created_at=dto.created_at,
            creator=ParticipantProfile.from_dto(dto.creator),
            members=[ProjectMemberResponse.from_member(m) for m in dto.members],
        )
