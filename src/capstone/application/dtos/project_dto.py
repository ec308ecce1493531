"""Project read models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from capstone.domain.projects import Project, ProjectMembership
from capstone.domain.user import UserProfile


@dataclass(frozen=True)
class MyProjectDTO:
    """A project the caller belongs to, seen through their membership."""

    project_id: UUID
    title: str
    project_code: str
    status: str
    paper_standard: str
    member_role: str
    membership_status: str
    joined_at: Optional[datetime]

    @classmethod
    def from_domain(
        cls,
        project: Project,
        membership: ProjectMembership,
    ) -> "MyProjectDTO":
        return cls(
            project_id=project.id,
            title=project.title,
            project_code=project.project_code,
            status=project.status.value,
            paper_standard=project.paper_standard.value,
            member_role=membership.role.value,
            membership_status=membership.status.value,
            joined_at=membership.responded_at,
        )


@dataclass(frozen=True)
class MemberProfileDTO:
    """Public profile fields of a project participant."""

    user_id: str
    full_name: Optional[str]
    email: Optional[str]
    avatar_url: Optional[str]

    @classmethod
    def from_domain(
        cls,
        user_id: str,
        profile: Optional[UserProfile],
    ) -> "MemberProfileDTO":
        if profile is None:
            return cls(user_id=user_id, full_name=None, email=None, avatar_url=None)
        return cls(
            user_id=user_id,
            full_name=profile.full_name,
            email=profile.email,
            avatar_url=profile.avatar_url,
        )


@dataclass(frozen=True)
class ProjectMemberDTO:
    """An accepted member with their role and profile."""

    profile: MemberProfileDTO
    role: str
    joined_at: Optional[datetime]


@dataclass(frozen=True)
class ProjectDetailDTO:
    """A project with its creator and accepted members."""

    project_id: UUID
    project_code: str
    title: str
    description: str
    abstract: Optional[str]
    paper_standard: str
    project_type: str
    status: str
    program: Optional[str]
    course: Optional[str]
    section: Optional[str]
    keywords: tuple[str, ...]
    document_reference: Optional[str]
    created_at: datetime
    creator: MemberProfileDTO
    members: tuple[ProjectMemberDTO, ...]

    @classmethod
    def from_domain(
        cls,
        project: Project,
        creator: MemberProfileDTO,
        members: Sequence[ProjectMemberDTO],
    ) -> "ProjectDetailDTO":
        return cls(
            project_id=project.id,
            project_code=project.project_code,
            title=project.title,
            description=project.description,
            abstract=project.abstract,
            paper_standard=project.paper_standard.value,
            project_type=project.project_type,
            status=project.status.value,
            program=project.program,
            course=project.course,
            section=project.section,
            keywords=tuple(project.keywords),
            document_reference=project.document_reference,
            created_at=project.created_at,
            creator=creator,
            members=tuple(members),
        )
