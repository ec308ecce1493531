"""Tagged result types returned by commands.

Every command returns either a success variant carrying its payload or an
``OperationFailure`` carrying an ``ErrorCode`` and a human-readable message.
Both expose ``success`` so callers can branch without isinstance checks.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union
from uuid import UUID

from capstone.domain.projects import ProjectMembership
from capstone.domain.shared.exceptions import DomainException, ErrorCode
from capstone.domain.user import SystemRole, UserProfile

JOINED_MESSAGE = "Successfully joined the project"
CREATED_MESSAGE = "Project created successfully"


@dataclass(frozen=True)
class OperationFailure:
    code: ErrorCode
    message: str

    success: ClassVar[bool] = False

    @classmethod
    def from_exception(cls, exc: DomainException) -> "OperationFailure":
        return cls(code=exc.code, message=exc.message)


@dataclass(frozen=True)
class OperationSuccess:
    success: ClassVar[bool] = True


@dataclass(frozen=True)
class ProfileCompleted(OperationSuccess):
    redirect_path: str
    avatar_url: Optional[str] = None


@dataclass(frozen=True)
class ProfileUpdated(OperationSuccess):
    profile: UserProfile


@dataclass(frozen=True)
class ProjectJoined(OperationSuccess):
    project_id: UUID
    project_title: str
    membership: ProjectMembership
    message: str = JOINED_MESSAGE


@dataclass(frozen=True)
class ProjectCreated(OperationSuccess):
    """A created project. ``warning`` is set when the document did not attach."""

    project_id: UUID
    project_code: str
    message: str = CREATED_MESSAGE
    warning: Optional[str] = None


@dataclass(frozen=True)
class LandingResolved(OperationSuccess):
    redirect_path: str
    role: Optional[SystemRole] = None
    avatar_backfilled: bool = False


CompleteProfileResult = Union[ProfileCompleted, OperationFailure]
UpdateProfileResult = Union[ProfileUpdated, OperationFailure]
JoinProjectResult = Union[ProjectJoined, OperationFailure]
CreateProjectResult = Union[ProjectCreated, OperationFailure]
ResolveLandingResult = Union[LandingResolved, OperationFailure]
