"""Project aggregate."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID, uuid4

from capstone.domain.projects.value_objects import (
    PaperStandard,
    ProjectStatus,
    generate_project_code,
)
from capstone.domain.shared.exceptions import ErrorCode, ValidationError
from capstone.domain.shared.time import utc_now

INDEPENDENT_PROJECT_TYPE = "independent"


class Project:
    """
    A research project.

    - ``project_code`` is the shareable join code and is unique store-wide
    - the description is duplicated into ``abstract`` on creation
    - ``document_reference`` is the public URL of the attached document
    """

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        description: str,
        paper_standard: PaperStandard,
        created_by: str,
        project_code: Optional[str] = None,
        abstract: Optional[str] = None,
        project_type: str = INDEPENDENT_PROJECT_TYPE,
        status: ProjectStatus = ProjectStatus.DRAFT,
        program: Optional[str] = None,
        course: Optional[str] = None,
        section: Optional[str] = None,
        keywords: Sequence[str] = (),
        document_reference: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._project_code = project_code or generate_project_code()
        self._title = title
        self._description = description
        self._abstract = abstract if abstract is not None else description
        self._paper_standard = paper_standard
        self._project_type = project_type
        self._status = status
        self._program = program
        self._course = course
        self._section = section
        self._keywords = list(keywords)
        self._document_reference = document_reference
        self._created_by = created_by
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        title: str,
        description: str,
        paper_standard: PaperStandard,
        created_by: str,
        program: Optional[str] = None,
        course: Optional[str] = None,
        section: Optional[str] = None,
        keywords: Sequence[str] = (),
    ) -> "Project":
        """Start a new draft project with a fresh join code.

        Title and description are trimmed; both must be non-empty afterwards.
        """
        title = (title or "").strip()
        description = (description or "").strip()
        if not title or not description:
            raise ValidationError(
                "Title and description are required",
                code=ErrorCode.MISSING_REQUIRED_FIELDS,
            )
        return cls(
            title=title,
            description=description,
            paper_standard=paper_standard,
            created_by=created_by,
            program=program,
            course=course,
            section=section,
            keywords=keywords,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        project_code: str,
        title: str,
        description: str,
        abstract: Optional[str],
        paper_standard: PaperStandard,
        project_type: str,
        status: ProjectStatus,
        created_by: str,
        created_at: datetime,
        updated_at: datetime,
        program: Optional[str] = None,
        course: Optional[str] = None,
        section: Optional[str] = None,
        keywords: Sequence[str] = (),
        document_reference: Optional[str] = None,
    ) -> "Project":
        return cls(
            id=id,
            project_code=project_code,
            title=title,
            description=description,
            abstract=abstract,
            paper_standard=paper_standard,
            project_type=project_type,
            status=status,
            created_by=created_by,
            created_at=created_at,
            updated_at=updated_at,
            program=program,
            course=course,
            section=section,
            keywords=keywords,
            document_reference=document_reference,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def project_code(self) -> str:
        return self._project_code

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def abstract(self) -> Optional[str]:
        return self._abstract

    @property
    def paper_standard(self) -> PaperStandard:
        return self._paper_standard

    @property
    def project_type(self) -> str:
        return self._project_type

    @property
    def status(self) -> ProjectStatus:
        return self._status

    @property
    def program(self) -> Optional[str]:
        return self._program

    @property
    def course(self) -> Optional[str]:
        return self._course

    @property
    def section(self) -> Optional[str]:
        return self._section

    @property
    def keywords(self) -> list[str]:
        return list(self._keywords)

    @property
    def document_reference(self) -> Optional[str]:
        return self._document_reference

    @property
    def created_by(self) -> str:
        return self._created_by

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def attach_document(self, url: str) -> None:
        self._document_reference = url
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Project(id={self._id}, code={self._project_code!r}, "
            f"title={self._title!r}, status={self._status.value})"
        )
