"""Create a research project with an optional document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from capstone.application.dtos import (
    CreateProjectResult,
    OperationFailure,
    ProjectCreated,
)
from capstone.domain.projects import (
    DOCUMENT_MAX_BYTES,
    MemberRole,
    PaperStandard,
    Project,
    ProjectMembership,
    ProjectMembershipRepository,
    ProjectRepository,
    document_storage_path,
    validate_document,
)
from capstone.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from capstone.domain.shared.time import epoch_millis
from capstone.domain.shared.value_objects import UploadedFile

if TYPE_CHECKING:
    from capstone.application.factories import RepositoryFactory
    from capstone.application.ports import BlobStore

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_BUCKET = "project_documents"
UPLOAD_ERROR_WARNING = "Project created but document upload encountered an error"


class CreateProjectCommand:
    """
    Create a draft project and register its creator as leader.

    The project row is the unit of success. Attaching the document and
    registering the leader are best effort: a failed upload is returned as a
    warning, and a failed leader registration is only logged.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        membership_repo: ProjectMembershipRepository,
        blob_store: BlobStore,
        document_bucket: str = DEFAULT_DOCUMENT_BUCKET,
        document_max_bytes: int = DOCUMENT_MAX_BYTES,
    ):
        self._project_repo = project_repo
        self._membership_repo = membership_repo
        self._blob_store = blob_store
        self._document_bucket = document_bucket
        self._document_max_bytes = document_max_bytes

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        blob_store: BlobStore,
        document_bucket: str = DEFAULT_DOCUMENT_BUCKET,
        document_max_bytes: int = DOCUMENT_MAX_BYTES,
    ) -> CreateProjectCommand:
        return cls(
            project_repo=factory.project_repository(),
            membership_repo=factory.membership_repository(),
            blob_store=blob_store,
            document_bucket=document_bucket,
            document_max_bytes=document_max_bytes,
        )

    async def execute(  # NOQA: PLR0913
        self,
        user_id: str,
        title: Optional[str],
        description: Optional[str],
        paper_standard: Optional[str],
        program: Optional[str] = None,
        course: Optional[str] = None,
        section: Optional[str] = None,
        keywords: Sequence[str] = (),
        document: Optional[UploadedFile] = None,
    ) -> CreateProjectResult:
        try:
            if not (title and title.strip()) or not (
                description and description.strip()
            ):
                raise ValidationError(
                    "Title and description are required",
                    code=ErrorCode.MISSING_REQUIRED_FIELDS,
                )
            standard = PaperStandard.parse(paper_standard)
            if document is not None:
                validate_document(document, self._document_max_bytes)

            project = Project.create(
                title=title,
                description=description,
                paper_standard=standard,
                created_by=user_id,
                program=_blank_to_none(program),
                course=_blank_to_none(course),
                section=_blank_to_none(section),
                keywords=keywords,
            )
            try:
                await self._project_repo.add(project)
            except ExternalServiceError as e:
                logger.error("Project creation error: %s", e)
                return OperationFailure(
                    ErrorCode.PROJECT_SAVE_FAILED,
                    f"Failed to create project: {e.message}",
                )
            logger.info(
                "Project created: %s (code: %s) by %s",
                project.id,
                project.project_code,
                user_id,
            )

            warning = None
            if document is not None:
                warning = await self._attach_document(project, document)

            await self._register_leader(project, user_id)

        except DomainException as e:
            return OperationFailure.from_exception(e)
        except Exception as e:
            logger.exception("Unexpected error creating project")
            return OperationFailure(
                ErrorCode.INTERNAL_ERROR,
                str(e) or "Internal server error",
            )

        return ProjectCreated(
            project_id=project.id,
            project_code=project.project_code,
            warning=warning,
        )

    async def _attach_document(
        self,
        project: Project,
        document: UploadedFile,
    ) -> Optional[str]:
        """Upload the document; return a warning instead of failing."""
        path = document_storage_path(project.id, document, epoch_millis())
        try:
            await self._blob_store.upload(
                self._document_bucket,
                path,
                document.content,
                document.content_type,
                upsert=False,
            )
        except ExternalServiceError as e:
            logger.warning("Document upload failed for %s: %s", project.id, e)
            return f"Project created but document upload failed: {e.message}"
        except Exception:
            logger.exception("Unexpected error uploading document for %s", project.id)
            return UPLOAD_ERROR_WARNING

        url = self._blob_store.public_url(self._document_bucket, path)
        try:
            await self._project_repo.set_document_reference(project.id, url)
        except ExternalServiceError as e:
            logger.error(
                "Error updating project %s with document reference: %s",
                project.id,
                e,
            )
        else:
            project.attach_document(url)
        return None

    async def _register_leader(self, project: Project, user_id: str) -> None:
        membership = ProjectMembership.accepted(
            project_id=project.id,
            user_id=user_id,
            role=MemberRole.LEADER,
        )
        try:
            await self._membership_repo.add(membership)
        except DomainException as e:
            logger.error("Error adding project leader to %s: %s", project.id, e)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None
