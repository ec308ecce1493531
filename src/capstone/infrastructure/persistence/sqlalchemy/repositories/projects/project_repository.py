"""SQLAlchemy implementation of ProjectRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from capstone.domain.projects import (
    PaperStandard,
    Project,
    ProjectRepository,
    ProjectStatus,
)
from capstone.domain.shared.exceptions import RecordStoreError
from capstone.domain.shared.time import ensure_tz_aware, utc_now
from capstone.infrastructure.persistence.sqlalchemy.models.projects import (
    ProjectModel,
)
from capstone.infrastructure.persistence.sqlalchemy.repositories._utils import (
    to_store_error,
)

logger = logging.getLogger(__name__)


class ProjectRepositorySQLAlchemy(ProjectRepository):
    """SQLAlchemy implementation of the ProjectRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, project_id: UUID) -> Optional[Project]:
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        return await self._find_one(stmt, "find_project")

    async def find_by_code(self, project_code: str) -> Optional[Project]:
        stmt = select(ProjectModel).where(ProjectModel.project_code == project_code)
        return await self._find_one(stmt, "find_project_by_code")

    async def add(self, project: Project) -> None:
        self._session.add(self._map_to_model(project))
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            raise to_store_error(e, "add_project") from e
        logger.debug("Inserted project %s", project.id)

    async def set_document_reference(self, project_id: UUID, url: str) -> None:
        """Store the document URL inside a SAVEPOINT.

        A failure leaves the surrounding transaction (and the project) intact.
        """
        stmt = (
            update(ProjectModel)
            .where(ProjectModel.id == project_id)
            .values(document_reference=url, updated_at=utc_now())
        )
        try:
            async with self._session.begin_nested():
                result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise to_store_error(e, "set_document_reference") from e

        if result.rowcount == 0:
            msg = f"Project {project_id} does not exist"
            raise RecordStoreError(msg, details={"project_id": str(project_id)})

    async def _find_one(self, stmt, operation: str) -> Optional[Project]:
        try:
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise to_store_error(e, operation) from e

        if model is None:
            return None
        return self._map_to_domain(model)

    def _map_to_model(self, project: Project) -> ProjectModel:
        return ProjectModel(
            id=project.id,
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
            keywords=project.keywords,
            document_reference=project.document_reference,
            created_by=project.created_by,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )

    def _map_to_domain(self, model: ProjectModel) -> Project:
        return Project.reconstitute(
            id=model.id,
            project_code=model.project_code,
            title=model.title,
            description=model.description,
            abstract=model.abstract,
            paper_standard=PaperStandard(model.paper_standard),
            project_type=model.project_type,
            status=ProjectStatus(model.status),
            created_by=model.created_by,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            program=model.program,
            course=model.course,
            section=model.section,
            keywords=model.keywords or [],
            document_reference=model.document_reference,
        )
