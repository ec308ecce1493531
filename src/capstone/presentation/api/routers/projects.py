"""Projects router for creating, joining and listing research projects."""

import json
import logging
from typing import Annotated, Optional, Union
from uuid import UUID

from fastapi import APIRouter, File, Form, UploadFile, status
from fastapi.responses import JSONResponse

from capstone.application.commands.projects import (
    CreateProjectCommand,
    JoinProjectCommand,
)
from capstone.application.dtos import OperationFailure
from capstone.application.queries.projects import (
    GetProjectQuery,
    ListMyProjectsQuery,
)
from capstone.presentation.api.dependencies import (
    AppSettings,
    CurrentPrincipal,
    OptionalPrincipal,
    RepoFactory,
    Storage,
)
from capstone.presentation.api.exception_handlers import failure_response
from capstone.presentation.api.schemas import (
    CreateProjectResponse,
    ErrorResponse,
    FailureResponse,
    JoinProjectRequest,
    JoinProjectResponse,
    MemberResponse,
    MyProjectResponse,
    ProjectDetailResponse,
    ProjectSummary,
)
from capstone.presentation.api.uploads import read_upload

logger = logging.getLogger(__name__)

router = APIRouter()


def parse_keywords(raw: Optional[str]) -> list[str]:
    """Parse the ``keywords`` form field, a JSON array of strings.

    Malformed input yields an empty list.
    """
    if not raw:
        return []
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Ignoring malformed keywords field: %r", raw)
        return []
    if not isinstance(parsed, list):
        return []
    return [str(k).strip() for k in parsed if str(k).strip()]


@router.get(
    "",
    summary="List my projects",
    responses={
        200: {"description": "Projects the caller is a member of"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def list_my_projects(
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> list[MyProjectResponse]:
    """List the caller's projects, most recent membership first."""
    query = ListMyProjectsQuery.from_factory(factory)
    projects = await query.execute(principal.user_id)
    return [MyProjectResponse.from_dto(p) for p in projects]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    response_model=CreateProjectResponse,
    responses={
        201: {"description": "Project created (see `warning` for document issues)"},
        400: {"model": FailureResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        500: {"model": FailureResponse, "description": "Store failure"},
    },
)
async def create_project(  # NOQA: PLR0913
    principal: CurrentPrincipal,
    factory: RepoFactory,
    blob_store: Storage,
    settings: AppSettings,
    title: Annotated[Optional[str], Form()] = None,
    abstract: Annotated[Optional[str], Form()] = None,
    description: Annotated[Optional[str], Form()] = None,
    research_type: Annotated[Optional[str], Form(alias="researchType")] = None,
    program: Annotated[Optional[str], Form()] = None,
    course: Annotated[Optional[str], Form()] = None,
    section: Annotated[Optional[str], Form()] = None,
    keywords: Annotated[Optional[str], Form()] = None,
    file: Annotated[Optional[UploadFile], File()] = None,
) -> Union[CreateProjectResponse, JSONResponse]:
    """
    Create a draft project owned by the caller, who becomes its leader.

    `researchType` is the paper standard: `IMRAD`, `IAAA` or `custom`.
    The optional `file` must be a PDF, DOC or DOCX of at most 10MB. When
    it cannot be stored the project is still created and the response
    carries a `warning`.
    """
    command = CreateProjectCommand.from_factory(
        factory,
        blob_store,
        document_bucket=settings.document_bucket,
        document_max_bytes=settings.document_max_bytes,
    )

    try:
        result = await command.execute(
            user_id=principal.user_id,
            title=title,
            description=abstract if abstract is not None else description,
            paper_standard=research_type,
            program=program,
            course=course,
            section=section,
            keywords=parse_keywords(keywords),
            document=await read_upload(file, settings.document_max_bytes),
        )
        if isinstance(result, OperationFailure):
            await factory.session.rollback()
            return failure_response(result)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CreateProjectResponse(
        project_id=result.project_id,
        project_code=result.project_code,
        message=result.message,
        warning=result.warning,
    )


@router.post(
    "/join",
    summary="Join a project by code",
    response_model=JoinProjectResponse,
    responses={
        200: {"description": "Joined, or pending invitation accepted"},
        400: {"model": FailureResponse, "description": "Invalid input or already a member"},
        401: {"model": FailureResponse, "description": "Not authenticated as userId"},
        404: {"model": FailureResponse, "description": "Unknown project code"},
        500: {"model": FailureResponse, "description": "Store failure"},
    },
)
async def join_project(
    request: JoinProjectRequest,
    principal: OptionalPrincipal,
    factory: RepoFactory,
) -> Union[JoinProjectResponse, JSONResponse]:
    """
    Join the project identified by `projectCode` as `userId`.

    The bearer token must belong to `userId`. A pending invitation to the
    project is accepted in place and keeps its invited role.
    """
    command = JoinProjectCommand.from_factory(factory)

    try:
        result = await command.execute(
            project_code=(request.project_code or "").strip(),
            user_id=(request.user_id or "").strip(),
            principal=principal,
        )
        if isinstance(result, OperationFailure):
            await factory.session.rollback()
            return failure_response(result)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return JoinProjectResponse(
        message=result.message,
        project=ProjectSummary(id=result.project_id, title=result.project_title),
        member=MemberResponse.from_domain(result.membership),
    )


@router.get(
    "/{project_id}",
    summary="Get a project",
    responses={
        200: {"description": "The project with its creator and accepted members"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Unknown project or not a member"},
    },
)
async def get_project(
    project_id: UUID,
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> ProjectDetailResponse:
    """
    Get a project the caller created or has joined.

    Members are the accepted ones, oldest first. Projects the caller does
    not belong to are reported as not found.
    """
    query = GetProjectQuery.from_factory(factory)
    project = await query.execute(project_id, principal.user_id)
    return ProjectDetailResponse.from_dto(project)
