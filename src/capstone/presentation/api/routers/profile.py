"""Profile router for reading and editing the caller's own profile."""

import logging
from typing import Annotated, Optional, Union

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse

from capstone.application.commands.user import UpdateProfileCommand
from capstone.application.dtos import OperationFailure, ProfileDTO
from capstone.application.queries.user import GetProfileQuery
from capstone.presentation.api.dependencies import (
    AppSettings,
    CurrentPrincipal,
    RepoFactory,
    Storage,
)
from capstone.presentation.api.exception_handlers import failure_response
from capstone.presentation.api.schemas import (
    ErrorResponse,
    FailureResponse,
    ProfileResponse,
)
from capstone.presentation.api.uploads import read_upload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/me",
    summary="Get my profile",
    response_model=ProfileResponse,
    responses={
        200: {"description": "The caller's profile"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Onboarding not completed"},
    },
)
async def get_my_profile(
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> ProfileResponse:
    """Return the caller's profile together with their system role."""
    query = GetProfileQuery.from_factory(factory)
    dto = await query.execute(principal.user_id)
    return ProfileResponse.from_dto(dto)


@router.patch(
    "/me",
    summary="Edit my profile",
    response_model=ProfileResponse,
    responses={
        200: {"description": "Profile updated"},
        400: {"model": FailureResponse, "description": "Invalid input"},
        404: {"model": FailureResponse, "description": "Onboarding not completed"},
        500: {"model": FailureResponse, "description": "Upload or store failure"},
    },
)
async def update_my_profile(
    principal: CurrentPrincipal,
    factory: RepoFactory,
    blob_store: Storage,
    settings: AppSettings,
    display_name: Annotated[Optional[str], Form(alias="displayName")] = None,
    avatar: Annotated[Optional[UploadFile], File()] = None,
) -> Union[ProfileResponse, JSONResponse]:
    """Change the display name and/or avatar. Omitted fields stay unchanged."""
    command = UpdateProfileCommand.from_factory(
        factory,
        blob_store,
        avatar_bucket=settings.avatar_bucket,
        avatar_max_bytes=settings.avatar_max_bytes,
    )

    try:
        result = await command.execute(
            user_id=principal.user_id,
            display_name=display_name,
            avatar_file=await read_upload(avatar, settings.avatar_max_bytes),
        )
        if isinstance(result, OperationFailure):
            await factory.session.rollback()
            return failure_response(result)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    assignment = await factory.user_role_repository().find_by_user_id(
        principal.user_id,
    )
    return ProfileResponse.from_dto(ProfileDTO.from_domain(result.profile, assignment))
