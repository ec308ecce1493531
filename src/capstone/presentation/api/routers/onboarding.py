"""Onboarding router for completing the profile of a new principal."""

import logging
from typing import Annotated, Optional, Union

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse

from capstone.application.commands.onboarding import CompleteProfileCommand
from capstone.application.dtos import OperationFailure
from capstone.domain.shared.exceptions import ErrorCode
from capstone.presentation.api.dependencies import (
    AppSettings,
    CurrentPrincipal,
    RepoFactory,
    Storage,
)
from capstone.presentation.api.exception_handlers import failure_response
from capstone.presentation.api.schemas import (
    CompleteProfileResponse,
    FailureResponse,
)
from capstone.presentation.api.uploads import read_upload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/complete-profile",
    summary="Complete the caller's profile",
    response_model=CompleteProfileResponse,
    responses={
        200: {"description": "Profile saved, role assigned"},
        400: {"model": FailureResponse, "description": "Invalid input"},
        401: {"model": FailureResponse, "description": "Not authenticated"},
        500: {"model": FailureResponse, "description": "Upload or store failure"},
    },
)
async def complete_profile(  # NOQA: PLR0913
    principal: CurrentPrincipal,
    factory: RepoFactory,
    blob_store: Storage,
    settings: AppSettings,
    user_id: Annotated[str, Form(alias="userId")] = "",
    email: Annotated[str, Form()] = "",
    display_name: Annotated[str, Form(alias="displayName")] = "",
    role: Annotated[str, Form()] = "",
    google_photo_url: Annotated[Optional[str], Form(alias="googlePhotoUrl")] = None,
    avatar: Annotated[Optional[UploadFile], File()] = None,
) -> Union[CompleteProfileResponse, JSONResponse]:
    """
    Save the display name, email and avatar of the caller, assign the
    system role picked during onboarding and return where to go next.

    - role `student` redirects to `/student`
    - role `teacher` redirects to `/adviser`

    An uploaded `avatar` wins over `googlePhotoUrl`.
    """
    if user_id and user_id != principal.user_id:
        logger.warning(
            "Profile completion for %s attempted by %s",
            user_id,
            principal.user_id,
        )
        return failure_response(OperationFailure(ErrorCode.UNAUTHORIZED, "Unauthorized"))

    command = CompleteProfileCommand.from_factory(
        factory,
        blob_store,
        avatar_bucket=settings.avatar_bucket,
        avatar_max_bytes=settings.avatar_max_bytes,
    )

    try:
        result = await command.execute(
            user_id=user_id,
            email=email,
            display_name=display_name,
            role=role,
            avatar_file=await read_upload(avatar, settings.avatar_max_bytes),
            external_photo_url=google_photo_url or None,
        )
        if isinstance(result, OperationFailure):
            await factory.session.rollback()
            return failure_response(result)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CompleteProfileResponse(
        redirect_path=result.redirect_path,
        avatar_url=result.avatar_url,
    )
