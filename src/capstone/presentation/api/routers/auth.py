"""Authentication router for the post-sign-in landing and sign-out."""

import logging

from fastapi import APIRouter

from capstone.application.commands.auth import ResolveLandingCommand
from capstone.application.dtos import OperationFailure
from capstone.presentation.api.dependencies import (
    BearerToken,
    CurrentPrincipal,
    Identity,
    RepoFactory,
)
from capstone.presentation.api.schemas import (
    ErrorResponse,
    LandingResponse,
    SignOutResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/landing",
    summary="Resolve where to go after sign-in",
    responses={
        200: {"description": "Client route for the caller"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def resolve_landing(
    principal: CurrentPrincipal,
    factory: RepoFactory,
) -> LandingResponse:
    """
    Route a principal who just signed in.

    Principals without a profile or role go to `/onboarding`. A profile
    without an avatar picks up the OAuth photo on the way.
    """
    command = ResolveLandingCommand.from_factory(factory)
    try:
        result = await command.execute(principal)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if isinstance(result, OperationFailure):
        logger.warning("Landing resolution failed: %s", result.message)
        return LandingResponse(redirect_path="/login")

    return LandingResponse(
        redirect_path=result.redirect_path,
        role=result.role.value if result.role else None,
        avatar_backfilled=result.avatar_backfilled,
    )


@router.post(
    "/sign-out",
    summary="Sign out",
    responses={
        200: {"description": "Session revoked at the identity provider"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        502: {"model": ErrorResponse, "description": "Identity provider failure"},
    },
)
async def sign_out(
    principal: CurrentPrincipal,
    token: BearerToken,
    gateway: Identity,
) -> SignOutResponse:
    """Revoke the caller's session at the identity provider."""
    await gateway.sign_out(token or "")
    logger.info("Signed out: %s", principal.user_id)
    return SignOutResponse()
