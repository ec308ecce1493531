"""IdentityGateway adapter for the hosted identity provider.

This is the ONLY place in capstone's infrastructure that imports from
capstone_auth (except for the presentation layer which wires everything
together).
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from capstone.application.ports.identity import IdentityGateway, Principal
from capstone.domain.shared.exceptions import (
    AuthorizationError,
    ErrorCode,
    ExternalServiceError,
)
from capstone_auth import InvalidTokenError, JWTService, TokenPayload

logger = logging.getLogger(__name__)


class SupabaseIdentityGateway(IdentityGateway):
    """Verifies provider-issued JWTs locally and forwards sign-out calls."""

    def __init__(
        self,
        jwt_service: JWTService,
        base_url: str = "",
        api_key: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._jwt_service = jwt_service
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def authenticate(self, bearer_token: str) -> Principal:
        if not bearer_token:
            raise AuthorizationError
        try:
            payload = self._jwt_service.verify_token(bearer_token)
        except InvalidTokenError as e:
            logger.warning("Invalid token: %s", e)
            raise AuthorizationError(details={"reason": e.message}) from e
        return self.to_principal(payload)

    async def sign_out(self, bearer_token: str) -> None:
        if not (self._base_url and self._api_key):
            logger.warning("Identity backend not configured; sign-out is local only")
            return

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    "/auth/v1/logout",
                    headers={
                        "apikey": self._api_key,
                        "Authorization": f"Bearer {bearer_token}",
                    },
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise ExternalServiceError(
                    f"Sign-out failed with status {e.response.status_code}",
                    code=ErrorCode.IDENTITY_PROVIDER_FAILED,
                ) from e
            except httpx.HTTPError as e:
                raise ExternalServiceError(
                    f"Sign-out failed: {e}",
                    code=ErrorCode.IDENTITY_PROVIDER_FAILED,
                ) from e

    @staticmethod
    def to_principal(payload: TokenPayload) -> Principal:
        """Convert a verified token payload to capstone's Principal port."""
        return Principal(
            user_id=payload.user_id,
            email=payload.email,
            avatar_url=payload.avatar_url,
        )
