"""Unit tests for the identity provider adapter."""

from datetime import timedelta

import httpx
import pytest

from capstone.domain.shared.exceptions import (
    AuthorizationError,
    ErrorCode,
    ExternalServiceError,
)
from capstone.infrastructure.identity import SupabaseIdentityGateway
from capstone_auth import JWTService

SECRET = "test-jwt-secret-for-testing-only"
BASE_URL = "https://project.auth.test"


def _gateway(handler=None, base_url=BASE_URL, api_key="anon-key"):
    transport = httpx.MockTransport(handler) if handler else None
    return SupabaseIdentityGateway(
        jwt_service=JWTService(SECRET, audience="authenticated"),
        base_url=base_url,
        api_key=api_key,
        transport=transport,
    )


def _token(**kwargs) -> str:
    return JWTService(SECRET, audience="authenticated").create_access_token(
        "u1",
        "a@b.com",
        **kwargs,
    )


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_valid_token_becomes_principal(self):
        token = _token(user_metadata={"avatar_url": "https://photos.test/me.jpg"})

        principal = await _gateway().authenticate(token)

        assert principal.user_id == "u1"
        assert principal.email == "a@b.com"
        assert principal.avatar_url == "https://photos.test/me.jpg"

    @pytest.mark.asyncio
    async def test_expired_token_rejected(self):
        token = _token(expires_delta=timedelta(seconds=-5))

        with pytest.raises(AuthorizationError) as exc:
            await _gateway().authenticate(token)
        assert exc.value.code == ErrorCode.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret_rejected(self):
        token = JWTService("another-secret", audience="authenticated").create_access_token(
            "u1",
            "a@b.com",
        )

        with pytest.raises(AuthorizationError):
            await _gateway().authenticate(token)

    @pytest.mark.asyncio
    async def test_empty_token_rejected(self):
        with pytest.raises(AuthorizationError):
            await _gateway().authenticate("")


class TestSignOut:
    @pytest.mark.asyncio
    async def test_logout_forwarded(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        await _gateway(handler).sign_out("user-jwt")

        assert seen[0].method == "POST"
        assert str(seen[0].url) == f"{BASE_URL}/auth/v1/logout"
        assert seen[0].headers["authorization"] == "Bearer user-jwt"
        assert seen[0].headers["apikey"] == "anon-key"

    @pytest.mark.asyncio
    async def test_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        with pytest.raises(ExternalServiceError) as exc:
            await _gateway(handler).sign_out("user-jwt")
        assert exc.value.code == ErrorCode.IDENTITY_PROVIDER_FAILED

    @pytest.mark.asyncio
    async def test_unconfigured_provider_is_a_no_op(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        await _gateway(handler, base_url="", api_key="").sign_out("user-jwt")
