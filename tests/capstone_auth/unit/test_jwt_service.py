"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from capstone_auth.exceptions import InvalidTokenError
from capstone_auth.services import JWTService

SECRET = "test-secret-key-12345"


class TestJWTServiceInit:
    def test_init_with_valid_secret(self):
        assert JWTService(secret_key="test-secret-key") is not None

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestVerifyToken:
    """Tokens shaped like the identity provider's."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET, audience="authenticated")

    def test_round_trip(self):
        token = self.service.create_access_token(
            user_id="6b1d5c7e-0000-4000-8000-000000000001",
            email="a@b.com",
            user_metadata={"picture": "https://photos.test/p.jpg"},
        )

        payload = self.service.verify_token(token)

        assert payload.user_id == "6b1d5c7e-0000-4000-8000-000000000001"
        assert payload.email == "a@b.com"
        assert payload.avatar_url == "https://photos.test/p.jpg"
        assert payload.exp > datetime.now(tz=timezone.utc)

    def test_avatar_url_prefers_avatar_url_claim(self):
        token = self.service.create_access_token(
            "u1",
            "a@b.com",
            user_metadata={
                "avatar_url": "https://photos.test/a.jpg",
                "picture": "https://photos.test/p.jpg",
            },
        )
        assert self.service.verify_token(token).avatar_url == (
            "https://photos.test/a.jpg"
        )

    def test_no_metadata_no_avatar(self):
        token = self.service.create_access_token("u1", "a@b.com")
        assert self.service.verify_token(token).avatar_url is None

    def test_expired_token_raises(self):
        token = self.service.create_access_token(
            "u1",
            "a@b.com",
            expires_delta=timedelta(seconds=-1),
        )
        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_garbage_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_tampered_token_raises(self):
        token = self.service.create_access_token("u1", "a@b.com")
        header, body, signature = token.split(".")
        tampered = f"{header}.{body}.{signature[::-1]}"
        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_wrong_audience_raises(self):
        token = JWTService(SECRET, audience="anon").create_access_token(
            "u1",
            "a@b.com",
        )
        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_audience_not_checked_when_unset(self):
        token = JWTService(SECRET, audience="anything").create_access_token(
            "u1",
            "a@b.com",
        )
        assert JWTService(SECRET).verify_token(token).user_id == "u1"

    def test_missing_subject_raises(self):
        now = datetime.now(tz=timezone.utc)
        token = jwt.encode(
            {"email": "a@b.com", "aud": "authenticated", "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)
