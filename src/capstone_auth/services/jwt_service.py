"""JWT token service.

Verifies access tokens issued by the hosted identity provider.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from capstone_auth.exceptions import InvalidTokenError
from capstone_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token verification (and creation).

    Tokens are signed by the identity provider with a shared HS256 secret.
    Creation is only used for local development and tests.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token("user-1", "user@example.com")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        audience: str | None = None,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for verifying tokens. Must be kept secure.
        audience
            Expected ``aud`` claim; not checked when None
        access_token_expire_hours
            Hours until a created access token expires (default 1)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._audience = audience
        self._access_expire = timedelta(hours=access_token_expire_hours)

    def create_access_token(
        self,
        user_id: str,
        email: str,
        user_metadata: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create an access token shaped like the identity provider's.

        Parameters
        ----------
        user_id
            The principal's identifier (``sub`` claim)
        email
            The principal's email address
        user_metadata
            Provider metadata (e.g. OAuth ``avatar_url``)
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload: dict[str, Any] = {
            "sub": user_id,
            "email": email,
            "role": "authenticated",
            "user_metadata": user_metadata or {},
            "iat": now,
            "exp": now + (expires_delta or self._access_expire),
        }
        if self._audience:
            payload["aud"] = self._audience

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                options={"verify_aud": self._audience is not None},
            )

            user_id = str(payload["sub"])
            if not user_id:
                msg = "empty subject"
                raise ValueError(msg)

            return TokenPayload(
                user_id=user_id,
                email=payload.get("email") or "",
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                user_metadata=payload.get("user_metadata") or {},
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
