"""Capstone Auth - Generic bearer-token verification.

This package verifies tokens issued by the hosted identity provider and is
independent of any specific application domain. Credential checks, session
issuance and OAuth exchange stay with the provider; this package only turns
a bearer token into a verified payload.

Architecture:
    capstone_auth/
    ├── services/           # Pure logic (JWT verification)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from capstone_auth import JWTService

    payload = JWTService(secret_key="...").verify_token(token)
"""

from capstone_auth.exceptions import AuthError, InvalidTokenError
from capstone_auth.schemas import TokenPayload
from capstone_auth.services import JWTService

__all__ = [
    # Services
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
]
