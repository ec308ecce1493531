"""Authentication services.

Provides JWT token verification (and creation for development/testing).
"""

from capstone_auth.services.jwt_service import JWTService

__all__ = [
    "JWTService",
]
