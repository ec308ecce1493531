"""Identity gateway port."""

from abc import ABC, abstractmethod

from capstone.application.ports.identity.principal import Principal


class IdentityGateway(ABC):
    """Authenticates bearer credentials against the hosted identity provider."""

    @abstractmethod
    async def authenticate(self, bearer_token: str) -> Principal:
        """Resolve a bearer token to the principal it was issued for.

        Raises
        ------
        AuthorizationError
            If the token is missing, malformed, expired or forged
        """

    @abstractmethod
    async def sign_out(self, bearer_token: str) -> None:
        """Revoke the session behind the bearer token."""
