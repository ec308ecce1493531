from capstone.application.ports.identity.identity_gateway import IdentityGateway
from capstone.application.ports.identity.principal import Principal

__all__ = ["IdentityGateway", "Principal"]
