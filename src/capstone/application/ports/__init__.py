"""Ports to the external collaborators of the application layer."""

from capstone.application.ports.identity import IdentityGateway, Principal
from capstone.application.ports.storage import BlobStore, BlobUploadError

__all__ = ["BlobStore", "BlobUploadError", "IdentityGateway", "Principal"]
