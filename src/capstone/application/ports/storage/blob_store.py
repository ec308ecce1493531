"""Blob store port.

Abstracts the hosted object storage so the application layer never deals with
HTTP clients or bucket APIs directly.
"""

from abc import ABC, abstractmethod
from typing import Any

from capstone.domain.shared.exceptions import ErrorCode, ExternalServiceError


class BlobUploadError(ExternalServiceError):
    """The object store rejected an upload. The message is its diagnostic."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, ErrorCode.STORE_ERROR, details)


class BlobStore(ABC):
    @abstractmethod
    async def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> None:
        """Store ``content`` under ``path`` in ``bucket``.

        With ``upsert=False`` an existing object at the same path is an error.

        Raises
        ------
        BlobUploadError
            If the store rejects the upload or cannot be reached
        """

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        """Publicly readable URL of an object."""
