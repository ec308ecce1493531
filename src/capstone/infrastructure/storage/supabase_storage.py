"""Blob store adapter for the hosted storage REST API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from capstone.application.ports.storage import BlobStore, BlobUploadError

logger = logging.getLogger(__name__)

CACHE_CONTROL = "max-age=3600"


class SupabaseStorageBlobStore(BlobStore):
    """
    Uploads objects over HTTP and derives their public URLs.

    Requests are authorized with the caller's access token when one is given,
    so the storage backend applies its per-user access policies; otherwise the
    public API key is used.
    """

    def __init__(  # NOQA: PLR0913
        self,
        base_url: str,
        api_key: str,
        access_token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._access_token = access_token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return bool(self._base_url and self._api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "apikey": self._api_key,
                    "Authorization": f"Bearer {self._access_token or self._api_key}",
                },
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: str,
        upsert: bool = False,
    ) -> None:
        if not self.configured:
            msg = "Storage backend is not configured"
            raise BlobUploadError(msg)

        client = await self._get_client()
        try:
            response = await client.post(
                f"/storage/v1/object/{bucket}/{path}",
                content=content,
                headers={
                    "Content-Type": content_type,
                    "cache-control": CACHE_CONTROL,
                    "x-upsert": "true" if upsert else "false",
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            diagnostic = _error_message(e.response)
            logger.warning(
                "Upload to %s/%s rejected (%d): %s",
                bucket,
                path,
                e.response.status_code,
                diagnostic,
            )
            raise BlobUploadError(
                diagnostic,
                details={"status_code": e.response.status_code, "path": path},
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Upload to %s/%s failed: %s", bucket, path, e)
            raise BlobUploadError(str(e) or type(e).__name__) from e

        logger.debug("Uploaded %d bytes to %s/%s", len(content), bucket, path)

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._base_url}/storage/v1/object/public/{bucket}/{path}"


def _error_message(response: httpx.Response) -> str:
    """Pull the storage API's error message out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("message", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}"
