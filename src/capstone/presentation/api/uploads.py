"""Conversion of multipart uploads into domain upload values."""

import logging
from typing import Optional

from fastapi import UploadFile

from capstone.domain.shared.value_objects import UploadedFile

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def read_upload(
    upload: Optional[UploadFile],
    max_bytes: Optional[int] = None,
) -> Optional[UploadedFile]:
    """Read an optional multipart file. A part without a filename counts as absent.

    When the part is already known to exceed ``max_bytes`` its content is not
    read. The returned value keeps the declared size so validation rejects it.
    """
    if upload is None or not upload.filename:
        return None
    content_type = upload.content_type or DEFAULT_CONTENT_TYPE
    if max_bytes is not None and upload.size is not None and upload.size > max_bytes:
        logger.info(
            "Skipping read of %s: %d bytes over %d byte limit",
            upload.filename,
            upload.size,
            max_bytes,
        )
        return UploadedFile(
            filename=upload.filename,
            content_type=content_type,
            content=b"",
            declared_size=upload.size,
        )
    content = await upload.read()
    return UploadedFile(
        filename=upload.filename,
        content_type=content_type,
        content=content,
    )
