"""Unit tests for reading multipart uploads."""

import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from capstone.presentation.api.uploads import DEFAULT_CONTENT_TYPE, read_upload


def _upload(data: bytes, filename: str = "paper.pdf", size=None, content_type=None):
    headers = Headers({"content-type": content_type}) if content_type else None
    return UploadFile(
        io.BytesIO(data),
        size=len(data) if size is None else size,
        filename=filename,
        headers=headers,
    )


class TestReadUpload:
    @pytest.mark.asyncio
    async def test_absent_part(self):
        assert await read_upload(None) is None
        assert await read_upload(_upload(b"x", filename="")) is None

    @pytest.mark.asyncio
    async def test_reads_content_within_ceiling(self):
        upload = _upload(b"%PDF-1.4", content_type="application/pdf")

        file = await read_upload(upload, max_bytes=8)

        assert file.content == b"%PDF-1.4"
        assert file.size == 8
        assert file.content_type == "application/pdf"

    @pytest.mark.asyncio
    async def test_missing_content_type_defaults(self):
        file = await read_upload(_upload(b"abc"))

        assert file.content_type == DEFAULT_CONTENT_TYPE

    @pytest.mark.asyncio
    async def test_oversized_part_is_not_read(self):
        upload = _upload(b"%PDF-1.4", size=11 * 1024 * 1024)

        file = await read_upload(upload, max_bytes=10 * 1024 * 1024)

        assert file.content == b""
        assert file.size == 11 * 1024 * 1024
        assert upload.file.tell() == 0

    @pytest.mark.asyncio
    async def test_without_ceiling_reads_everything(self):
        upload = _upload(b"%PDF-1.4", size=11 * 1024 * 1024)

        file = await read_upload(upload)

        assert file.content == b"%PDF-1.4"
