"""Uploaded file value object.

Holds the bytes of a client-submitted file together with the metadata the
client declared for it (name and content type).
"""

import re
from collections.abc import Collection
from dataclasses import dataclass
from typing import Optional

from capstone.domain.shared.exceptions import ErrorCode, ValidationError

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


@dataclass(frozen=True)
class UploadedFile:
    """A file submitted by a client, validated against declared metadata."""

    filename: str
    content_type: str
    content: bytes
    # Set when the content was left unread because the client declared a size
    # over the ceiling
    declared_size: Optional[int] = None

    @property
    def size(self) -> int:
        if self.declared_size is not None:
            return self.declared_size
        return len(self.content)

    @property
    def extension(self) -> str:
        """Text after the last dot, or the whole name when there is none."""
        return self.filename.rsplit(".", 1)[-1]

    @property
    def sanitized_filename(self) -> str:
        return _UNSAFE_FILENAME_CHARS.sub("_", self.filename)

    def ensure_allowed(
        self,
        *,
        allowed_types: Collection[str],
        max_bytes: int,
        type_error: str,
        size_error: str,
    ) -> None:
        """Reject files of an undeclared type or above the size ceiling.

        Raises
        ------
        ValidationError
            With code INVALID_FILE_TYPE or FILE_TOO_LARGE
        """
        if self.content_type.lower() not in allowed_types:
            raise ValidationError(
                type_error,
                code=ErrorCode.INVALID_FILE_TYPE,
                details={"content_type": self.content_type},
            )
        if self.size > max_bytes:
            raise ValidationError(
                size_error,
                code=ErrorCode.FILE_TOO_LARGE,
                details={"size": self.size, "max_bytes": max_bytes},
            )
