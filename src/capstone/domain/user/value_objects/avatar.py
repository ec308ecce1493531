"""Avatar image rules."""

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from capstone.domain.shared.exceptions import ErrorCode, ValidationError
from capstone.domain.shared.value_objects import UploadedFile

AVATAR_CONTENT_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})
AVATAR_MAX_BYTES = 10 * 1024 * 1024

_http_url = TypeAdapter(AnyHttpUrl)


def validate_avatar(file: UploadedFile, max_bytes: int = AVATAR_MAX_BYTES) -> None:
    file.ensure_allowed(
        allowed_types=AVATAR_CONTENT_TYPES,
        max_bytes=max_bytes,
        type_error="Invalid file type. Only JPG, JPEG, and PNG are allowed",
        size_error=f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB",
    )


def validate_photo_url(url: str) -> str:
    """Check that an externally hosted photo URL is absolute http(s).

    The URL is returned unchanged; it is stored verbatim.
    """
    try:
        _http_url.validate_python(url)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid photo URL. An absolute http(s) URL is required",
            code=ErrorCode.INVALID_URL,
            details={"url": url},
        ) from e
    return url


def avatar_storage_path(user_id: str, file: UploadedFile, millis: int) -> str:
    """Path of an avatar inside the avatar bucket, namespaced by principal."""
    return f"{user_id}/{user_id}-{millis}.{file.extension}"
