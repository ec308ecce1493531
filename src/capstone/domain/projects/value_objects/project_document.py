"""Rules for the document attached to a project at creation time."""

import uuid

from capstone.domain.shared.value_objects import UploadedFile

DOCUMENT_CONTENT_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    },
)
DOCUMENT_MAX_BYTES = 10 * 1024 * 1024


def validate_document(file: UploadedFile, max_bytes: int = DOCUMENT_MAX_BYTES) -> None:
    file.ensure_allowed(
        allowed_types=DOCUMENT_CONTENT_TYPES,
        max_bytes=max_bytes,
        type_error="Only PDF, DOC, and DOCX files are allowed",
        size_error=f"File size must be less than {max_bytes // (1024 * 1024)}MB",
    )


def document_storage_path(project_id: uuid.UUID, file: UploadedFile, millis: int) -> str:
    return f"projects/{project_id}/{millis}_{file.sanitized_filename}"


def generate_project_code() -> str:
    """Shareable join code; a random UUID4 in canonical text form."""
    return str(uuid.uuid4())
