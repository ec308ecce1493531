"""Value objects for the projects domain."""

from capstone.domain.projects.value_objects.membership import (
    MemberRole,
    MembershipStatus,
)
from capstone.domain.projects.value_objects.paper_standard import PaperStandard
from capstone.domain.projects.value_objects.project_document import (
    DOCUMENT_CONTENT_TYPES,
    DOCUMENT_MAX_BYTES,
    document_storage_path,
    generate_project_code,
    validate_document,
)
from capstone.domain.projects.value_objects.project_status import ProjectStatus

__all__ = [
    "DOCUMENT_CONTENT_TYPES",
    "DOCUMENT_MAX_BYTES",
    "MemberRole",
    "MembershipStatus",
    "PaperStandard",
    "ProjectStatus",
    "document_storage_path",
    "generate_project_code",
    "validate_document",
]
