"""Projects domain - research projects and their members.

This domain handles:
- Project aggregate (title, paper standard, join code, document)
- ProjectMembership (role and acceptance status per principal)
- Document upload rules and storage layout
"""

from capstone.domain.projects.aggregates import INDEPENDENT_PROJECT_TYPE, Project
from capstone.domain.projects.entities import ProjectMembership
from capstone.domain.projects.exceptions import (
    MembershipAlreadyExistsError,
    ProjectNotFoundError,
    ProjectUnavailableError,
)
from capstone.domain.projects.repositories import (
    ProjectMembershipRepository,
    ProjectRepository,
)
from capstone.domain.projects.value_objects import (
    DOCUMENT_CONTENT_TYPES,
    DOCUMENT_MAX_BYTES,
    MemberRole,
    MembershipStatus,
    PaperStandard,
    ProjectStatus,
    document_storage_path,
    generate_project_code,
    validate_document,
)

__all__ = [
    "DOCUMENT_CONTENT_TYPES",
    "DOCUMENT_MAX_BYTES",
    "INDEPENDENT_PROJECT_TYPE",
    "MemberRole",
    "MembershipAlreadyExistsError",
    "MembershipStatus",
    "PaperStandard",
    "Project",
    "ProjectMembership",
    "ProjectMembershipRepository",
    "ProjectNotFoundError",
    "ProjectRepository",
    "ProjectStatus",
    "ProjectUnavailableError",
    "document_storage_path",
    "generate_project_code",
    "validate_document",
]
