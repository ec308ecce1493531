"""Project commands."""

from capstone.application.commands.projects.create_project_command import (
    DEFAULT_DOCUMENT_BUCKET,
    UPLOAD_ERROR_WARNING,
    CreateProjectCommand,
)
from capstone.application.commands.projects.join_project_command import (
    JoinProjectCommand,
)

__all__ = [
    "DEFAULT_DOCUMENT_BUCKET",
    "UPLOAD_ERROR_WARNING",
    "CreateProjectCommand",
    "JoinProjectCommand",
]
