"""Projects domain exceptions."""

from capstone.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class ProjectNotFoundError(EntityNotFoundError):
    def __init__(self, project_code: str, diagnostic: str | None = None) -> None:
        message = "Invalid project code. Project not found."
        if diagnostic:
            message = f"{message} Details: {diagnostic}"
        super().__init__(
            message,
            code=ErrorCode.PROJECT_NOT_FOUND,
            details={"project_code": project_code},
        )


class MembershipAlreadyExistsError(ConflictError):
    """A membership for this (project, principal) pair is already stored."""

    def __init__(self, project_id: str, user_id: str) -> None:
        super().__init__(
            "You are already a member of this project",
            code=ErrorCode.ALREADY_MEMBER,
            details={"project_id": project_id, "user_id": user_id},
        )


class ProjectUnavailableError(EntityNotFoundError):
    """The project does not exist or the caller is not one of its members.

    Both cases look the same to the caller.
    """

    def __init__(self, project_id: str, user_id: str) -> None:
        super().__init__(
            "Project not found",
            code=ErrorCode.PROJECT_NOT_FOUND,
            details={"project_id": project_id, "user_id": user_id},
        )
