from capstone.domain.projects.repositories.membership_repository import (
    ProjectMembershipRepository,
)
from capstone.domain.projects.repositories.project_repository import (
    ProjectRepository,
)

__all__ = ["ProjectMembershipRepository", "ProjectRepository"]
