from capstone.infrastructure.persistence.sqlalchemy.models.projects.project_member_model import (  # NOQA: E501
    MEMBERSHIP_UNIQUE_CONSTRAINT,
    ProjectMemberModel,
)
from capstone.infrastructure.persistence.sqlalchemy.models.projects.project_model import (  # NOQA: E501
    ProjectModel,
)

__all__ = ["MEMBERSHIP_UNIQUE_CONSTRAINT", "ProjectMemberModel", "ProjectModel"]
