from capstone.domain.projects.aggregates.project import (
    INDEPENDENT_PROJECT_TYPE,
    Project,
)

__all__ = ["INDEPENDENT_PROJECT_TYPE", "Project"]
