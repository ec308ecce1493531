from capstone.application.queries.projects.get_project_query import GetProjectQuery
from capstone.application.queries.projects.list_my_projects_query import (
    ListMyProjectsQuery,
)

__all__ = ["GetProjectQuery", "ListMyProjectsQuery"]
