"""Application queries (read operations)."""

from capstone.application.queries.projects import GetProjectQuery, ListMyProjectsQuery
from capstone.application.queries.user import GetProfileQuery

__all__ = ["GetProfileQuery", "GetProjectQuery", "ListMyProjectsQuery"]
