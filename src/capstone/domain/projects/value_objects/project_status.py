"""Project lifecycle status."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Lifecycle of a research project. New projects start as drafts."""

    DRAFT = "draft"
    PROPOSAL = "proposal"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    COMPLETED = "completed"
    ARCHIVED = "archived"
