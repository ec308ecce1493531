"""Application factories for repository access."""

from capstone.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
