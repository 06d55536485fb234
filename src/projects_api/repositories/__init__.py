"""Repository layer - data access abstraction."""

from src.projects_api.repositories.test_project import TestProjectRepository

__all__ = ["TestProjectRepository"]
