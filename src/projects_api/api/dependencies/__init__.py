"""API dependencies."""

from src.projects_api.api.dependencies.body import ProjectInput, read_project_input
from src.projects_api.api.dependencies.db import (
    Connection,
    DBSession,
    get_connection_parameters,
    get_db_session,
)
from src.projects_api.api.dependencies.repositories import (
    TestProjectRepo,
    get_test_project_repository,
)

__all__ = [
    # Body
    "ProjectInput",
    "read_project_input",
    # Database
    "Connection",
    "DBSession",
    "get_connection_parameters",
    "get_db_session",
    # Repositories
    "TestProjectRepo",
    "get_test_project_repository",
]
