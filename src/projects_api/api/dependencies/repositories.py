"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.projects_api.api.dependencies.db import DBSession
from src.projects_api.repositories import TestProjectRepository


def get_test_project_repository(session: DBSession) -> TestProjectRepository:
    """Get test project repository bound to the request's session."""
    return TestProjectRepository(session)


TestProjectRepo = Annotated[TestProjectRepository, Depends(get_test_project_repository)]
