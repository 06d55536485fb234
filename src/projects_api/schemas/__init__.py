from src.projects_api.schemas.test_project import (
    ErrorResponse,
    MessageResponse,
    TestProjectInput,
    TestProjectRead,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "TestProjectInput",
    "TestProjectRead",
]
