"""Request body decoding."""

from typing import Annotated

from fastapi import Depends, Request

from src.projects_api.schemas import TestProjectInput


async def read_project_input(request: Request) -> TestProjectInput:
    """Decode the raw JSON body into TestProjectInput.

    Parsed by hand rather than as a FastAPI body parameter: a body that is not a
    JSON object is an unexpected failure (500 via the fault boundary), not a 422.
    """
    body = await request.body()
    return TestProjectInput.model_validate_json(body)


ProjectInput = Annotated[TestProjectInput, Depends(read_project_input)]
