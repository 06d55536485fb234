"""Catch-all routes: CORS preflight and the generic 404.

Registered last. Starlette picks the first route that fully matches path and
method, so these only answer requests no other route accepts, including known
paths called with an unsupported method.
"""

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from src.projects_api.api.dependencies import get_connection_parameters

NOT_FOUND = "Not found"

router = APIRouter(include_in_schema=False)


@router.options("/{path:path}")
async def preflight(path: str) -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"])
async def not_found(request: Request, path: str) -> JSONResponse:
    # Storage-backed paths still require DATABASE_URL before answering
    if request.url.path.startswith("/api/"):
        get_connection_parameters()
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": NOT_FOUND})
