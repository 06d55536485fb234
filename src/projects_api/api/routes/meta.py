"""Service metadata, health and API documentation endpoints."""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse

from src.projects_api.core.config import get_settings

SWAGGER_PATH = "/swagger"
OPENAPI_PATH = "/swagger.json"
API_PATH = "/api/test"

router = APIRouter(include_in_schema=False)


@router.get("/")
async def root() -> dict[str, Any]:
    settings = get_settings()
    return {
        "message": f"{settings.app_name} is running",
        "status": "ok",
        "swagger": SWAGGER_PATH,
        "api": API_PATH,
    }


@router.get("/health")
async def health() -> dict[str, Any]:
    """Liveness only: storage is not probed."""
    return {"status": "healthy", "service": get_settings().app_name}


docs_router = APIRouter(include_in_schema=False)


@docs_router.get(SWAGGER_PATH)
async def swagger_ui() -> HTMLResponse:
    return get_swagger_ui_html(
        openapi_url=OPENAPI_PATH,
        title=f"{get_settings().app_name} - Swagger UI",
    )


@docs_router.get(OPENAPI_PATH)
async def openapi_document(request: Request) -> JSONResponse:
    return JSONResponse(request.app.openapi())
