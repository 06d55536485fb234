"""Configuration errors and their JSON rendering.

Client errors are plain ``HTTPException``s. Anything else (storage faults,
unexpected runtime failures) is left unhandled here and reaches
the fault boundary in ``src.projects_api.core.reporting``.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.projects_api.core.logging import get_logger

logger = get_logger(__name__)


class ConfigurationError(Exception):
    """The service is not configured well enough to reach storage."""

    message = "Invalid configuration"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class DatabaseNotConfiguredError(ConfigurationError):
    message = "DATABASE_URL environment variable not set"


class InvalidDatabaseUrlError(ConfigurationError):
    message = "Invalid DATABASE_URL format"


def setup_exception_handlers(app: FastAPI) -> None:
    """Render configuration and client errors as ``{"error": ...}`` bodies."""

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        logger.error("Configuration error", path=request.url.path, error=exc.detail)
        return JSONResponse(status_code=500, content={"error": exc.detail})

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})
