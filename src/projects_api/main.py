from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.projects_api.api.middlewares import setup_middlewares
from src.projects_api.api.routes.router import include_routers
from src.projects_api.core.config import Settings, get_settings
from src.projects_api.core.exceptions import setup_exception_handlers
from src.projects_api.core.logging import get_logger, setup_logging
from src.projects_api.core.reporting import FailureReporter, install_warning_policy

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "test", "description": "CRUD over test projects"},
]

# Added by FastAPI to every operation with parameters. Never produced here: bad ids
# are 404s and bad bodies reach the fault boundary.
VALIDATION_ERROR_SCHEMAS = ("HTTPValidationError", "ValidationError")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)
    logger.info(f"Starting {settings.app_name}")

    yield

    # Give in-flight error reports a chance to be delivered
    telemetry = app.state.failure_reporter.telemetry
    if telemetry is not None and telemetry.pending_count:
        logger.info(f"Waiting for {telemetry.pending_count} error reports...")
        if not await telemetry.drain():
            logger.warning("Some error reports were not delivered before shutdown")
    logger.info("Shutdown complete")


def _drop_validation_errors_from_openapi(app: FastAPI) -> None:
    """Serve the OpenAPI document without the automatic 422 responses."""
    generate_openapi = app.openapi

    def openapi() -> dict[str, Any]:
        schema = generate_openapi()
        for path_item in schema.get("paths", {}).values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)
        schemas = schema.get("components", {}).get("schemas", {})
        for name in VALIDATION_ERROR_SCHEMAS:
            schemas.pop(name, None)
        return schema

    app.openapi = openapi  # type: ignore[method-assign]


def _build_app(settings: Settings, reporter: FailureReporter) -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description=f"{settings.app_name} Documentation",
        version="1.0.0",
        openapi_tags=OPENAPI_TAGS,
        # /swagger and /swagger.json are served by our own routes
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.failure_reporter = reporter
    _drop_validation_errors_from_openapi(app)

    if settings.promote_warnings:
        install_warning_policy()

    setup_exception_handlers(app)
    setup_middlewares(app, reporter)
    include_routers(app, enable_openapi=settings.enable_openapi)

    return app


def create_app() -> FastAPI:
    settings = get_settings()
    reporter = FailureReporter(settings)
    try:
        return _build_app(settings, reporter)
    except Exception as exc:
        reporter.report_startup(exc)
        raise


app = create_app()
