"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI

from src.projects_api.core.reporting import FailureReporter, FaultBoundaryMiddleware

from .cors_headers import CORSHeadersMiddleware, cors_headers
from .logging_context import logging_context_middleware

__all__ = [
    "setup_middlewares",
    "CORSHeadersMiddleware",
    "cors_headers",
    "logging_context_middleware",
]


def setup_middlewares(app: FastAPI, reporter: FailureReporter) -> None:
    """Configure all application middlewares.

    Middleware order matters - the last one added is the outermost.
    """
    # CORS - static headers on every response
    app.add_middleware(CORSHeadersMiddleware)

    # Logging context - binds request_id, method, path and board id to structlog context
    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    # Correlation ID - generates/propagates X-Request-ID
    app.add_middleware(CorrelationIdMiddleware)

    # Fault boundary - outermost, so failures in any layer above become a JSON 500.
    # Its responses bypass the CORS layer and carry the headers themselves.
    app.add_middleware(FaultBoundaryMiddleware, reporter=reporter, headers=cors_headers())
