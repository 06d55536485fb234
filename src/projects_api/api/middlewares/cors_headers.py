"""Static CORS headers on every response."""

from typing import Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

ALLOW_ORIGIN: Final[str] = "*"
ALLOW_METHODS: Final[tuple[str, ...]] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOW_HEADERS: Final[tuple[str, ...]] = ("Content-Type",)


def cors_headers(
    allow_origin: str = ALLOW_ORIGIN,
    allow_methods: tuple[str, ...] = ALLOW_METHODS,
    allow_headers: tuple[str, ...] = ALLOW_HEADERS,
) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ", ".join(allow_methods),
        "Access-Control-Allow-Headers": ", ".join(allow_headers),
    }


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Attach permissive CORS headers regardless of route, method or Origin header.

    Unlike Starlette's ``CORSMiddleware`` the headers are sent even when the request
    carries no ``Origin``. Responses produced by the fault boundary, which sits
    outside this middleware, carry the same headers from ``cors_headers()``.
    """

    def __init__(
        self,
        app: ASGIApp,
        allow_origin: str = ALLOW_ORIGIN,
        allow_methods: tuple[str, ...] = ALLOW_METHODS,
        allow_headers: tuple[str, ...] = ALLOW_HEADERS,
    ):
        super().__init__(app)
        self.headers = cors_headers(allow_origin, allow_methods, allow_headers)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for header, value in self.headers.items():
            response.headers[header] = value
        return response
