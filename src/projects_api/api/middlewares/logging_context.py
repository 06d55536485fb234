"""Per-request log context: correlation id and error attribution."""

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.projects_api.core.config import get_settings
from src.projects_api.core.logging import bind_request_context, clear_request_context
from src.projects_api.core.reporting import extract_board_id


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id, method, path and board_id for every log line of the request.

    The board id is derived the same way error reports derive it, so a failure's
    log lines and its report carry the same attribution.
    """
    clear_request_context()
    bind_request_context(
        correlation_id.get(),
        method=request.method,
        path=request.url.path,
        board_id=extract_board_id(request, get_settings()),
    )
    try:
        return await call_next(request)
    finally:
        clear_request_context()
