"""Best-effort tenant ("board id") attribution for error reports."""

import re
from typing import Final

from starlette.requests import Request

from src.projects_api.core.config import Settings

BOARD_ID_QUERY_PARAM: Final[str] = "boardId"
BOARD_ID_HEADER: Final[str] = "X-Board-Id"

# Hosted deployments are named webapi<24 hex chars>, e.g. webapi0123...cdef.up.railway.app
_BOARD_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"webapi([a-f0-9]{24})", re.IGNORECASE)


def match_board_id(value: str | None) -> str | None:
    """Extract the board id embedded in a hostname or URL."""
    if not value:
        return None
    match = _BOARD_ID_PATTERN.search(value)
    return match.group(1) if match else None


def extract_board_id(request: Request | None, settings: Settings) -> str | None:
    """Derive the board id, first match wins.

    Order: ``boardId`` query parameter, ``X-Board-Id`` header, ``BOARD_ID``
    setting, the request's Host header, then the configured error endpoint URL.
    """
    if request is not None:
        board_id = request.query_params.get(BOARD_ID_QUERY_PARAM)
        if board_id:
            return board_id

        board_id = request.headers.get(BOARD_ID_HEADER)
        if board_id:
            return board_id

    if settings.board_id:
        return settings.board_id

    if request is not None:
        board_id = match_board_id(request.headers.get("host"))
        if board_id:
            return board_id

    return match_board_id(settings.runtime_error_endpoint_url)
