"""Fault boundary: the single place unhandled failures become client responses."""

from collections.abc import Mapping
from typing import Final

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from src.projects_api.core.reporting.report import exception_origin
from src.projects_api.core.reporting.reporter import FailureReporter

UNHANDLED_ERROR_MESSAGE: Final[str] = "An error occurred while processing your request"
FATAL_ERROR_MESSAGE: Final[str] = "A fatal error occurred"

# Failures of the interpreter or import machinery rather than of request logic.
# They are recorded and handled by the post-mortem hook.
FATAL_ERRORS: Final[tuple[type[BaseException], ...]] = (
    SyntaxError,
    ImportError,
    MemoryError,
)


def unhandled_error_response(
    exc: BaseException, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": UNHANDLED_ERROR_MESSAGE, "message": str(exc)},
        headers=headers,
    )


def fatal_error_response(
    exc: BaseException, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    file, line = exception_origin(exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": FATAL_ERROR_MESSAGE,
            "message": str(exc),
            "file": file,
            "line": line,
        },
        headers=headers,
    )


class FaultBoundaryMiddleware:
    """Wraps the whole request lifecycle.

    - Any ``Exception`` escaping the wrapped app is reported and answered with a
      uniform 500 JSON body.
    - Fatal failures (``FATAL_ERRORS``) are only recorded while the app runs; the
      post-mortem hook reports them once the app has returned.
    - At most one response is sent: nothing is emitted if the app had already
      started its own.
    """

    def __init__(
        self,
        app: ASGIApp,
        reporter: FailureReporter,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.app = app
        self.reporter = reporter
        # Extra headers on the boundary's own responses
        self.headers = dict(headers or {})

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False
        fatal: BaseException | None = None

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except FATAL_ERRORS as exc:
            fatal = exc
        except Exception as exc:
            self.reporter.report(exc, Request(scope))
            if not response_started:
                await unhandled_error_response(exc, self.headers)(scope, receive, send)
        finally:
            if fatal is not None:
                await self._post_mortem(fatal, scope, receive, send, response_started)

    async def _post_mortem(
        self,
        exc: BaseException,
        scope: Scope,
        receive: Receive,
        send: Send,
        response_started: bool,
    ) -> None:
        self.reporter.report(exc, Request(scope), fatal=True)
        if not response_started:
            await fatal_error_response(exc, self.headers)(scope, receive, send)
