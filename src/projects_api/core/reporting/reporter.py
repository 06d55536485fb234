"""Logging and forwarding of unhandled failures."""

from starlette.requests import Request

from src.projects_api.core.config import Settings
from src.projects_api.core.logging import get_logger
from src.projects_api.core.reporting.board_id import extract_board_id
from src.projects_api.core.reporting.report import ErrorReport
from src.projects_api.core.reporting.telemetry import TelemetryClient

logger = get_logger(__name__)


def request_target(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


class FailureReporter:
    """Logs a failure locally and forwards one ErrorReport when an endpoint is set."""

    def __init__(self, settings: Settings, telemetry: TelemetryClient | None = None):
        self.settings = settings
        if telemetry is None and settings.runtime_error_endpoint_url:
            telemetry = TelemetryClient(
                settings.runtime_error_endpoint_url,
                timeout=settings.telemetry_timeout_seconds,
            )
        self.telemetry = telemetry

    def report(
        self, exc: BaseException, request: Request, *, fatal: bool = False
    ) -> ErrorReport | None:
        """Log ``exc`` and dispatch its report. Returns the report if one was sent."""
        # Called outside the logging-context middleware: no request context is bound
        board_id = extract_board_id(request, self.settings)
        log_event = "Fatal error occurred" if fatal else "Unhandled exception"
        logger.error(
            log_event,
            path=request.url.path,
            method=request.method,
            board_id=board_id,
            error=str(exc),
            exc_info=exc,
        )

        report = ErrorReport.from_exception(
            exc,
            board_id=board_id,
            request_path=request_target(request),
            request_method=request.method,
            user_agent=request.headers.get("user-agent"),
        )
        return self._dispatch(report)

    def report_startup(self, exc: BaseException) -> ErrorReport | None:
        """Report a failure that happened while building the application."""
        logger.error("Application failed to start", error=str(exc), exc_info=exc)
        report = ErrorReport.for_startup(exc, board_id=self.settings.board_id)
        return self._dispatch(report)

    def _dispatch(self, report: ErrorReport) -> ErrorReport | None:
        logger.info("Extracted board id", board_id=report.board_id)
        if self.telemetry is None:
            logger.info("RUNTIME_ERROR_ENDPOINT_URL is not set - skipping error reporting")
            return None

        logger.info("Sending error report", endpoint=self.telemetry.endpoint_url)
        self.telemetry.dispatch(report)
        return report
