"""Runtime error reporting - fault boundary, board id attribution, telemetry."""

from src.projects_api.core.reporting.board_id import extract_board_id, match_board_id
from src.projects_api.core.reporting.boundary import (
    FATAL_ERRORS,
    FaultBoundaryMiddleware,
)
from src.projects_api.core.reporting.report import ErrorReport
from src.projects_api.core.reporting.reporter import FailureReporter
from src.projects_api.core.reporting.telemetry import TelemetryClient
from src.projects_api.core.reporting.warning_policy import (
    PROMOTED_WARNINGS,
    install_warning_policy,
)

__all__ = [
    # Boundary
    "FATAL_ERRORS",
    "FaultBoundaryMiddleware",
    # Reporting
    "ErrorReport",
    "FailureReporter",
    "TelemetryClient",
    # Board id
    "extract_board_id",
    "match_board_id",
    # Warnings
    "PROMOTED_WARNINGS",
    "install_warning_policy",
]
