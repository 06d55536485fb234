"""Logging configuration using structlog."""

import logging
import sys
from pathlib import Path

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

_FILE_HANDLER_NAME = "projects_api.error_log"


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Configure structlog for structured logging.

    Args:
        debug: If True, use colored console output. If False, use JSON for production.
        log_file: Optional path of an append-only log receiving warnings and errors.
            The parent directory is created if it does not exist.
    """
    # Set up standard library logging
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    if log_file:
        _attach_file_handler(Path(log_file))

    # Configure structlog processors
    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Human-readable colored output for development
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        # JSON output for production
        processors = shared_processors + [structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Set library log levels to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _attach_file_handler(path: Path) -> None:
    """Attach the warning/error file handler to the root logger once."""
    root = logging.getLogger()
    if any(h.get_name() == _FILE_HANDLER_NAME for h in root.handlers):
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.set_name(_FILE_HANDLER_NAME)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None, **context: str | None) -> None:
    """Bind request-level context to all subsequent log calls.

    Args:
        request_id: The correlation ID for the current request.
        **context: Further request attributes (method, path, board_id). Empty values
            are not bound.
    """
    values = {"request_id": request_id, **context}
    bind_contextvars(**{key: value for key, value in values.items() if value})


def clear_request_context() -> None:
    """Clear all request-scoped context."""
    clear_contextvars()
