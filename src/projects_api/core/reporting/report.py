"""Error report payload sent to the runtime error endpoint."""

import builtins
import traceback
from datetime import UTC, datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

STARTUP_MARKER = "STARTUP"
STARTUP_USER_AGENT = "STARTUP_ERROR"


def exception_type_name(exc: BaseException) -> str:
    """Builtin exceptions by bare name, everything else module-qualified."""
    cls = type(exc)
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def exception_origin(exc: BaseException) -> tuple[str, int]:
    """File and line where the exception was raised (innermost frame)."""
    # SyntaxError carries its own location, which is not part of the traceback
    if isinstance(exc, SyntaxError) and exc.filename:
        return exc.filename, exc.lineno or 0

    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "unknown", 0
    frame = frames[-1]
    return frame.filename, frame.lineno or 0


class ErrorReport(BaseModel):
    """A single unhandled failure, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    board_id: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    file: str
    line: int
    stack_trace: str
    message: str
    exception_type: str
    request_path: str
    request_method: str
    user_agent: str | None = None

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        *,
        board_id: str | None,
        request_path: str,
        request_method: str,
        user_agent: str | None,
    ) -> Self:
        file, line = exception_origin(exc)
        return cls(
            board_id=board_id,
            file=file,
            line=line,
            stack_trace="".join(traceback.format_exception(exc)),
            message=str(exc),
            exception_type=exception_type_name(exc),
            request_path=request_path,
            request_method=request_method,
            user_agent=user_agent,
        )

    @classmethod
    def for_startup(cls, exc: BaseException, *, board_id: str | None) -> Self:
        return cls.from_exception(
            exc,
            board_id=board_id,
            request_path=STARTUP_MARKER,
            request_method=STARTUP_MARKER,
            user_agent=STARTUP_USER_AGENT,
        )

    def payload(self) -> dict:
        """JSON-ready body for the error endpoint."""
        return self.model_dump(mode="json", by_alias=True)
