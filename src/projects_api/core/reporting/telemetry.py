"""Fire-and-forget delivery of error reports over HTTP."""

import asyncio

import httpx

from src.projects_api.core.logging import get_logger
from src.projects_api.core.reporting.report import ErrorReport

logger = get_logger(__name__)


class TelemetryClient:
    """Posts ErrorReports to the runtime error endpoint.

    Delivery never raises and never delays the caller: ``dispatch`` schedules the
    POST on the running event loop and returns immediately. Failures and timeouts
    are logged and dropped.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._transport = transport
        # Strong references so pending tasks are not garbage collected
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        return len(self._tasks)

    def dispatch(self, report: ErrorReport) -> None:
        """Schedule delivery of ``report`` without waiting for it."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No event loop (e.g. during application startup)
            self.send_blocking(report)
            return

        task = loop.create_task(self.send(report))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def send(self, report: ErrorReport) -> None:
        """Deliver ``report``, swallowing any transport failure."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                await client.post(self.endpoint_url, json=report.payload())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(
                "Failed to send error report",
                endpoint=self.endpoint_url,
                error=str(e),
            )

    def send_blocking(self, report: ErrorReport) -> None:
        """Synchronous delivery, for failures that happen outside the event loop."""
        try:
            httpx.post(self.endpoint_url, json=report.payload(), timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(
                "Failed to send error report",
                endpoint=self.endpoint_url,
                error=str(e),
            )

    async def drain(self, timeout: float | None = None) -> bool:
        """Wait for in-flight deliveries. Returns False if some were still pending."""
        if not self._tasks:
            return True
        _, pending = await asyncio.wait(set(self._tasks), timeout=timeout or self.timeout)
        return not pending
