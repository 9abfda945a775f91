"""Poller refreshing disruption and equipment reports."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import TYPE_CHECKING

from sncf_departures.domain.contracts.report_poller import ReportPollerProtocol
from sncf_departures.domain.contracts.state_broadcaster import (
    StateBroadcasterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from sncf_departures.domain.errors import NetworkError, TransitDataError

if TYPE_CHECKING:
    from sncf_departures.adapters.web.state.reports_state import ReportsState
    from sncf_departures.domain.ports import ReportRepository

logger = logging.getLogger(__name__)


class ReportPoller(ReportPollerProtocol):
    """Fetches reports at startup and then periodically, writing them into shared state."""

    def __init__(
        self,
        report_repository: ReportRepository,
        reports_state: ReportsState,
        state_broadcaster: StateBroadcasterProtocol,
        broadcast_topic: str,
        refresh_interval_seconds: float = 300,
    ) -> None:
        """Initialize the report poller.

        Args:
            report_repository: Source of disruptions and equipment reports.
            reports_state: Shared snapshot the results are written to.
            state_broadcaster: Broadcaster notifying views after each cycle.
            broadcast_topic: The pub/sub topic to broadcast to.
            refresh_interval_seconds: Delay between two refresh cycles.
        """
        self.report_repository = report_repository
        self.reports_state = reports_state
        self.state_broadcaster = state_broadcaster
        self.broadcast_topic = broadcast_topic
        self.refresh_interval_seconds = refresh_interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the report poller."""
        if self.is_running:
            logger.warning("Report poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(
            f"Started report poller (every {self.refresh_interval_seconds}s, "
            f"topic {self.broadcast_topic})"
        )

    async def stop(self) -> None:
        """Stop the report poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Report poller cancelled")
            logger.info("Stopped report poller")
        self._task = None

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        while True:
            try:
                await self.refresh()
            except Exception:
                logger.exception("Report refresh cycle failed")
            await asyncio.sleep(self.refresh_interval_seconds)

    async def refresh(self) -> None:
        """Fetch both reports concurrently, store what succeeded and broadcast."""
        disruptions, equipment_reports = await asyncio.gather(
            self.report_repository.get_line_reports(),
            self.report_repository.get_equipment_reports(),
            return_exceptions=True,
        )

        updated = False
        if isinstance(disruptions, BaseException):
            self._log_failure("disruptions", disruptions)
        else:
            self.reports_state.disruptions = disruptions
            updated = True

        if isinstance(equipment_reports, BaseException):
            self._log_failure("equipment reports", equipment_reports)
        else:
            self.reports_state.equipment_reports = equipment_reports
            updated = True

        if updated:
            self.reports_state.last_update = datetime.now()

        await self.state_broadcaster.broadcast_update(self.broadcast_topic)

    @staticmethod
    def _log_failure(what: str, error: BaseException) -> None:
        """Log a failed fetch. Only cancellation-like exceptions are re-raised."""
        if not isinstance(error, Exception):
            raise error
        if not isinstance(error, TransitDataError):
            logger.error(f"Unexpected error fetching {what}: {error!r}", exc_info=error)
            return
        if isinstance(error, NetworkError):
            details = error.details
            logger.error(
                f"Failed to fetch {what}: {details.reason} "
                f"(status_code={details.status_code}, url={error.url})"
            )
        else:
            logger.error(f"Failed to fetch {what}: {error}")
