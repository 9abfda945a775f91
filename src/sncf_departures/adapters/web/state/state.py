"""State management class."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sncf_departures.adapters.web.broadcasters import StateBroadcaster
from sncf_departures.adapters.web.pollers import ReportPoller

from .reports_state import ReportsState

if TYPE_CHECKING:
    from sncf_departures.domain.contracts import ReportPollerProtocol
    from sncf_departures.domain.ports import ReportRepository

logger = logging.getLogger(__name__)

REPORTS_TOPIC = "reports:updates"


class State:
    """Shared state of all board connections: report snapshot, sockets and report poller.

    The report poller runs only while at least one socket is registered.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        refresh_interval_seconds: float = 300,
        broadcast_topic: str = REPORTS_TOPIC,
    ) -> None:
        self.report_repository = report_repository
        self.refresh_interval_seconds = refresh_interval_seconds
        self.broadcast_topic = broadcast_topic
        self.reports_state = ReportsState()
        self.connected_sockets: set[Any] = set()
        self.report_poller: ReportPollerProtocol | None = None

    async def register_socket(self, socket: Any) -> None:
        """Register a socket, starting the report poller for the first one."""
        self.connected_sockets.add(socket)
        logger.info(f"Registered socket, total connected: {len(self.connected_sockets)}")
        if len(self.connected_sockets) == 1:
            await self.start_report_poller()

    async def unregister_socket(self, socket: Any) -> None:
        """Unregister a socket, stopping the report poller after the last one.

        Idempotent: unknown sockets are ignored.
        """
        if socket not in self.connected_sockets:
            return
        self.connected_sockets.discard(socket)
        logger.info(f"Unregistered socket, total connected: {len(self.connected_sockets)}")
        if not self.connected_sockets:
            await self.stop_report_poller()

    async def start_report_poller(self) -> None:
        """Start the report poller task."""
        if self.report_poller is not None and self.report_poller.is_running:
            logger.warning("Report poller already running")
            return

        self.report_poller = ReportPoller(
            report_repository=self.report_repository,
            reports_state=self.reports_state,
            state_broadcaster=StateBroadcaster(),
            broadcast_topic=self.broadcast_topic,
            refresh_interval_seconds=self.refresh_interval_seconds,
        )
        await self.report_poller.start()

    async def stop_report_poller(self) -> None:
        """Stop the report poller task."""
        if self.report_poller is not None:
            await self.report_poller.stop()
            self.report_poller = None
