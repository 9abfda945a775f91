"""Departures LiveView: station search, departure board and journey modal."""

from __future__ import annotations

import logging
import os
import uuid
from functools import cache
from typing import Any

from pyview import LiveView, LiveViewSocket, is_connected
from pyview.events import InfoEvent
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.web.broadcasters import UPDATE_MESSAGE, StateBroadcaster
from sncf_departures.adapters.web.builders import TemplateDataBuilder
from sncf_departures.adapters.web.controllers import BoardController
from sncf_departures.adapters.web.state import BoardState, State
from sncf_departures.domain.ports import (
    DepartureRepository,  # noqa: TC001 - Runtime dependency: passed to the controller
    JourneyRepository,  # noqa: TC001 - Runtime dependency: passed to the controller
    StationRepository,  # noqa: TC001 - Runtime dependency: passed to the controller
)

logger = logging.getLogger(__name__)

TEMPLATE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "departures.html")


@cache
def load_template() -> LiveTemplate:
    """Load and compile the board template once per process."""
    with open(TEMPLATE_FILE, encoding="utf-8") as f:
        return LiveTemplate(ibis.Template(f.read()))


def payload_value(payload: Any, key: str) -> str:
    """Read a single value from an event payload.

    Form events arrive as query-string dicts of lists, click events as plain
    dicts of phx-value-* attributes.
    """
    if not isinstance(payload, dict):
        return ""
    value = payload.get(key, "")
    if isinstance(value, list):
        value = value[0] if value else ""
    return str(value)


class DeparturesLiveView(LiveView[BoardState]):
    """LiveView binding a BoardController to one socket."""

    def __init__(
        self,
        state_manager: State,
        station_repository: StationRepository,
        departure_repository: DepartureRepository,
        journey_repository: JourneyRepository,
        config: AppConfig,
    ) -> None:
        """Initialize the LiveView.

        Args:
            state_manager: Shared report snapshot, socket registry and poller.
            station_repository: Station search.
            departure_repository: Departure boards.
            journey_repository: Journey details.
            config: Application configuration.
        """
        super().__init__()
        self.state_manager = state_manager
        self.station_repository = station_repository
        self.departure_repository = departure_repository
        self.journey_repository = journey_repository
        self.config = config
        self.template_data_builder = TemplateDataBuilder(config)
        self.state_broadcaster = StateBroadcaster()
        self.controllers: dict[LiveViewSocket[BoardState], BoardController] = {}

    def _create_controller(self, topic: str) -> BoardController:
        async def notify() -> None:
            await self.state_broadcaster.broadcast_update(topic)

        return BoardController(
            self.station_repository,
            self.departure_repository,
            self.journey_repository,
            self.config,
            on_change=notify,
        )

    async def mount(self, socket: LiveViewSocket[BoardState], _session: dict) -> None:
        """Mount the LiveView, subscribe to updates and register the socket."""
        topic = f"board:{uuid.uuid4()}"
        controller = self._create_controller(topic)
        self.controllers[socket] = controller
        socket.context = controller.state

        if not is_connected(socket):
            return

        try:
            await socket.subscribe(topic)
            await socket.subscribe(self.state_manager.broadcast_topic)
        except Exception as e:
            logger.error(f"Failed to subscribe socket to update topics: {e}", exc_info=True)
        await self.state_manager.register_socket(socket)

    async def unmount(self, socket: LiveViewSocket[BoardState]) -> None:
        """Unmount the LiveView and release the socket's resources."""
        controller = self.controllers.pop(socket, None)
        if controller is not None:
            await controller.close()
        await self.state_manager.unregister_socket(socket)

    async def disconnect(self, socket: LiveViewSocket[BoardState]) -> None:
        await self.unmount(socket)

    async def handle_event(
        self, event: str, payload: Any, socket: LiveViewSocket[BoardState]
    ) -> None:
        """Dispatch UI events to the connection's controller."""
        controller = self.controllers.get(socket)
        if controller is None:
            logger.warning(f"Event {event!r} received for an unknown socket")
            return

        if event == "search":
            await controller.update_query(payload_value(payload, "query"))
        elif event == "select_station":
            await controller.select_station(payload_value(payload, "id"))
        elif event == "select_departure":
            await controller.select_departure(payload_value(payload, "id"))
        elif event == "close_journey":
            controller.close_journey()
        else:
            logger.debug(f"Ignoring unknown event {event!r}")
            return

        socket.context = controller.state

    async def handle_info(self, event: str | InfoEvent, socket: LiveViewSocket[BoardState]) -> None:
        """Re-render on update messages from the board and report topics."""
        payload = event.payload if isinstance(event, InfoEvent) else event
        if payload != UPDATE_MESSAGE:
            logger.debug(f"Ignoring info message: {payload!r}")
            return

        controller = self.controllers.get(socket)
        if controller is not None:
            socket.context = controller.state

    async def render(self, assigns: BoardState, meta: Any) -> LiveRender:
        """Render the HTML template."""
        try:
            template_assigns = self.template_data_builder.build(
                assigns, self.state_manager.reports_state
            )
            return LiveRender(load_template(), template_assigns, meta)
        except Exception as e:
            logger.error(f"Error rendering template: {e}", exc_info=True)
            error_template = LiveTemplate(
                ibis.Template("<div>Erreur d'affichage : {{ error }}</div>")
            )
            return LiveRender(error_template, {"error": str(e)}, meta)


def create_departures_live_view(
    state_manager: State,
    station_repository: StationRepository,
    departure_repository: DepartureRepository,
    journey_repository: JourneyRepository,
    config: AppConfig,
) -> type[DeparturesLiveView]:
    """Create a configured DeparturesLiveView class.

    PyView's add_live_view expects a class, not an instance, so the
    collaborators are captured in a subclass.
    """

    class ConfiguredDeparturesLiveView(DeparturesLiveView):
        """Configured departures LiveView."""

        def __init__(self) -> None:
            super().__init__(
                state_manager,
                station_repository,
                departure_repository,
                journey_repository,
                config,
            )

    return ConfiguredDeparturesLiveView
