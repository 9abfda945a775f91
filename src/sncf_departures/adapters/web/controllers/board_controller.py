"""Board controller: state transitions and fetch orchestration of one connection."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from sncf_departures.adapters.web.debounce import Debouncer
from sncf_departures.adapters.web.sequencing import RequestSequencer
from sncf_departures.adapters.web.state.board_state import BoardState
from sncf_departures.domain.errors import TransitDataError

if TYPE_CHECKING:
    from sncf_departures.adapters.config import AppConfig
    from sncf_departures.domain.models import Departure, Station
    from sncf_departures.domain.ports import (
        DepartureRepository,
        JourneyRepository,
        StationRepository,
    )

logger = logging.getLogger(__name__)

SEARCH_ERROR = "Erreur lors de la recherche des gares."
DEPARTURES_ERROR = "Erreur lors du chargement des départs."
JOURNEY_ERROR = "Erreur lors du chargement des détails du trajet."

SEARCH_SLOT = "search"
DEPARTURES_SLOT = "departures"
JOURNEY_SLOT = "journey"


class BoardController:
    """Owns the BoardState of one connection and the fetches that fill it.

    Every fetch is tagged by a RequestSequencer; a response that is no longer
    the latest for its slot is dropped without touching the state. Provider
    failures become a French error message and clear the affected list.
    """

    def __init__(
        self,
        station_repository: StationRepository,
        departure_repository: DepartureRepository,
        journey_repository: JourneyRepository,
        config: AppConfig,
        on_change: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            station_repository: Station search.
            departure_repository: Departure boards.
            journey_repository: Journey details.
            config: Application configuration (search thresholds).
            on_change: Called after state changed outside of an awaited event,
                e.g. when a debounced search completes.
        """
        self.station_repository = station_repository
        self.departure_repository = departure_repository
        self.journey_repository = journey_repository
        self.search_min_length = config.search_min_length
        self.on_change = on_change
        self.state = BoardState()
        self.debouncer = Debouncer(config.search_debounce_seconds)
        self.sequencer = RequestSequencer()

    async def update_query(self, query: str) -> None:
        """Record the search text and schedule a debounced search when long enough."""
        self.state.search_query = query
        text = query.strip()

        if not text:
            self._cancel_search()
            self.state.stations = []
            return

        if len(text) < self.search_min_length:
            self._cancel_search()
            return

        self.debouncer.schedule(lambda: self._search(text))

    async def select_station(self, station_id: str) -> None:
        """Select a suggested station and load its departures."""
        station = next((s for s in self.state.stations if s.id == station_id), None)
        if station is None:
            logger.warning(f"Ignoring selection of unknown station {station_id}")
            return

        self._cancel_search()
        self.state.selected_station = station
        self.state.search_query = station.name
        self.state.stations = []
        self._clear_journey()
        await self._load_departures(station)

    async def select_departure(self, departure_id: str) -> None:
        """Open the journey modal of a departure and load its stops."""
        departure = next((d for d in self.state.departures if d.id == departure_id), None)
        if departure is None:
            logger.warning(f"Ignoring selection of unknown departure {departure_id}")
            return

        self.state.selected_departure = departure
        self.state.journey = []
        await self._load_journey(departure)

    def close_journey(self) -> None:
        """Close the journey modal."""
        self._clear_journey()

    async def close(self) -> None:
        """Cancel pending work of this connection."""
        await self.debouncer.close()

    async def _search(self, query: str) -> None:
        token = self.sequencer.next(SEARCH_SLOT)
        self.state.searching = True
        try:
            stations = await self.station_repository.search_stations(query)
        except TransitDataError as e:
            if self._is_stale(SEARCH_SLOT, token):
                return
            logger.warning(f"Station search {query!r} failed: {e}")
            self.state.error = SEARCH_ERROR
            self.state.stations = []
        else:
            if self._is_stale(SEARCH_SLOT, token):
                return
            self.state.stations = stations
            self.state.error = None
        self.state.searching = False
        await self._notify()

    async def _load_departures(self, station: Station) -> None:
        token = self.sequencer.next(DEPARTURES_SLOT)
        self.state.loading = True
        await self._notify()
        try:
            departures = await self.departure_repository.get_departures(station.id)
        except TransitDataError as e:
            if self._is_stale(DEPARTURES_SLOT, token):
                return
            logger.warning(f"Loading departures of {station.id} failed: {e}")
            self.state.error = DEPARTURES_ERROR
            self.state.departures = []
        else:
            if self._is_stale(DEPARTURES_SLOT, token):
                return
            self.state.departures = departures
            self.state.error = None
        self.state.loading = False

    async def _load_journey(self, departure: Departure) -> None:
        token = self.sequencer.next(JOURNEY_SLOT)
        self.state.journey_loading = True
        await self._notify()
        try:
            stops = await self.journey_repository.get_journey_details(departure)
        except TransitDataError as e:
            if self._is_stale(JOURNEY_SLOT, token):
                return
            logger.warning(f"Loading journey of {departure.id} failed: {e}")
            self.state.error = JOURNEY_ERROR
            self.state.journey = []
        else:
            if self._is_stale(JOURNEY_SLOT, token):
                return
            self.state.journey = stops
        self.state.journey_loading = False

    def _cancel_search(self) -> None:
        self.debouncer.cancel()
        self.sequencer.invalidate(SEARCH_SLOT)
        self.state.searching = False

    def _clear_journey(self) -> None:
        self.sequencer.invalidate(JOURNEY_SLOT)
        self.state.selected_departure = None
        self.state.journey = []
        self.state.journey_loading = False

    def _is_stale(self, slot: str, token: int) -> bool:
        if self.sequencer.is_current(slot, token):
            return False
        logger.debug(f"Discarding stale {slot} response (token {token})")
        return True

    async def _notify(self) -> None:
        if self.on_change is not None:
            await self.on_change()
