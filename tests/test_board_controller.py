"""Behavior tests for the per-connection board controller."""

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from sncf_departures.adapters.web.controllers import (
    DEPARTURES_ERROR,
    JOURNEY_ERROR,
    SEARCH_ERROR,
    BoardController,
)
from sncf_departures.domain.errors import DecodeError, MissingReferenceError, NetworkError
from sncf_departures.domain.models import Station, Stop
from tests.factories import (
    FakeDepartureRepository,
    FakeJourneyRepository,
    FakeStationRepository,
    make_departure,
)

PARIS = Station(id="stop_area:SNCF:87686006", name="Paris Gare de Lyon")
LYON = Station(id="stop_area:SNCF:87722025", name="Lyon Part-Dieu")


def _stop(index: int, hour: int) -> Stop:
    moment = datetime(2024, 3, 15, hour, 0)
    return Stop(
        id=f"TGV 6603_{index}",
        station_name=f"Gare {index}",
        arrival_time=moment,
        departure_time=moment,
        base_arrival_time=moment,
        base_departure_time=moment,
        platform="A",
        arrival_delay_minutes=0,
        departure_delay_minutes=0,
    )


class GatedJourneyRepository(FakeJourneyRepository):
    """Journey repository whose answer is held until released."""

    def __init__(self, stops: list[Stop]):
        super().__init__(stops)
        self.release = asyncio.Event()

    async def get_journey_details(self, departure):
        self.requested.append(departure)
        await self.release.wait()
        return list(self.stops)


class GatedStationRepository(FakeStationRepository):
    def __init__(self, stations: list[Station]):
        super().__init__(stations)
        self.release = asyncio.Event()
        self.started = asyncio.Event()

    async def search_stations(self, query):
        self.queries.append(query)
        self.started.set()
        await self.release.wait()
        return list(self.stations)


def _controller(config, stations=None, departures=None, journeys=None, on_change=None):
    return BoardController(
        station_repository=stations or FakeStationRepository([PARIS, LYON]),
        departure_repository=departures or FakeDepartureRepository([make_departure(0)]),
        journey_repository=journeys or FakeJourneyRepository([_stop(0, 9), _stop(1, 11)]),
        config=config,
        on_change=on_change,
    )


async def _settle(controller: BoardController) -> None:
    await asyncio.sleep(0.05)
    await controller.debouncer.drain()


class TestSearch:
    @pytest.mark.asyncio
    async def test_when_query_too_short_then_no_request(self, config) -> None:
        """Given a one-character query, when typing, then no search is sent."""
        stations = FakeStationRepository([PARIS])
        controller = _controller(config, stations=stations)

        await controller.update_query("P")
        await _settle(controller)

        assert stations.queries == []
        assert controller.state.search_query == "P"

    @pytest.mark.asyncio
    async def test_when_query_long_enough_then_search_after_quiet_period(self, config) -> None:
        """Given "Pa", when the debounce elapses, then stations are fetched and shown."""
        on_change = AsyncMock()
        stations = FakeStationRepository([PARIS, LYON])
        controller = _controller(config, stations=stations, on_change=on_change)

        await controller.update_query("Pa")
        assert stations.queries == []
        await _settle(controller)

        assert stations.queries == ["Pa"]
        assert controller.state.stations == [PARIS, LYON]
        assert controller.state.searching is False
        on_change.assert_awaited()

    @pytest.mark.asyncio
    async def test_when_typing_quickly_then_single_search(self, config) -> None:
        """Given rapid keystrokes, when the user pauses, then only the last text is searched."""
        stations = FakeStationRepository([PARIS])
        controller = _controller(config, stations=stations)

        for text in ["Pa", "Par", "Pari", "Paris"]:
            await controller.update_query(text)
        await _settle(controller)

        assert stations.queries == ["Paris"]

    @pytest.mark.asyncio
    async def test_when_query_cleared_then_suggestions_cleared(self, config) -> None:
        """Given suggestions, when the query is erased, then the list is emptied."""
        controller = _controller(config)
        await controller.update_query("Pa")
        await _settle(controller)

        await controller.update_query("  ")

        assert controller.state.stations == []

    @pytest.mark.asyncio
    async def test_when_search_fails_then_error_shown_and_list_cleared(self, config) -> None:
        """Given a failing provider, when searching, then the French search error is shown."""
        controller = _controller(
            config, stations=FakeStationRepository(error=NetworkError("down", status_code=500))
        )
        controller.state.stations = [PARIS]

        await controller.update_query("Pa")
        await _settle(controller)

        assert controller.state.error == SEARCH_ERROR
        assert controller.state.stations == []

    @pytest.mark.asyncio
    async def test_when_query_cleared_during_search_then_late_result_dropped(self, config) -> None:
        """Given a search in flight, when the query is erased, then its result is discarded."""
        stations = GatedStationRepository([PARIS])
        controller = _controller(config, stations=stations)

        await controller.update_query("Pa")
        await asyncio.wait_for(stations.started.wait(), timeout=1)
        await controller.update_query("")
        stations.release.set()
        await controller.debouncer.drain()

        assert controller.state.stations == []


class TestSelectStation:
    @pytest.mark.asyncio
    async def test_when_station_selected_then_departures_loaded_once(self, config) -> None:
        """Given suggestions, when selecting one, then its departures are fetched exactly once."""
        departures = FakeDepartureRepository([make_departure(0), make_departure(1, delay=0)])
        controller = _controller(config, departures=departures)
        await controller.update_query("Pa")
        await _settle(controller)

        await controller.select_station(PARIS.id)

        assert departures.station_ids == [PARIS.id]
        assert controller.state.selected_station == PARIS
        assert controller.state.search_query == "Paris Gare de Lyon"
        assert controller.state.stations == []
        assert controller.state.loading is False
        assert controller.state.departures[0].delay_minutes == 7

    @pytest.mark.asyncio
    async def test_when_station_unknown_then_ignored(self, config) -> None:
        """Given no matching suggestion, when selecting, then nothing is fetched."""
        departures = FakeDepartureRepository()
        controller = _controller(config, departures=departures)

        await controller.select_station("stop_area:unknown")

        assert departures.station_ids == []
        assert controller.state.selected_station is None

    @pytest.mark.asyncio
    async def test_when_departures_fail_then_error_and_empty_list(self, config) -> None:
        """Given a failing board, when selecting a station, then the departures error shows."""
        controller = _controller(
            config, departures=FakeDepartureRepository(error=DecodeError("bad payload"))
        )
        controller.state.stations = [PARIS]
        controller.state.departures = [make_departure(5)]

        await controller.select_station(PARIS.id)

        assert controller.state.error == DEPARTURES_ERROR
        assert controller.state.departures == []
        assert controller.state.loading is False

    @pytest.mark.asyncio
    async def test_when_new_station_selected_then_open_journey_closed(self, config) -> None:
        """Given an open journey, when selecting another station, then the modal closes."""
        controller = _controller(config)
        controller.state.stations = [PARIS, LYON]
        await controller.select_station(PARIS.id)
        await controller.select_departure("TGV 6603_0")
        controller.state.stations = [LYON]

        await controller.select_station(LYON.id)

        assert controller.state.selected_departure is None
        assert controller.state.journey == []


class TestJourney:
    @pytest.mark.asyncio
    async def test_when_departure_selected_then_stops_loaded(self, config) -> None:
        """Given a board, when a departure is clicked, then its journey is shown."""
        journeys = FakeJourneyRepository([_stop(0, 9), _stop(1, 11)])
        controller = _controller(config, journeys=journeys)
        controller.state.stations = [PARIS]
        await controller.select_station(PARIS.id)

        await controller.select_departure("TGV 6603_0")

        assert controller.state.journey_open
        assert [s.id for s in controller.state.journey] == ["TGV 6603_0", "TGV 6603_1"]
        assert journeys.requested[0].id == "TGV 6603_0"
        assert controller.state.journey_loading is False

    @pytest.mark.asyncio
    async def test_when_journey_fails_then_error_and_no_stops(self, config) -> None:
        """Given a departure without journey link, when clicked, then the journey error shows."""
        controller = _controller(
            config, journeys=FakeJourneyRepository(error=MissingReferenceError("no link"))
        )
        controller.state.departures = [make_departure(0)]

        await controller.select_departure("TGV 6603_0")

        assert controller.state.error == JOURNEY_ERROR
        assert controller.state.journey == []
        assert controller.state.journey_open

    @pytest.mark.asyncio
    async def test_when_closed_then_modal_state_cleared(self, config) -> None:
        """Given an open journey, when closing, then selection and stops are cleared."""
        controller = _controller(config)
        controller.state.departures = [make_departure(0)]
        await controller.select_departure("TGV 6603_0")

        controller.close_journey()

        assert not controller.state.journey_open
        assert controller.state.journey == []

    @pytest.mark.asyncio
    async def test_when_closed_while_loading_then_late_stops_dropped(self, config) -> None:
        """Given a journey in flight, when the modal closes, then the late answer is ignored."""
        journeys = GatedJourneyRepository([_stop(0, 9)])
        controller = _controller(config, journeys=journeys)
        controller.state.departures = [make_departure(0)]

        task = asyncio.create_task(controller.select_departure("TGV 6603_0"))
        await asyncio.sleep(0.01)
        controller.close_journey()
        journeys.release.set()
        await task

        assert controller.state.selected_departure is None
        assert controller.state.journey == []

    @pytest.mark.asyncio
    async def test_when_another_departure_selected_then_only_latest_applies(self, config) -> None:
        """Given two quick clicks, when the first answer arrives late, then it is discarded."""
        journeys = GatedJourneyRepository([_stop(0, 9)])
        controller = _controller(config, journeys=journeys)
        controller.state.departures = [make_departure(0), make_departure(1)]

        first = asyncio.create_task(controller.select_departure("TGV 6603_0"))
        await asyncio.sleep(0.01)
        journeys.stops = [_stop(0, 9), _stop(1, 10)]
        second = asyncio.create_task(controller.select_departure("TGV 6603_1"))
        await asyncio.sleep(0.01)
        journeys.release.set()
        await asyncio.gather(first, second)

        assert controller.state.selected_departure is not None
        assert controller.state.selected_departure.id == "TGV 6603_1"
        assert len(controller.state.journey) == 2
