"""SNCF station repository adapter."""

import logging

from sncf_departures.adapters.sncf_api.constants import PLACES_PATH, STOP_AREA_TYPE
from sncf_departures.adapters.sncf_api.http_client import SncfHttpClient
from sncf_departures.adapters.sncf_api.payloads import PlaceRecord, PlacesResponse, decode
from sncf_departures.domain.models.station import Coordinate, Station
from sncf_departures.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class SncfStationRepository(StationRepository):
    """Searches stop areas through the /places endpoint."""

    def __init__(self, http_client: SncfHttpClient, result_count: int = 10) -> None:
        """Initialize with the shared HTTP client.

        Args:
            http_client: Client for the SNCF coverage.
            result_count: Maximum number of stations to return.
        """
        self._http_client = http_client
        self._result_count = result_count

    async def search_stations(self, query: str) -> list[Station]:
        """Search stations by free text.

        Args:
            query: Non-empty search text.

        Returns:
            Matching stations in provider order; places that are not stop areas are dropped.

        Raises:
            ValueError: If the query is empty.
        """
        if not query or not query.strip():
            raise ValueError("query must not be empty")

        params: dict[str, str | int] = {
            "q": query,
            "type[]": STOP_AREA_TYPE,
            "count": self._result_count,
        }
        data = await self._http_client.get_json(PLACES_PATH, params=params)
        response = decode(PlacesResponse, data)

        stations = [
            self._build_station(place)
            for place in response.places
            if place.embedded_type == STOP_AREA_TYPE
        ][: self._result_count]
        logger.debug(f"Station search {query!r} returned {len(stations)} station(s)")
        return stations

    @staticmethod
    def _build_station(place: PlaceRecord) -> Station:
        """Build a Station from a stop-area place."""
        coord = place.stop_area.coord if place.stop_area else None
        return Station(
            id=place.id,
            name=place.name,
            coordinate=Coordinate(latitude=coord.lat, longitude=coord.lon) if coord else None,
        )
