"""SNCF departure repository adapter."""

import logging
from collections.abc import Callable
from datetime import datetime

from sncf_departures.adapters.sncf_api.constants import (
    REALTIME_FRESHNESS,
    STOP_AREA_DEPARTURES_PATH,
)
from sncf_departures.adapters.sncf_api.datetime_parser import format_compact_datetime
from sncf_departures.adapters.sncf_api.departure_parser import DepartureParser
from sncf_departures.adapters.sncf_api.http_client import SncfHttpClient, quote_id
from sncf_departures.adapters.sncf_api.payloads import DeparturesResponse, decode
from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class SncfDepartureRepository(DepartureRepository):
    """Fetches realtime departure boards of stop areas."""

    def __init__(
        self,
        http_client: SncfHttpClient,
        count: int = 20,
        depth: int = 3,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize with the shared HTTP client.

        Args:
            http_client: Client for the SNCF coverage.
            count: Number of departures requested.
            depth: Expansion depth of nested objects.
            clock: Source of the local "now" sent as the board start time.
        """
        self._http_client = http_client
        self._count = count
        self._depth = depth
        self._clock = clock

    async def get_departures(self, station_id: str) -> list[Departure]:
        """Get upcoming departures of a stop area in provider order.

        Args:
            station_id: Stop area id (e.g. "stop_area:SNCF:87686006").
        """
        path = STOP_AREA_DEPARTURES_PATH.format(stop_area_id=quote_id(station_id))
        params: dict[str, str | int] = {
            "datetime": format_compact_datetime(self._clock()),
            "data_freshness": REALTIME_FRESHNESS,
            "count": self._count,
            "depth": self._depth,
        }
        data = await self._http_client.get_json(path, params=params)
        response = decode(DeparturesResponse, data)

        departures = DepartureParser.parse_departures(response.departures)
        logger.info(f"Fetched {len(departures)} departures for {station_id}")
        return departures
