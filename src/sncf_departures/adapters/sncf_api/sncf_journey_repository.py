"""SNCF vehicle journey repository adapter."""

import logging
from collections.abc import Callable
from datetime import datetime

from sncf_departures.adapters.sncf_api.constants import REALTIME_FRESHNESS, VEHICLE_JOURNEY_PATH
from sncf_departures.adapters.sncf_api.datetime_parser import start_of_day
from sncf_departures.adapters.sncf_api.http_client import SncfHttpClient, quote_id
from sncf_departures.adapters.sncf_api.journey_parser import JourneyParser
from sncf_departures.adapters.sncf_api.payloads import VehicleJourneysResponse, decode
from sncf_departures.domain.errors import MissingReferenceError
from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.stop import Stop
from sncf_departures.domain.ports.journey_repository import JourneyRepository

logger = logging.getLogger(__name__)


class SncfJourneyRepository(JourneyRepository):
    """Fetches the stop-by-stop timeline of the vehicle serving a departure."""

    def __init__(
        self, http_client: SncfHttpClient, clock: Callable[[], datetime] = datetime.now
    ) -> None:
        self._http_client = http_client
        self._clock = clock

    async def get_journey_details(self, departure: Departure) -> list[Stop]:
        """Get the stops of a departure's vehicle journey, sorted by arrival.

        Stop times are placed on the day of the departure's scheduled time.

        Raises:
            MissingReferenceError: If the departure carries no vehicle journey id.
        """
        vehicle_journey_id = departure.vehicle_journey_id
        if not vehicle_journey_id:
            raise MissingReferenceError(f"Departure {departure.id} has no vehicle journey link")

        path = VEHICLE_JOURNEY_PATH.format(vehicle_journey_id=quote_id(vehicle_journey_id))
        params: dict[str, str | int] = {"data_freshness": REALTIME_FRESHNESS}
        data = await self._http_client.get_json(path, params=params)
        response = decode(VehicleJourneysResponse, data)

        if not response.vehicle_journeys:
            logger.warning(f"No vehicle journey returned for {vehicle_journey_id}")
            return []

        base_date = start_of_day(departure.scheduled_time or self._clock())
        stops = JourneyParser.parse_stops(
            response.vehicle_journeys[0].stop_times,
            base_date=base_date,
            id_prefix=departure.train_number,
        )
        logger.info(f"Fetched {len(stops)} stops for vehicle journey {vehicle_journey_id}")
        return stops
