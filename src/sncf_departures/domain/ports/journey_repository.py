"""Journey repository port."""

from typing import Protocol

from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.stop import Stop


class JourneyRepository(Protocol):
    """Port for retrieving the stop-by-stop timeline of a departure."""

    async def get_journey_details(self, departure: Departure) -> list[Stop]:
        """Get the stops of the vehicle journey serving a departure."""
        ...
