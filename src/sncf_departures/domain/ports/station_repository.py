"""Station repository port."""

from typing import Protocol

from sncf_departures.domain.models.station import Station


class StationRepository(Protocol):
    """Port for searching stations."""

    async def search_stations(self, query: str) -> list[Station]:
        """Search stations matching a free-text query."""
        ...
