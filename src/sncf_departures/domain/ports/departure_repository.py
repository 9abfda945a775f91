"""Departure repository port."""

from typing import Protocol

from sncf_departures.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving upcoming departures."""

    async def get_departures(self, station_id: str) -> list[Departure]:
        """Get realtime departures for a station."""
        ...
