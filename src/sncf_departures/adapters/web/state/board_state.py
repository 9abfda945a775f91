"""Per-connection board state dataclass."""

from dataclasses import dataclass, field

from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.station import Station
from sncf_departures.domain.models.stop import Stop


@dataclass
class BoardState:
    """UI state of one departures board connection."""

    search_query: str = ""
    stations: list[Station] = field(default_factory=list)
    selected_station: Station | None = None
    departures: list[Departure] = field(default_factory=list)
    selected_departure: Departure | None = None
    journey: list[Stop] = field(default_factory=list)
    error: str | None = None
    loading: bool = False  # departures of the selected station are being fetched
    searching: bool = False
    journey_loading: bool = False

    @property
    def journey_open(self) -> bool:
        return self.selected_departure is not None
