"""Domain layer - core models, errors and ports."""

from sncf_departures.domain.errors import (
    DecodeError,
    MissingReferenceError,
    NetworkError,
    TransitDataError,
)
from sncf_departures.domain.models import (
    Departure,
    Disruption,
    Station,
    StationEquipment,
    Stop,
)
from sncf_departures.domain.ports import (
    DepartureRepository,
    JourneyRepository,
    ReportRepository,
    StationRepository,
)

__all__ = [
    "DecodeError",
    "Departure",
    "DepartureRepository",
    "Disruption",
    "JourneyRepository",
    "MissingReferenceError",
    "NetworkError",
    "ReportRepository",
    "Station",
    "StationEquipment",
    "StationRepository",
    "Stop",
    "TransitDataError",
]
