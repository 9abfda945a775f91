"""Domain models for SNCF departures."""

from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.disruption import (
    ApplicationPeriod,
    Disruption,
    DisruptionMessage,
    ImpactedObject,
    MessageChannel,
    Severity,
)
from sncf_departures.domain.models.equipment_report import (
    Availability,
    Equipment,
    EquipmentType,
    StationEquipment,
)
from sncf_departures.domain.models.error_details import ErrorDetails
from sncf_departures.domain.models.line_info import LineInfo
from sncf_departures.domain.models.station import Coordinate, Station
from sncf_departures.domain.models.stop import Stop, StopStatus

__all__ = [
    "ApplicationPeriod",
    "Availability",
    "Coordinate",
    "Departure",
    "Disruption",
    "DisruptionMessage",
    "Equipment",
    "EquipmentType",
    "ErrorDetails",
    "ImpactedObject",
    "LineInfo",
    "MessageChannel",
    "Severity",
    "Station",
    "StationEquipment",
    "Stop",
    "StopStatus",
]
