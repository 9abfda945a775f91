"""Ports (interfaces) for the ports-and-adapters architecture."""

from sncf_departures.domain.ports.departure_repository import DepartureRepository
from sncf_departures.domain.ports.journey_repository import JourneyRepository
from sncf_departures.domain.ports.report_repository import ReportRepository
from sncf_departures.domain.ports.station_repository import StationRepository

__all__ = [
    "DepartureRepository",
    "JourneyRepository",
    "ReportRepository",
    "StationRepository",
]
