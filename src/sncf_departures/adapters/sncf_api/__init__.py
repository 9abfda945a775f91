"""SNCF (Navitia) API adapters."""

from sncf_departures.adapters.sncf_api.http_client import SncfHttpClient
from sncf_departures.adapters.sncf_api.sncf_departure_repository import SncfDepartureRepository
from sncf_departures.adapters.sncf_api.sncf_journey_repository import SncfJourneyRepository
from sncf_departures.adapters.sncf_api.sncf_report_repository import SncfReportRepository
from sncf_departures.adapters.sncf_api.sncf_station_repository import SncfStationRepository
from sncf_departures.adapters.sncf_api.transit_client import SncfTransitClient

__all__ = [
    "SncfDepartureRepository",
    "SncfHttpClient",
    "SncfJourneyRepository",
    "SncfReportRepository",
    "SncfStationRepository",
    "SncfTransitClient",
]
