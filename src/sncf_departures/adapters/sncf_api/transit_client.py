"""Facade over the SNCF repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sncf_departures.adapters.api_rate_limiter import ApiRateLimiter
from sncf_departures.adapters.sncf_api.http_client import SncfHttpClient
from sncf_departures.adapters.sncf_api.sncf_departure_repository import SncfDepartureRepository
from sncf_departures.adapters.sncf_api.sncf_journey_repository import SncfJourneyRepository
from sncf_departures.adapters.sncf_api.sncf_report_repository import SncfReportRepository
from sncf_departures.adapters.sncf_api.sncf_station_repository import SncfStationRepository

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from sncf_departures.adapters.config import AppConfig
    from sncf_departures.domain.models import Departure, Disruption, Station, StationEquipment, Stop

SNCF_API_NAME = "sncf_api"


class SncfTransitClient:
    """The four remote queries of the app, sharing one HTTP client."""

    def __init__(
        self,
        stations: SncfStationRepository,
        departures: SncfDepartureRepository,
        journeys: SncfJourneyRepository,
        reports: SncfReportRepository,
    ) -> None:
        self.stations = stations
        self.departures = departures
        self.journeys = journeys
        self.reports = reports

    @classmethod
    def from_config(cls, session: ClientSession, config: AppConfig) -> SncfTransitClient:
        """Wire the repositories for a session and configuration."""
        http_client = SncfHttpClient(
            session,
            api_key=config.sncf_api_key,
            base_url=config.sncf_api_base_url,
            timeout_seconds=config.sncf_api_timeout,
            rate_limiter=ApiRateLimiter.shared(SNCF_API_NAME, config.sncf_api_min_delay_seconds),
        )
        return cls(
            stations=SncfStationRepository(http_client, result_count=config.search_result_count),
            departures=SncfDepartureRepository(
                http_client, count=config.departures_count, depth=config.departures_depth
            ),
            journeys=SncfJourneyRepository(http_client),
            reports=SncfReportRepository(
                http_client, count=config.reports_count, depth=config.reports_depth
            ),
        )

    async def search_stations(self, query: str) -> list[Station]:
        return await self.stations.search_stations(query)

    async def get_departures(self, station_id: str) -> list[Departure]:
        return await self.departures.get_departures(station_id)

    async def get_journey_details(self, departure: Departure) -> list[Stop]:
        return await self.journeys.get_journey_details(departure)

    async def get_line_reports(self) -> list[Disruption]:
        return await self.reports.get_line_reports()

    async def get_equipment_reports(self) -> list[StationEquipment]:
        return await self.reports.get_equipment_reports()
