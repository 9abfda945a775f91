"""SNCF disruption and equipment report repository adapter."""

import logging

from sncf_departures.adapters.sncf_api.constants import DISRUPTIONS_PATH, EQUIPMENT_REPORTS_PATH
from sncf_departures.adapters.sncf_api.http_client import SncfHttpClient
from sncf_departures.adapters.sncf_api.payloads import (
    DisruptionsResponse,
    EquipmentReportsResponse,
    decode,
)
from sncf_departures.adapters.sncf_api.report_parser import ReportParser
from sncf_departures.domain.models.disruption import Disruption
from sncf_departures.domain.models.equipment_report import StationEquipment
from sncf_departures.domain.ports.report_repository import ReportRepository

logger = logging.getLogger(__name__)


class SncfReportRepository(ReportRepository):
    """Fetches network-wide disruption and equipment reports."""

    def __init__(self, http_client: SncfHttpClient, count: int = 50, depth: int = 3) -> None:
        self._http_client = http_client
        self._params: dict[str, str | int] = {"count": count, "depth": depth}

    async def get_line_reports(self) -> list[Disruption]:
        """Get current disruptions."""
        data = await self._http_client.get_json(DISRUPTIONS_PATH, params=dict(self._params))
        response = decode(DisruptionsResponse, data)
        disruptions = ReportParser.parse_disruptions(response.disruptions)
        logger.info(f"Fetched {len(disruptions)} disruptions")
        return disruptions

    async def get_equipment_reports(self) -> list[StationEquipment]:
        """Get current elevator and escalator availability per stop area."""
        data = await self._http_client.get_json(EQUIPMENT_REPORTS_PATH, params=dict(self._params))
        response = decode(EquipmentReportsResponse, data)
        stations = ReportParser.parse_equipment_reports(response.equipment_reports)
        logger.info(f"Fetched equipment reports for {len(stations)} stop areas")
        return stations
