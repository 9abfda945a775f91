"""Parser for decoded SNCF departure boards."""

import logging

from sncf_departures.adapters.sncf_api.constants import (
    PLATFORM_FALLBACK,
    VEHICLE_JOURNEY_LINK_TYPE,
)
from sncf_departures.adapters.sncf_api.datetime_parser import parse_compact_datetime
from sncf_departures.adapters.sncf_api.payloads import (
    DepartureRecord,
    Link,
    RouteRecord,
    StopPointRecord,
)
from sncf_departures.domain.delay import compute_delay_minutes
from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.line_info import LineInfo

logger = logging.getLogger(__name__)

DISRUPTION_LINK_TYPE = "disruption"


class DepartureParser:
    """Maps departure records into Departure objects, keeping provider order."""

    @staticmethod
    def parse_departures(records: list[DepartureRecord]) -> list[Departure]:
        """Parse all departure records of one response.

        Args:
            records: Decoded departure records.

        Returns:
            Departures in the order the provider delivered them.
        """
        departures = [
            DepartureParser._parse_departure(record, index) for index, record in enumerate(records)
        ]
        logger.debug(f"Parsed {len(departures)} departures")
        return departures

    @staticmethod
    def _parse_departure(record: DepartureRecord, index: int) -> Departure:
        info = record.display_informations
        scheduled_time = parse_compact_datetime(record.stop_date_time.base_departure_date_time)
        real_time = parse_compact_datetime(record.stop_date_time.departure_date_time)
        stop_area = record.stop_point.stop_area

        return Departure(
            id=f"{info.headsign}_{index}",
            train_number=info.headsign,
            destination=info.direction,
            platform=extract_platform(record.stop_point),
            scheduled_time=scheduled_time,
            real_time=real_time,
            delay_minutes=compute_delay_minutes(real_time, scheduled_time),
            service_type=info.commercial_mode,
            network_label=info.network,
            route=DepartureParser._extract_line_info(record.route),
            stop_area_id=stop_area.id if stop_area else None,
            vehicle_journey_id=find_link_id(record.links, VEHICLE_JOURNEY_LINK_TYPE),
            disruption_refs=DepartureParser._extract_disruption_refs(record),
        )

    @staticmethod
    def _extract_line_info(route: RouteRecord | None) -> LineInfo | None:
        """Line fields, falling back to the route's own fields."""
        if route is None:
            return None
        line = route.line
        if line is None:
            return LineInfo(id=None, name=route.name, code=route.code, color=route.color)
        return LineInfo(
            id=line.id,
            name=line.name or route.name,
            code=line.code or route.code,
            color=line.color or route.color,
            text_color=line.text_color,
        )

    @staticmethod
    def _extract_disruption_refs(record: DepartureRecord) -> list[str]:
        links = [*record.links, *record.display_informations.links]
        refs: list[str] = []
        for link in links:
            if link.type == DISRUPTION_LINK_TYPE and link.id and link.id not in refs:
                refs.append(link.id)
        return refs


def extract_platform(stop_point: StopPointRecord | None) -> str:
    """Platform code, then platform name, then a placeholder."""
    if stop_point is None:
        return PLATFORM_FALLBACK
    return stop_point.platform_code or stop_point.platform or PLATFORM_FALLBACK


def find_link_id(links: list[Link], link_type: str) -> str | None:
    """Id of the first link of the given type."""
    return next((link.id for link in links if link.type == link_type and link.id), None)
