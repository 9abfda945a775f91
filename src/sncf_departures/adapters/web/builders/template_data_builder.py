"""Builder for the departures board template data."""

from typing import Any

from sncf_departures.adapters.config.app_config import AppConfig
from sncf_departures.adapters.web.formatters.departure_formatter import (
    DEFAULT_DISRUPTION_COLOR,
    DEFAULT_DISRUPTION_TEXT,
    DepartureFormatter,
    format_delay_badge,
    format_display_time,
)
from sncf_departures.adapters.web.state.board_state import BoardState
from sncf_departures.adapters.web.state.reports_state import ReportsState
from sncf_departures.application.services import ReportMatcher
from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.disruption import Disruption
from sncf_departures.domain.models.equipment_report import EquipmentType, StationEquipment
from sncf_departures.domain.models.stop import Stop, StopStatus

MARKDOWN_CONTENT_TYPE = "text/markdown"
ORIGIN_COLOR = "#22C55E"
TERMINUS_COLOR = "#EF4444"
DEFAULT_LINE_COLOR = "#3B82F6"


class TemplateDataBuilder:
    """Flattens board and report state into plain template values."""

    def __init__(self, config: AppConfig, formatter: DepartureFormatter | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Application configuration (title and colours).
            formatter: Formatter for times and labels.
        """
        self.config = config
        self.formatter = formatter or DepartureFormatter()

    def build(self, board: BoardState, reports: ReportsState) -> dict[str, Any]:
        """Build the template assigns for one render.

        Disruptions and equipment are matched against the report snapshot as it
        is at render time.
        """
        matcher = ReportMatcher(reports.disruptions, reports.equipment_reports)
        departures = [self._departure_data(dep, matcher) for dep in board.departures]

        return {
            "title": self.config.title,
            "banner_color": self.config.banner_color,
            "search_query": board.search_query,
            "stations": [{"id": s.id, "name": s.name} for s in board.stations],
            "has_stations": bool(board.stations),
            "error": board.error or "",
            "has_error": board.error is not None,
            "loading": board.loading,
            "searching": board.searching,
            "has_selected_station": board.selected_station is not None,
            "selected_station_name": board.selected_station.name if board.selected_station else "",
            "departures": departures,
            "has_departures": bool(departures),
            "journey_open": board.journey_open,
            "journey": (
                self._journey_data(board.selected_departure, board, matcher)
                if board.selected_departure is not None
                else {}
            ),
            "reports_update_time": self.formatter.format_update_time(reports.last_update),
        }

    def _departure_data(self, departure: Departure, matcher: ReportMatcher) -> dict[str, Any]:
        fmt = self.formatter
        delay_label = fmt.delay_label(departure)
        network_label = fmt.network_label(departure)
        platform_label = fmt.platform_label(departure.platform)
        return {
            "id": departure.id,
            "badge": fmt.line_badge(departure.route, departure.is_substitution_service),
            "train_number": departure.train_number,
            "destination": departure.destination,
            "time": fmt.format_time(departure),
            "time_class": "late" if fmt.is_late(departure) else "on-time",
            "platform_label": platform_label or "",
            "delay_label": delay_label or "",
            "has_delay": delay_label is not None,
            "network_label": network_label or "",
            "has_network": network_label is not None,
            "is_substitution": departure.is_substitution_service,
            "disruptions": [
                self._disruption_summary(d) for d in matcher.for_departure(departure)
            ],
        }

    @staticmethod
    def _disruption_summary(disruption: Disruption) -> dict[str, str]:
        return {
            "id": disruption.id,
            "name": disruption.severity.name or "",
            "text": disruption.headline or DEFAULT_DISRUPTION_TEXT,
            "color": disruption.severity.color or DEFAULT_DISRUPTION_COLOR,
        }

    @staticmethod
    def _disruption_detail(disruption: Disruption) -> dict[str, Any]:
        messages = []
        for message in disruption.messages:
            channel = message.channel
            show_types = channel is not None and channel.content_type == MARKDOWN_CONTENT_TYPE
            messages.append(
                {
                    "text": message.text,
                    "channel_types": ", ".join(channel.types) if show_types and channel else "",
                }
            )
        return {"id": disruption.id, "messages": messages}

    def _journey_data(
        self, departure: Departure, board: BoardState, matcher: ReportMatcher
    ) -> dict[str, Any]:
        fmt = self.formatter
        network_label = fmt.network_label(departure)
        line_color = (
            fmt.line_badge(departure.route)["background"]
            if departure.route and departure.route.color
            else DEFAULT_LINE_COLOR
        )
        return {
            "badge": fmt.line_badge(departure.route, departure.is_substitution_service),
            "train_number": departure.train_number,
            "direction_label": f"Direction : {departure.destination}",
            "network_label": network_label or "",
            "has_network": network_label is not None,
            "is_substitution": departure.is_substitution_service,
            "loading": board.journey_loading,
            "line_color": line_color,
            "disruptions": [self._disruption_detail(d) for d in matcher.for_departure(departure)],
            "equipment": self._equipment_data(board.journey, matcher),
            "stops": [self._stop_data(stop, line_color) for stop in board.journey],
        }

    def _equipment_data(self, stops: list[Stop], matcher: ReportMatcher) -> list[dict[str, Any]]:
        """Equipment blocks for the stations of a journey, one per stop area."""
        blocks: list[dict[str, Any]] = []
        seen: set[str] = set()
        for stop in stops:
            entry: StationEquipment | None = matcher.for_stop(stop)
            if entry is None or not entry.equipments or entry.stop_area_id in seen:
                continue
            seen.add(entry.stop_area_id)
            blocks.append(
                {
                    "station_name": stop.station_name,
                    "items": [
                        {
                            "name": equipment.name,
                            "icon": "↕" if equipment.embedded_type == EquipmentType.ELEVATOR else "⇗",
                            "available": bool(
                                equipment.availability and equipment.availability.is_available
                            ),
                            "status_label": self.formatter.availability_label(
                                equipment.availability
                            ),
                            "cause_label": (
                                f"Cause : {equipment.availability.cause}"
                                if equipment.availability and equipment.availability.cause
                                else ""
                            ),
                        }
                        for equipment in entry.equipments
                    ],
                }
            )
        return blocks

    def _stop_data(self, stop: Stop, line_color: str) -> dict[str, Any]:
        arrival_badge = format_delay_badge(stop.arrival_delay_minutes)
        departure_badge = format_delay_badge(stop.departure_delay_minutes)
        if stop.status == StopStatus.ORIGIN:
            dot_color = ORIGIN_COLOR
        elif stop.status == StopStatus.TERMINUS:
            dot_color = TERMINUS_COLOR
        else:
            dot_color = line_color
        return {
            "id": stop.id,
            "station_name": stop.station_name,
            "platform_label": self.formatter.platform_label(stop.platform) or "",
            "arrival": format_display_time(stop.arrival_time),
            "arrival_delay": arrival_badge or "",
            "arrival_delay_class": _delay_class(stop.arrival_delay_minutes),
            "departure": format_display_time(stop.departure_time),
            "departure_delay": departure_badge or "",
            "departure_delay_class": _delay_class(stop.departure_delay_minutes),
            "status": str(stop.status),
            "is_marked": stop.status != StopStatus.STANDARD,
            "dot_color": dot_color,
        }


def _delay_class(delay_minutes: int | None) -> str:
    if not delay_minutes:
        return ""
    return "late" if delay_minutes > 0 else "early"
