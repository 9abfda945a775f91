"""Association of disruption and equipment reports with departures and stops."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sncf_departures.domain.models.departure import Departure
    from sncf_departures.domain.models.disruption import Disruption
    from sncf_departures.domain.models.equipment_report import StationEquipment
    from sncf_departures.domain.models.stop import Stop


def disruptions_for_line(
    line_id: str | None, report_set: list[Disruption] | None
) -> list[Disruption] | None:
    """Return the disruptions impacting a line.

    An impacted object matches when its id equals the line id or contains it,
    since the provider may suffix line ids (e.g. with a direction).

    Returns None if either the line id or the report set is absent.
    """
    if not line_id or report_set is None:
        return None

    return [
        disruption
        for disruption in report_set
        if any(line_id in obj.id for obj in disruption.impacted_objects)
    ]


def equipment_for_station(
    station_id: str | None, equipment_reports: list[StationEquipment] | None
) -> StationEquipment | None:
    """Return the first equipment entry reported for a stop area, if any."""
    if not station_id or equipment_reports is None:
        return None

    return next(
        (entry for entry in equipment_reports if entry.stop_area_id == station_id),
        None,
    )


class ReportMatcher:
    """Matches the latest fetched reports against displayed departures and stops.

    Holds no state of its own beyond the snapshot it was built with; a new matcher
    is created for every render.
    """

    def __init__(
        self,
        disruptions: list[Disruption] | None,
        equipment_reports: list[StationEquipment] | None,
    ) -> None:
        self.disruptions = disruptions
        self.equipment_reports = equipment_reports

    def for_departure(self, departure: Departure) -> list[Disruption]:
        """Disruptions affecting the line of a departure (empty when none or unknown)."""
        return disruptions_for_line(departure.line_id, self.disruptions) or []

    def for_stop(self, stop: Stop) -> StationEquipment | None:
        """Equipment status of the stop area a journey stop belongs to."""
        return equipment_for_station(stop.stop_area_id, self.equipment_reports)
