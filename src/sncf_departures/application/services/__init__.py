"""Application services."""

from sncf_departures.application.services.report_matcher import (
    ReportMatcher,
    disruptions_for_line,
    equipment_for_station,
)

__all__ = ["ReportMatcher", "disruptions_for_line", "equipment_for_station"]
