"""Departure domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from sncf_departures.domain.models.line_info import LineInfo

SUBSTITUTION_SERVICE_TYPE = "additional service"


@dataclass(frozen=True)
class Departure:
    """Represents a single departure from a station.

    The id is synthesized from the headsign and the list position, so it is only
    stable within one fetched list.
    """

    id: str
    train_number: str
    destination: str
    platform: str
    scheduled_time: datetime | None
    real_time: datetime | None
    delay_minutes: int | None
    service_type: str
    network_label: str
    route: LineInfo | None = None
    stop_area_id: str | None = None
    vehicle_journey_id: str | None = None
    disruption_refs: list[str] = field(default_factory=list)

    @property
    def line_id(self) -> str | None:
        """Identifier used to look up disruptions for this departure."""
        return self.route.id if self.route else None

    @property
    def is_substitution_service(self) -> bool:
        """Whether the departure is a replacement service (usually a coach)."""
        return self.service_type.lower() == SUBSTITUTION_SERVICE_TYPE
