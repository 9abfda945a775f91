"""Journey stop domain model."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class StopStatus(StrEnum):
    """Position of a stop within its journey."""

    ORIGIN = "origin"
    TERMINUS = "terminus"
    STANDARD = "standard"


@dataclass(frozen=True)
class Stop:
    """One row of a vehicle journey's stop-time table."""

    id: str
    station_name: str
    arrival_time: datetime
    departure_time: datetime
    base_arrival_time: datetime | None
    base_departure_time: datetime | None
    platform: str
    arrival_delay_minutes: int | None
    departure_delay_minutes: int | None
    status: StopStatus = StopStatus.STANDARD
    stop_area_id: str | None = None
