"""Shared disruption and equipment report snapshot."""

from dataclasses import dataclass
from datetime import datetime

from sncf_departures.domain.models.disruption import Disruption
from sncf_departures.domain.models.equipment_report import StationEquipment


@dataclass
class ReportsState:
    """Latest successfully fetched reports; None until the first successful fetch."""

    disruptions: list[Disruption] | None = None
    equipment_reports: list[StationEquipment] | None = None
    last_update: datetime | None = None
