"""Report repository port."""

from typing import Protocol

from sncf_departures.domain.models.disruption import Disruption
from sncf_departures.domain.models.equipment_report import StationEquipment


class ReportRepository(Protocol):
    """Port for retrieving disruption and equipment reports."""

    async def get_line_reports(self) -> list[Disruption]:
        """Get current disruptions."""
        ...

    async def get_equipment_reports(self) -> list[StationEquipment]:
        """Get current elevator/escalator availability per stop area."""
        ...
