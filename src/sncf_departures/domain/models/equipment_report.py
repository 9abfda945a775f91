"""Station equipment (elevator/escalator) availability models."""

from dataclasses import dataclass, field
from enum import StrEnum

AVAILABLE_STATUS = "available"


class EquipmentType(StrEnum):
    """Kinds of accessibility equipment reported by the provider."""

    ELEVATOR = "elevator"
    ESCALATOR = "escalator"


@dataclass(frozen=True)
class Availability:
    """Current availability of a piece of equipment."""

    status: str
    effect: str | None = None
    cause: str | None = None

    @property
    def is_available(self) -> bool:
        return self.status == AVAILABLE_STATUS


@dataclass(frozen=True)
class Equipment:
    """A single elevator or escalator."""

    id: str | None
    name: str
    embedded_type: EquipmentType
    availability: Availability | None = None


@dataclass(frozen=True)
class StationEquipment:
    """Equipment entries reported for one stop area."""

    stop_area_id: str
    stop_area_name: str | None
    equipments: list[Equipment] = field(default_factory=list)
