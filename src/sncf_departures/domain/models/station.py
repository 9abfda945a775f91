"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """Geographic position of a station."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Station:
    """Represents a searchable stop area."""

    id: str
    name: str
    coordinate: Coordinate | None = None
