"""Pydantic models describing the subset of Navitia responses the app reads.

Decoding a response through these models is the only place raw JSON is touched:
either the whole payload validates and typed records come out, or a DecodeError
is raised. Parsers downstream never see partially shaped dictionaries.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sncf_departures.domain.errors import DecodeError


class NavitiaModel(BaseModel):
    """Base for all payload records: unknown fields are ignored, records are immutable."""

    model_config = ConfigDict(extra="ignore", frozen=True)


# --- Shared objects -------------------------------------------------------------


class Coord(NavitiaModel):
    lat: float
    lon: float


class Link(NavitiaModel):
    type: str
    id: str | None = None


class StopAreaRef(NavitiaModel):
    id: str
    name: str | None = None
    coord: Coord | None = None


class StopPointRecord(NavitiaModel):
    id: str | None = None
    name: str | None = None
    label: str | None = None
    platform_code: str | None = None
    platform: str | None = None
    stop_area: StopAreaRef | None = None


class LineRecord(NavitiaModel):
    id: str | None = None
    name: str | None = None
    code: str | None = None
    color: str | None = None
    text_color: str | None = None


class RouteRecord(NavitiaModel):
    id: str | None = None
    name: str | None = None
    code: str | None = None
    color: str | None = None
    line: LineRecord | None = None


# --- /places --------------------------------------------------------------------


class PlaceRecord(NavitiaModel):
    id: str
    name: str
    embedded_type: str
    stop_area: StopAreaRef | None = None


class PlacesResponse(NavitiaModel):
    places: list[PlaceRecord] = Field(default_factory=list)


# --- /stop_areas/{id}/departures ------------------------------------------------


class DisplayInformations(NavitiaModel):
    headsign: str
    direction: str = ""
    commercial_mode: str = ""
    network: str = ""
    links: list[Link] = Field(default_factory=list)


class StopDateTime(NavitiaModel):
    departure_date_time: str | None = None
    base_departure_date_time: str | None = None


class DepartureRecord(NavitiaModel):
    display_informations: DisplayInformations
    stop_date_time: StopDateTime
    stop_point: StopPointRecord
    route: RouteRecord | None = None
    links: list[Link] = Field(default_factory=list)


class DeparturesResponse(NavitiaModel):
    departures: list[DepartureRecord] = Field(default_factory=list)


# --- /vehicle_journeys/{id} -----------------------------------------------------


class StopTimeRecord(NavitiaModel):
    arrival_time: str | None = None
    departure_time: str | None = None
    base_arrival_time: str | None = None
    base_departure_time: str | None = None
    pickup_allowed: bool | None = None
    drop_off_allowed: bool | None = None
    stop_point: StopPointRecord


class VehicleJourneyRecord(NavitiaModel):
    id: str
    name: str | None = None
    stop_times: list[StopTimeRecord] = Field(default_factory=list)


class VehicleJourneysResponse(NavitiaModel):
    vehicle_journeys: list[VehicleJourneyRecord] = Field(default_factory=list)


# --- /disruptions ---------------------------------------------------------------


class SeverityRecord(NavitiaModel):
    name: str | None = None
    effect: str | None = None
    color: str | None = None


class ChannelRecord(NavitiaModel):
    name: str | None = None
    content_type: str | None = None
    types: list[str] = Field(default_factory=list)


class MessageRecord(NavitiaModel):
    text: str
    channel: ChannelRecord | None = None


class PtObjectRecord(NavitiaModel):
    id: str
    name: str | None = None
    embedded_type: str | None = None


class ImpactedObjectRecord(NavitiaModel):
    pt_object: PtObjectRecord | None = None


class PeriodRecord(NavitiaModel):
    begin: str | None = None
    end: str | None = None


class DisruptionRecord(NavitiaModel):
    id: str
    status: str | None = None
    severity: SeverityRecord | None = None
    messages: list[MessageRecord] = Field(default_factory=list)
    impacted_objects: list[ImpactedObjectRecord] = Field(default_factory=list)
    application_periods: list[PeriodRecord] = Field(default_factory=list)


class DisruptionsResponse(NavitiaModel):
    disruptions: list[DisruptionRecord] = Field(default_factory=list)


# --- /equipment_reports ---------------------------------------------------------


class LabelRecord(NavitiaModel):
    label: str | None = None


class AvailabilityRecord(NavitiaModel):
    status: str
    effect: LabelRecord | None = None
    cause: LabelRecord | None = None


class EquipmentDetailRecord(NavitiaModel):
    id: str | None = None
    name: str
    embedded_type: str
    current_availability: AvailabilityRecord | None = None


class StopAreaEquipmentRecord(NavitiaModel):
    stop_area: StopAreaRef
    equipment_details: list[EquipmentDetailRecord] = Field(default_factory=list)


class EquipmentReportRecord(NavitiaModel):
    stop_area_equipments: list[StopAreaEquipmentRecord] = Field(default_factory=list)


class EquipmentReportsResponse(NavitiaModel):
    equipment_reports: list[EquipmentReportRecord] = Field(default_factory=list)


ResponseT = TypeVar("ResponseT", bound=NavitiaModel)


def decode(model: type[ResponseT], payload: Any) -> ResponseT:
    """Validate a decoded JSON payload against a response model.

    Raises:
        DecodeError: If the payload does not match the model.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(
            f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)"
        ) from e
