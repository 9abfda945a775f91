"""Parser for decoded disruption and equipment reports."""

import logging

from sncf_departures.adapters.sncf_api.datetime_parser import parse_compact_datetime
from sncf_departures.adapters.sncf_api.payloads import (
    AvailabilityRecord,
    DisruptionRecord,
    EquipmentDetailRecord,
    EquipmentReportRecord,
)
from sncf_departures.domain.models.disruption import (
    ApplicationPeriod,
    Disruption,
    DisruptionMessage,
    ImpactedObject,
    MessageChannel,
    Severity,
)
from sncf_departures.domain.models.equipment_report import (
    Availability,
    Equipment,
    EquipmentType,
    StationEquipment,
)

logger = logging.getLogger(__name__)


class ReportParser:
    """Flattens report collections into domain objects."""

    @staticmethod
    def parse_disruptions(records: list[DisruptionRecord]) -> list[Disruption]:
        """Parse disruptions, keeping provider order."""
        return [ReportParser._parse_disruption(record) for record in records]

    @staticmethod
    def _parse_disruption(record: DisruptionRecord) -> Disruption:
        severity = record.severity
        return Disruption(
            id=record.id,
            status=record.status,
            severity=Severity(
                name=severity.name if severity else None,
                effect=severity.effect if severity else None,
                color=severity.color if severity else None,
            ),
            messages=[
                DisruptionMessage(
                    text=message.text,
                    channel=(
                        MessageChannel(
                            name=message.channel.name,
                            content_type=message.channel.content_type,
                            types=list(message.channel.types),
                        )
                        if message.channel
                        else None
                    ),
                )
                for message in record.messages
            ],
            impacted_objects=[
                ImpactedObject(
                    id=impacted.pt_object.id,
                    name=impacted.pt_object.name,
                    type=impacted.pt_object.embedded_type,
                )
                for impacted in record.impacted_objects
                if impacted.pt_object is not None
            ],
            application_periods=[
                ApplicationPeriod(
                    begin=parse_compact_datetime(period.begin),
                    end=parse_compact_datetime(period.end),
                )
                for period in record.application_periods
            ],
        )

    @staticmethod
    def parse_equipment_reports(records: list[EquipmentReportRecord]) -> list[StationEquipment]:
        """Flatten per-line reports into one entry per reported stop area.

        Only elevators and escalators are kept.
        """
        stations: list[StationEquipment] = []
        for report in records:
            for station in report.stop_area_equipments:
                stations.append(
                    StationEquipment(
                        stop_area_id=station.stop_area.id,
                        stop_area_name=station.stop_area.name,
                        equipments=[
                            equipment
                            for detail in station.equipment_details
                            if (equipment := ReportParser._parse_equipment(detail)) is not None
                        ],
                    )
                )
        return stations

    @staticmethod
    def _parse_equipment(detail: EquipmentDetailRecord) -> Equipment | None:
        try:
            embedded_type = EquipmentType(detail.embedded_type)
        except ValueError:
            logger.debug(f"Ignoring equipment {detail.name!r} of type {detail.embedded_type!r}")
            return None

        return Equipment(
            id=detail.id,
            name=detail.name,
            embedded_type=embedded_type,
            availability=ReportParser._parse_availability(detail.current_availability),
        )

    @staticmethod
    def _parse_availability(record: AvailabilityRecord | None) -> Availability | None:
        if record is None:
            return None
        return Availability(
            status=record.status,
            effect=record.effect.label if record.effect else None,
            cause=record.cause.label if record.cause else None,
        )
