"""Parser for decoded SNCF vehicle journeys."""

import logging
from datetime import datetime, timedelta

from sncf_departures.adapters.sncf_api.datetime_parser import parse_clock_time
from sncf_departures.adapters.sncf_api.departure_parser import extract_platform
from sncf_departures.adapters.sncf_api.payloads import StopTimeRecord
from sncf_departures.domain.delay import compute_delay_minutes
from sncf_departures.domain.models.stop import Stop, StopStatus

logger = logging.getLogger(__name__)

ROLLOVER_WINDOW = timedelta(hours=12)


def align_to_reference(instant: datetime | None, reference: datetime | None) -> datetime | None:
    """Shift an instant by one day so it lies within 12 hours of its reference.

    Realtime stop times are placed next to their planned counterpart: a train
    planned at 23:58 and running at 00:03 departs on the following day.
    """
    if instant is None or reference is None:
        return instant
    if instant < reference - ROLLOVER_WINDOW:
        return instant + timedelta(days=1)
    if instant > reference + ROLLOVER_WINDOW:
        return instant - timedelta(days=1)
    return instant


class _ClockCursor:
    """Places successive HHMMSS times on the calendar, rolling over at midnight."""

    def __init__(self, base_date: datetime) -> None:
        self.base_date = base_date
        self.last: datetime | None = None

    def place(self, value: str | None, reference: datetime | None = None) -> datetime | None:
        result = align_to_reference(
            parse_clock_time(value, self.base_date, not_before=self.last), reference
        )
        if result is not None:
            self.last = result
        return result

    def place_pair(
        self,
        arrival: str | None,
        departure: str | None,
        references: tuple[datetime | None, datetime | None] = (None, None),
    ) -> tuple[datetime | None, datetime | None]:
        """Arrival and departure of one row, each falling back to the other."""
        arrival_time = self.place(arrival, references[0])
        departure_time = self.place(departure, references[1])
        return arrival_time or departure_time, departure_time or arrival_time


class JourneyParser:
    """Maps stop-time rows into Stop objects."""

    @staticmethod
    def parse_stops(
        stop_times: list[StopTimeRecord], base_date: datetime, id_prefix: str
    ) -> list[Stop]:
        """Parse the stop times of one vehicle journey.

        Args:
            stop_times: Stop-time rows in journey order.
            base_date: Midnight of the day the journey runs on.
            id_prefix: Prefix of the synthesized stop ids (the train number).

        Returns:
            Stops sorted by arrival time. Rows without any time are dropped.
        """
        realtime = _ClockCursor(base_date)
        planned = _ClockCursor(base_date)
        stops: list[Stop] = []

        for index, row in enumerate(stop_times):
            base_arrival_time, base_departure_time = planned.place_pair(
                row.base_arrival_time, row.base_departure_time
            )
            arrival_time, departure_time = realtime.place_pair(
                row.arrival_time,
                row.departure_time,
                references=(base_arrival_time, base_departure_time),
            )

            if arrival_time is None or departure_time is None:
                logger.debug(f"Dropping stop {index} of {id_prefix}: no arrival or departure time")
                continue

            stop_point = row.stop_point
            stop_area = stop_point.stop_area
            stops.append(
                Stop(
                    id=f"{id_prefix}_{index}",
                    station_name=stop_point.label or stop_point.name or "",
                    arrival_time=arrival_time,
                    departure_time=departure_time,
                    base_arrival_time=base_arrival_time,
                    base_departure_time=base_departure_time,
                    platform=extract_platform(stop_point),
                    arrival_delay_minutes=compute_delay_minutes(arrival_time, base_arrival_time),
                    departure_delay_minutes=compute_delay_minutes(
                        departure_time, base_departure_time
                    ),
                    status=JourneyParser._stop_status(row),
                    stop_area_id=stop_area.id if stop_area else None,
                )
            )

        return sorted(stops, key=lambda stop: stop.arrival_time)

    @staticmethod
    def _stop_status(row: StopTimeRecord) -> StopStatus:
        """Terminus when nobody may board, origin when nobody may alight."""
        if row.pickup_allowed is False:
            return StopStatus.TERMINUS
        if row.drop_off_allowed is False:
            return StopStatus.ORIGIN
        return StopStatus.STANDARD
