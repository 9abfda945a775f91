"""Parsing of the compact date/time strings used on the Navitia wire.

Absolute instants are sent as ``YYYYMMDDTHHMMSS`` and stop times as ``HHMMSS``.
Both are interpreted as local wall-clock time; no timezone conversion happens.
"""

from datetime import datetime, timedelta

COMPACT_DATETIME_FORMAT = "%Y%m%dT%H%M%S"
COMPACT_DATETIME_LENGTH = 15
CLOCK_TIME_LENGTH = 6


def parse_compact_datetime(value: str | None) -> datetime | None:
    """Parse a ``YYYYMMDDTHHMMSS`` string into a naive local datetime.

    Returns None for empty or malformed input, never raises.
    """
    if not value or len(value) != COMPACT_DATETIME_LENGTH or value[8] != "T":
        return None

    digits = value[:8] + value[9:]
    if not digits.isdigit():
        return None

    try:
        return datetime(
            int(value[0:4]),
            int(value[4:6]),
            int(value[6:8]),
            int(value[9:11]),
            int(value[11:13]),
            int(value[13:15]),
        )
    except ValueError:
        return None


def format_compact_datetime(value: datetime) -> str:
    """Format a datetime as ``YYYYMMDDTHHMMSS`` for request parameters."""
    return value.strftime(COMPACT_DATETIME_FORMAT)


def parse_clock_time(
    value: str | None,
    base_date: datetime | None,
    not_before: datetime | None = None,
) -> datetime | None:
    """Place a ``HHMMSS`` time of day on the calendar day of ``base_date``.

    When ``not_before`` is given and the result lies before it, the result is moved
    to the following day. This keeps the stop times of services running past
    midnight in chronological order.

    Returns None if either input is missing or the time string is malformed.
    """
    if not value or base_date is None:
        return None
    if len(value) != CLOCK_TIME_LENGTH or not value.isdigit():
        return None

    try:
        result = base_date.replace(
            hour=int(value[0:2]),
            minute=int(value[2:4]),
            second=int(value[4:6]),
            microsecond=0,
        )
    except ValueError:
        return None

    if not_before is not None and result < not_before:
        result += timedelta(days=1)
    return result


def start_of_day(value: datetime) -> datetime:
    """Truncate a datetime to midnight of the same day."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)
