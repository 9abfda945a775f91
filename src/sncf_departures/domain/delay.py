"""Delay computation between realtime and scheduled instants."""

from datetime import datetime


def compute_delay_minutes(real: datetime | None, scheduled: datetime | None) -> int | None:
    """Return the signed delay in whole minutes (positive = late, negative = early).

    Returns None unless both arguments are datetimes.
    """
    if not isinstance(real, datetime) or not isinstance(scheduled, datetime):
        return None
    return round((real - scheduled).total_seconds() / 60)
