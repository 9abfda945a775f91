"""Display formatters."""

from sncf_departures.adapters.web.formatters.departure_formatter import (
    PLACEHOLDER_TIME,
    TRAIN_GLYPH,
    DepartureFormatter,
    format_delay_badge,
    format_display_time,
)

__all__ = [
    "PLACEHOLDER_TIME",
    "TRAIN_GLYPH",
    "DepartureFormatter",
    "format_delay_badge",
    "format_display_time",
]
