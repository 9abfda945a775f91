"""Formatting of departures, stops and reports for display."""

from datetime import datetime

from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.equipment_report import Availability
from sncf_departures.domain.models.line_info import LineInfo

PLACEHOLDER_TIME = "--:--"
SUBSTITUTION_LABEL = "Service de substitution"
DEFAULT_DISRUPTION_TEXT = "Perturbations en cours"
DEFAULT_DISRUPTION_COLOR = "#f97316"
TRAIN_GLYPH = "🚆"


def format_display_time(instant: datetime | None) -> str:
    """Format an instant as HH:MM, or a placeholder when absent."""
    if not isinstance(instant, datetime):
        return PLACEHOLDER_TIME
    return instant.strftime("%H:%M")


def format_delay_badge(delay_minutes: int | None) -> str | None:
    """Signed delay badge such as '+7 min' or '-2 min'; None when on time or unknown."""
    if not delay_minutes:
        return None
    return f"+{delay_minutes} min" if delay_minutes > 0 else f"{delay_minutes} min"


def _hex_color(value: str | None) -> str | None:
    if not value:
        return None
    return value if value.startswith("#") else f"#{value}"


def _is_numeric_zero(value: str) -> bool:
    try:
        return float(value) == 0
    except ValueError:
        return False


class DepartureFormatter:
    """Turns domain objects into the strings shown on the board."""

    def format_time(self, departure: Departure) -> str:
        return format_display_time(departure.real_time)

    def is_late(self, departure: Departure) -> bool:
        return departure.delay_minutes is not None and departure.delay_minutes > 0

    def delay_label(self, departure: Departure) -> str | None:
        """'Retard: N min' for late departures."""
        if not self.is_late(departure):
            return None
        return f"Retard: {departure.delay_minutes} min"

    def platform_label(self, platform: str | None) -> str | None:
        return f"Voie {platform}" if platform else None

    def network_label(self, departure: Departure) -> str | None:
        """'Réseau X', hidden when the network is empty or the placeholder "0"."""
        network = departure.network_label.strip()
        if not network or _is_numeric_zero(network):
            return None
        return f"Réseau {network}"

    def line_badge(self, route: LineInfo | None, is_substitution: bool = False) -> dict[str, str]:
        """Text and colours of a line badge.

        The text is the line name, or its code when unnamed. Without either the
        badge falls back to a train glyph on a neutral background.
        """
        text = SUBSTITUTION_LABEL if is_substitution else (route.label if route else None)
        if not text:
            return {
                "text": TRAIN_GLYPH,
                "background": "#E5E7EB",
                "color": "#4B5563",
                "border": "none",
            }

        background = _hex_color(route.color if route else None)
        return {
            "text": text,
            "background": background or "#FFFFFF",
            "color": _hex_color(route.text_color if route else None) or "#000000",
            "border": "none" if background else "1px solid #E5E7EB",
        }

    def availability_label(self, availability: Availability | None) -> str:
        if availability is not None and availability.is_available:
            return "Disponible"
        return "Non disponible"

    def format_update_time(self, update_time: datetime | None) -> str:
        """Format last report update time."""
        if not update_time:
            return "Jamais"
        return update_time.strftime("%H:%M:%S")
