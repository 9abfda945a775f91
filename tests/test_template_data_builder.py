"""Tests for the board template data builder."""

from datetime import datetime

from sncf_departures.adapters.web.builders import TemplateDataBuilder
from sncf_departures.adapters.web.state import BoardState, ReportsState
from sncf_departures.domain.models import (
    Availability,
    DisruptionMessage,
    Equipment,
    EquipmentType,
    MessageChannel,
    Station,
    StationEquipment,
    Stop,
    StopStatus,
)
from tests.factories import make_departure, make_disruption

LINE_ID = "line:SNCF:FR:Line::TGV:"


def _stop(index: int, status: StopStatus, delay: int | None = None) -> Stop:
    moment = datetime(2024, 3, 15, 9 + index, 0)
    return Stop(
        id=f"TGV 6603_{index}",
        station_name=f"Gare {index}",
        arrival_time=moment,
        departure_time=moment,
        base_arrival_time=moment,
        base_departure_time=moment,
        platform="B",
        arrival_delay_minutes=delay,
        departure_delay_minutes=delay,
        status=status,
        stop_area_id=f"stop_area:{index}",
    )


class TestBoard:
    def test_empty_board(self, config) -> None:
        """Given a fresh board, when building, then nothing is shown and reports read Jamais."""
        data = TemplateDataBuilder(config).build(BoardState(), ReportsState())

        assert data["title"] == config.title
        assert data["has_stations"] is False
        assert data["has_departures"] is False
        assert data["has_error"] is False
        assert data["journey_open"] is False
        assert data["journey"] == {}
        assert data["reports_update_time"] == "Jamais"

    def test_suggestions_and_error(self, config) -> None:
        """Given suggestions and an error, when building, then both are exposed."""
        board = BoardState(
            search_query="Par",
            stations=[Station(id="stop_area:A", name="Paris Nord")],
            error="Erreur lors de la recherche des gares.",
        )

        data = TemplateDataBuilder(config).build(board, ReportsState())

        assert data["search_query"] == "Par"
        assert data["stations"] == [{"id": "stop_area:A", "name": "Paris Nord"}]
        assert data["has_error"] is True
        assert data["error"] == "Erreur lors de la recherche des gares."

    def test_departure_row(self, config) -> None:
        """Given a late departure with a line disruption, when building, then the row shows both."""
        board = BoardState(
            selected_station=Station(id="stop_area:A", name="Paris Gare de Lyon"),
            departures=[make_departure(0, delay=7)],
        )
        reports = ReportsState(
            disruptions=[make_disruption("d1", LINE_ID, text="Travaux"), make_disruption("d2")]
        )

        data = TemplateDataBuilder(config).build(board, reports)

        row = data["departures"][0]
        assert data["selected_station_name"] == "Paris Gare de Lyon"
        assert row["time"] == "09:07"
        assert row["time_class"] == "late"
        assert row["delay_label"] == "Retard: 7 min"
        assert row["platform_label"] == "Voie K"
        assert row["network_label"] == "Réseau SNCF"
        assert [d["id"] for d in row["disruptions"]] == ["d1"]
        assert row["disruptions"][0]["text"] == "Travaux"
        assert row["disruptions"][0]["color"] == "#EF662F"

    def test_disruption_without_message_uses_default_text(self, config) -> None:
        """Given a disruption without message, when building, then a default text is shown."""
        board = BoardState(departures=[make_departure(0)])
        reports = ReportsState(disruptions=[make_disruption("d1", LINE_ID)])

        row = TemplateDataBuilder(config).build(board, reports)["departures"][0]

        assert row["disruptions"][0]["text"] == "Perturbations en cours"


class TestJourney:
    def test_stops_are_coloured_by_status(self, config) -> None:
        """Given origin, standard and terminus stops, when building, then dots are coloured."""
        departure = make_departure(0)
        board = BoardState(
            departures=[departure],
            selected_departure=departure,
            journey=[
                _stop(0, StopStatus.ORIGIN),
                _stop(1, StopStatus.STANDARD, delay=3),
                _stop(2, StopStatus.TERMINUS),
            ],
        )

        journey = TemplateDataBuilder(config).build(board, ReportsState())["journey"]

        assert journey["direction_label"] == "Direction : Marseille Saint-Charles"
        assert [s["dot_color"] for s in journey["stops"]] == ["#22C55E", "#9B2743", "#EF4444"]
        assert journey["stops"][1]["arrival_delay"] == "+3 min"
        assert journey["stops"][1]["arrival_delay_class"] == "late"
        assert journey["stops"][0]["arrival_delay"] == ""

    def test_journey_of_uncoloured_line_uses_default_colour(self, config) -> None:
        """Given a line without colour, when building, then standard stops use the default blue."""
        departure = make_departure(0, route=None)
        board = BoardState(selected_departure=departure, journey=[_stop(1, StopStatus.STANDARD)])

        journey = TemplateDataBuilder(config).build(board, ReportsState())["journey"]

        assert journey["stops"][0]["dot_color"] == "#3B82F6"

    def test_equipment_and_markdown_channels(self, config) -> None:
        """Given reports for the journey, when building, then equipment and channels are shown."""
        departure = make_departure(0)
        disruption = make_disruption("d1", LINE_ID)
        disruption.messages.extend(
            [
                DisruptionMessage(
                    text="Trafic perturbé",
                    channel=MessageChannel(content_type="text/markdown", types=["web", "mobile"]),
                ),
                DisruptionMessage(
                    text="<p>Trafic perturbé</p>",
                    channel=MessageChannel(content_type="text/html", types=["web"]),
                ),
            ]
        )
        equipment = StationEquipment(
            stop_area_id="stop_area:1",
            stop_area_name="Gare 1",
            equipments=[
                Equipment(
                    id="e1",
                    name="Ascenseur quai A",
                    embedded_type=EquipmentType.ELEVATOR,
                    availability=Availability(status="unavailable", cause="Maintenance"),
                )
            ],
        )
        board = BoardState(
            selected_departure=departure,
            journey=[_stop(1, StopStatus.STANDARD), _stop(1, StopStatus.STANDARD)],
        )

        journey = TemplateDataBuilder(config).build(
            board, ReportsState(disruptions=[disruption], equipment_reports=[equipment])
        )["journey"]

        messages = journey["disruptions"][0]["messages"]
        assert messages[0]["channel_types"] == "web, mobile"
        assert messages[1]["channel_types"] == ""
        assert len(journey["equipment"]) == 1
        item = journey["equipment"][0]["items"][0]
        assert item["status_label"] == "Non disponible"
        assert item["cause_label"] == "Cause : Maintenance"
        assert item["available"] is False
