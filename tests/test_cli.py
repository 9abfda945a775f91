"""Tests for the command line helper."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from sncf_departures.cli import build_parser, run_command, to_json
from sncf_departures.domain.models import Station
from tests.factories import make_departure, make_disruption


def _client(**results) -> MagicMock:
    client = MagicMock()
    client.search_stations = AsyncMock(return_value=results.get("stations", []))
    client.get_departures = AsyncMock(return_value=results.get("departures", []))
    client.get_journey_details = AsyncMock(return_value=results.get("stops", []))
    client.get_line_reports = AsyncMock(return_value=results.get("disruptions", []))
    return client


def test_parser_reads_journey_arguments() -> None:
    """Given journey arguments, when parsing, then the index is an integer."""
    args = build_parser().parse_args(["journey", "stop_area:SNCF:87686006", "2", "--json"])

    assert args.command == "journey"
    assert args.stop_area_id == "stop_area:SNCF:87686006"
    assert args.index == 2
    assert args.json is True


def test_to_json_serializes_datetimes() -> None:
    """Given a departure, when serializing, then datetimes become ISO strings."""
    data = json.loads(to_json([make_departure()]))

    assert data[0]["scheduled_time"] == "2024-03-15 09:00:00"
    assert data[0]["route"]["code"] == "TGV"


@pytest.mark.asyncio
async def test_search_prints_stations(capsys: pytest.CaptureFixture[str]) -> None:
    """Given matching stations, when searching, then names and ids are printed."""
    client = _client(stations=[Station(id="stop_area:SNCF:87686006", name="Paris Gare de Lyon")])
    args = build_parser().parse_args(["search", "Paris"])

    assert await run_command(args, client) == 0

    output = capsys.readouterr().out
    assert "Paris Gare de Lyon" in output
    assert "stop_area:SNCF:87686006" in output


@pytest.mark.asyncio
async def test_search_without_results_fails() -> None:
    """Given no stations, when searching, then the exit code is 1."""
    args = build_parser().parse_args(["search", "Nowhere"])

    assert await run_command(args, _client()) == 1


@pytest.mark.asyncio
async def test_journey_with_bad_index_fails() -> None:
    """Given a board of one departure, when asking for position 3, then no journey is fetched."""
    client = _client(departures=[make_departure()])
    args = build_parser().parse_args(["journey", "stop_area:A", "3"])

    assert await run_command(args, client) == 1
    client.get_journey_details.assert_not_awaited()


@pytest.mark.asyncio
async def test_disruptions_filtered_by_line(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a line filter, when listing disruptions, then only that line's are printed."""
    client = _client(
        disruptions=[
            make_disruption("d1", "line:L1:forward", text="Travaux sur L1"),
            make_disruption("d2", "line:L2", text="Grève sur L2"),
        ]
    )
    args = build_parser().parse_args(["disruptions", "--line", "line:L1"])

    assert await run_command(args, client) == 0

    output = capsys.readouterr().out
    assert "Travaux sur L1" in output
    assert "Grève sur L2" not in output
