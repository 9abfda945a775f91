"""Command line helpers for querying the SNCF API from a terminal."""

import argparse
import asyncio
import dataclasses
import json
import sys
from typing import Any

import aiohttp

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.sncf_api import SncfTransitClient
from sncf_departures.adapters.web.formatters import format_delay_badge, format_display_time
from sncf_departures.application.services import disruptions_for_line
from sncf_departures.domain.errors import TransitDataError


def to_json(items: list[Any]) -> str:
    """Serialize domain dataclasses to JSON, datetimes as ISO strings."""
    return json.dumps(
        [dataclasses.asdict(item) for item in items],
        indent=2,
        ensure_ascii=False,
        default=str,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="SNCF departures command line helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations
  sncf-departures-cli search "Paris Gare de Lyon"

  # Show the departure board of a stop area
  sncf-departures-cli departures stop_area:SNCF:87686006

  # Show the stops of the third departure on that board
  sncf-departures-cli journey stop_area:SNCF:87686006 2

  # Show current disruptions, optionally only for one line
  sncf-departures-cli disruptions --line line:SNCF:FR:Line::ABC
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")

    departures_parser = subparsers.add_parser("departures", help="Show upcoming departures")
    departures_parser.add_argument("stop_area_id", help="Stop area ID")

    journey_parser = subparsers.add_parser("journey", help="Show the stops of a departure")
    journey_parser.add_argument("stop_area_id", help="Stop area ID")
    journey_parser.add_argument("index", type=int, help="Position of the departure on the board")

    disruptions_parser = subparsers.add_parser("disruptions", help="Show current disruptions")
    disruptions_parser.add_argument("--line", help="Only disruptions impacting this line ID")

    for sub in (search_parser, departures_parser, journey_parser, disruptions_parser):
        sub.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def run_command(args: argparse.Namespace, client: SncfTransitClient) -> int:
    """Execute a parsed command against a transit client and return the exit code."""
    if args.command == "search":
        stations = await client.search_stations(args.query)
        if args.json:
            print(to_json(stations))
            return 0
        if not stations:
            print(f"No stations found for '{args.query}'", file=sys.stderr)
            return 1
        print(f"\nFound {len(stations)} station(s):\n")
        for station in stations:
            print(f"  {station.name}")
            print(f"    ID: {station.id}")
        return 0

    if args.command == "departures":
        departures = await client.get_departures(args.stop_area_id)
        if args.json:
            print(to_json(departures))
            return 0
        for index, departure in enumerate(departures):
            delay = f" (+{departure.delay_minutes} min)" if departure.delay_minutes else ""
            print(
                f"  [{index}] {format_display_time(departure.real_time)}{delay}  "
                f"{departure.train_number:<12} {departure.destination}  Voie {departure.platform}"
            )
        return 0

    if args.command == "journey":
        departures = await client.get_departures(args.stop_area_id)
        if not 0 <= args.index < len(departures):
            print(f"No departure at position {args.index}", file=sys.stderr)
            return 1
        stops = await client.get_journey_details(departures[args.index])
        if args.json:
            print(to_json(stops))
            return 0
        for stop in stops:
            badge = format_delay_badge(stop.departure_delay_minutes) or ""
            print(
                f"  {format_display_time(stop.arrival_time)} → "
                f"{format_display_time(stop.departure_time)} {badge:>7}  {stop.station_name}"
            )
        return 0

    if args.command == "disruptions":
        disruptions = await client.get_line_reports()
        if args.line:
            disruptions = disruptions_for_line(args.line, disruptions) or []
        if args.json:
            print(to_json(disruptions))
            return 0
        for disruption in disruptions:
            print(f"  [{disruption.severity.name or '?'}] {disruption.headline or disruption.id}")
        return 0

    return 1


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    async with aiohttp.ClientSession() as session:
        client = SncfTransitClient.from_config(session, config)
        try:
            return await run_command(args, client)
        except (TransitDataError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
