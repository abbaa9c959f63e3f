"""Command-line front end for Paris-region trip planning."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from idfm_transit.adapters.config import AppConfig
from idfm_transit.adapters.navitia_api import NavitiaError, NavitiaTransitRepository
from idfm_transit.application.route_summary import line_display_name
from idfm_transit.application.services import LineBrowserService, TripPlanningService
from idfm_transit.cli_formatters import (
    format_lines,
    format_routes,
    format_stations,
    to_jsonable,
)
from idfm_transit.domain.models import LineCategory
from idfm_transit.domain.ports import TransitRepository


def configure_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per query."""
    parser = argparse.ArgumentParser(
        prog="idfm-transit",
        description="Paris-region trip planner (Navitia / PRIM)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Autocomplete a station name
  idfm-transit search "Gare de Lyon"

  # Journeys between two stations (names or stop_area ids)
  idfm-transit journeys "Châtelet" "La Défense"

  # Metro and RER lines
  idfm-transit lines --category METRO

  # Stations served by a line
  idfm-transit stations line:IDFM:C01742

  # Stations around a coordinate
  idfm-transit nearby 48.8566 2.3522 --nearest
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")

    journeys_parser = subparsers.add_parser("journeys", help="Search journeys")
    journeys_parser.add_argument("origin", help="Origin station name or id")
    journeys_parser.add_argument("destination", help="Destination station name or id")

    lines_parser = subparsers.add_parser("lines", help="List metro and RER lines")
    lines_parser.add_argument(
        "--category",
        choices=[LineCategory.METRO.value, LineCategory.RER.value],
        help="Only list lines of this category",
    )

    stations_parser = subparsers.add_parser("stations", help="List stations of a line")
    stations_parser.add_argument("line_id", help="Line ID (e.g., line:IDFM:C01742)")

    nearby_parser = subparsers.add_parser("nearby", help="List stations around a coordinate")
    nearby_parser.add_argument("latitude", type=float, help="Latitude in decimal degrees")
    nearby_parser.add_argument("longitude", type=float, help="Longitude in decimal degrees")
    nearby_parser.add_argument(
        "--nearest", action="store_true", help="Only show the closest station"
    )

    for subparser in (
        search_parser,
        journeys_parser,
        lines_parser,
        stations_parser,
        nearby_parser,
    ):
        subparser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _print_json(value: Any) -> None:
    print(json.dumps(to_jsonable(value), indent=2, ensure_ascii=False))


async def run_command(args: argparse.Namespace, repository: TransitRepository) -> int:
    """Execute one parsed command and return the process exit code."""
    planner = TripPlanningService(repository)
    browser = LineBrowserService(repository)

    if args.command == "search":
        stations = await repository.search_stations(args.query)
        if args.json:
            _print_json(stations)
        elif not stations:
            print(f"No stations found for '{args.query}'", file=sys.stderr)
        else:
            print(f"\nFound {len(stations)} station(s):\n")
            print(format_stations(stations))
        return 0

    if args.command == "journeys":
        plan = await planner.plan_trip(args.origin, args.destination)
        if plan is None:
            print(
                f"Could not resolve '{args.origin}' or '{args.destination}' to a station",
                file=sys.stderr,
            )
            return 1
        if args.json:
            _print_json(plan)
        elif not plan.routes:
            print(f"No journeys found from {plan.origin.name} to {plan.destination.name}")
        else:
            print(f"\n{plan.origin.name} -> {plan.destination.name}\n")
            print(format_routes(plan.routes))
        return 0

    if args.command == "lines":
        category = LineCategory(args.category) if args.category else None
        lines = await browser.lines_by_category(category)
        if args.json:
            _print_json(lines)
        elif not lines:
            print("No lines available", file=sys.stderr)
        else:
            print(format_lines(lines))
        return 0

    if args.command == "stations":
        line, stations = await browser.browse_line(args.line_id)
        if args.json:
            _print_json({"line": line, "stations": stations})
        elif not stations:
            print(f"No stations found for line {args.line_id}", file=sys.stderr)
        else:
            if line is not None:
                print(f"\n{line_display_name(line)} - {line.name}\n")
            print(format_stations(stations))
        return 0

    if args.command == "nearby":
        try:
            if args.nearest:
                nearest = await planner.locate_nearest_station(args.latitude, args.longitude)
                stations = [nearest] if nearest else []
            else:
                stations = await planner.stations_near(args.latitude, args.longitude)
        except NavitiaError as e:
            details = e.to_error_details()
            print(
                f"Error: could not look up nearby stations: {details.describe()}",
                file=sys.stderr,
            )
            return 1
        if args.json:
            _print_json(stations)
        elif not stations:
            print("No stations found nearby")
        else:
            print(format_stations(stations))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig().load_overrides()
    configure_logging(config.log_level)

    timeout = aiohttp.ClientTimeout(total=config.navitia_api_timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        repository = NavitiaTransitRepository(session=session, config=config)
        return await run_command(args, repository)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
