#!/usr/bin/env python3
"""Command-line interface for the metro pathfinder.

Usage:
    metro-pathfinder "Versova" "Cuffe Parade"
    metro-pathfinder "Dahisar" "Ghatkopar" --via "Andheri (West)"
    metro-pathfinder --list-stations aqua
"""

import argparse
import logging
import sys
from typing import Optional

from .config import LOG_LEVEL
from .exceptions import RoutingError
from .planner import plan_trip
from .stations import STATIONS, find_station, find_stations_by_line, station_label


def print_stations(line: Optional[str] = None):
    """Print station labels and ids, optionally for one line."""
    stations = find_stations_by_line(line) if line else list(STATIONS.values())
    for station in sorted(stations, key=lambda s: s.name):
        print(f"  {station_label(station):40} {station.id}")


def resolve(name: str) -> str:
    station = find_station(name)
    if not station:
        raise ValueError(f"Could not find station: {name}. Try being more specific.")
    return station.id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metro-pathfinder",
        description="Find the shortest metro route between stations.",
    )
    parser.add_argument("start", nargs="?", help="Start station name or id")
    parser.add_argument("end", nargs="?", help="End station name or id")
    parser.add_argument(
        "--via", action="append", default=[], metavar="STATION",
        help="Intermediate station (repeat for several, in order)",
    )
    parser.add_argument(
        "--list-stations", nargs="?", const="", metavar="LINE",
        help="List stations (optionally only those on LINE) and exit",
    )
    return parser


def main(argv=None) -> int:
    """Run the CLI."""
    logging.basicConfig(level=LOG_LEVEL)
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_stations is not None:
        print_stations(args.list_stations or None)
        return 0

    if not args.start or not args.end:
        parser.error("start and end stations are required")

    try:
        start = resolve(args.start)
        end = resolve(args.end)
        vias = [resolve(name) for name in args.via]
        plan = plan_trip(start, end, vias)
    except (ValueError, RoutingError) as e:
        print(f"[Error: {e}]")
        return 1

    print(plan)
    return 0


if __name__ == "__main__":
    sys.exit(main())
