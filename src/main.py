"""
Metro Planner - Main entry point.

Usage:
    python -m src.main "Piccadilly" "Bury"
    python -m src.main "Piccadilly" "Bury" --mode changes
    python -m src.main --list-stations
    python -m src.main --help
"""

import argparse
import sys
from pathlib import Path

from src.pathfinding import (
    DEFAULT_CHANGE_TIME,
    ConnectionsFileError,
    MetroGraph,
    SearchMode,
    find_route,
    format_route,
)
from src.pathfinding.loader import read_station_names
from src.pathfinding.stations import validate_journey

# Default data paths
DATA_DIR = Path(__file__).parent.parent / "data"
CONNECTIONS_FILE = DATA_DIR / "metrolink_times_linecolour.csv"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Metro Planner - Find the fastest route or the one with fewest line changes"
    )
    parser.add_argument("start", nargs="?", help="Start station name")
    parser.add_argument("goal", nargs="?", help="End station name")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SearchMode],
        default=SearchMode.TIME.value,
        help="Optimize for total time or number of line changes (default: time)",
    )
    parser.add_argument(
        "--change-time",
        type=float,
        default=DEFAULT_CHANGE_TIME,
        help=f"Minutes added for each line change (default: {DEFAULT_CHANGE_TIME})",
    )
    parser.add_argument(
        "--connections",
        type=Path,
        default=CONNECTIONS_FILE,
        help="Path to connections CSV",
    )
    parser.add_argument(
        "--list-stations",
        action="store_true",
        help="Print all station names and exit",
    )

    args = parser.parse_args(argv)

    if not args.list_stations and (not args.start or not args.goal):
        parser.error("start and goal stations are required")

    if args.list_stations:
        try:
            names = read_station_names(args.connections)
        except ConnectionsFileError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        for name in names:
            print(name)
        return 0

    if args.change_time < 0:
        print("Error: --change-time must not be negative", file=sys.stderr)
        return 1

    graph = MetroGraph()
    try:
        report = graph.load_connections(args.connections)
    except ConnectionsFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if report.skipped:
        lines = ", ".join(str(n) for n in report.skipped_lines)
        print(
            f"Warning: skipped {report.skipped} malformed row(s) in {args.connections} (lines {lines})",
            file=sys.stderr,
        )

    error = validate_journey(graph, args.start, args.goal)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    mode = SearchMode(args.mode)
    result = find_route(graph, args.start, args.goal, mode, args.change_time)
    print(format_route(result, mode))
    return 0


if __name__ == "__main__":
    sys.exit(main())
