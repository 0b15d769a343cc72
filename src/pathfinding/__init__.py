"""Pathfinding module for planning metro journeys."""

from .dijkstra import (
    DEFAULT_CHANGE_TIME,
    RouteResult,
    SearchMode,
    StationNode,
    find_route,
    least_changes,
    shortest_time,
)
from .graph import Edge, MetroGraph
from .itinerary import format_route, parse_itinerary
from .loader import Connection, ConnectionsFileError, LoadReport, read_connections

__all__ = [
    "MetroGraph",
    "Edge",
    "Connection",
    "ConnectionsFileError",
    "LoadReport",
    "read_connections",
    "StationNode",
    "RouteResult",
    "SearchMode",
    "DEFAULT_CHANGE_TIME",
    "shortest_time",
    "least_changes",
    "find_route",
    "format_route",
    "parse_itinerary",
]
