"""Metro graph construction from line-coloured connection data."""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import networkx as nx

from .loader import Connection, LoadReport, read_connections


@dataclass(frozen=True)
class Edge:
    """One directed traversal between two stations on a line."""

    from_station: str
    to_station: str
    line: str
    minutes: float


class MetroGraph:
    """
    Graph representation of a metro network.

    Nodes are station names, edges are directed hops tagged with the line
    colour and the travel time in minutes. A connection between two stations
    is stored as a pair of directed edges so the network stays undirected.

    Parallel edges between the same stations (different line or time) are
    kept as distinct edges of the underlying MultiDiGraph.
    """

    def __init__(self):
        """Initialize empty graph."""
        self.graph = nx.MultiDiGraph()
        self._edge_count = 0

    @classmethod
    def from_connections(cls, connections: Iterable[Connection]) -> "MetroGraph":
        """Build a graph with both directions of every connection."""
        metro = cls()
        for conn in connections:
            metro.add_connection(conn.station1, conn.station2, conn.line, conn.minutes)
        return metro

    def load_connections(self, filepath: str | Path) -> LoadReport:
        """
        Load connections from CSV and add them in both directions.

        Returns the loader report so callers can surface skipped rows.
        """
        report = read_connections(filepath)
        for conn in report.connections:
            self.add_connection(conn.station1, conn.station2, conn.line, conn.minutes)
        return report

    def add_edge(
        self, from_station: str, to_station: str, line: str, minutes: float
    ) -> None:
        """
        Add a single directed edge and register its line at from_station.

        No validation is done on minutes or duplicates.
        """
        if from_station not in self.graph:
            self.graph.add_node(from_station, lines=set())
        if to_station not in self.graph:
            self.graph.add_node(to_station, lines=set())

        self.graph.add_edge(
            from_station,
            to_station,
            line=line,
            minutes=minutes,
            order=self._edge_count,
        )
        self._edge_count += 1
        self.graph.nodes[from_station]["lines"].add(line)

    def add_connection(
        self, station1: str, station2: str, line: str, minutes: float
    ) -> None:
        """Add an undirected connection as two directed edges."""
        self.add_edge(station1, station2, line, minutes)
        self.add_edge(station2, station1, line, minutes)

    def neighbours(self, station: str) -> list[Edge]:
        """Get outgoing edges from a station, in insertion order."""
        if station not in self.graph:
            return []
        out = sorted(
            self.graph.out_edges(station, data=True),
            key=lambda e: e[2]["order"],
        )
        return [
            Edge(u, v, data["line"], data["minutes"])
            for u, v, data in out
        ]

    def lines_at(self, station: str) -> set[str]:
        """Get the line colours stopping at a station."""
        if station not in self.graph:
            return set()
        return set(self.graph.nodes[station]["lines"])

    def get_stations(self) -> list[str]:
        """Get list of all station names."""
        return list(self.graph.nodes())

    def has_station(self, name: str) -> bool:
        """Check if a station exists in the graph."""
        return name in self.graph

    def __contains__(self, name: str) -> bool:
        return name in self.graph

    def __len__(self) -> int:
        """Return number of stations."""
        return len(self.graph)
