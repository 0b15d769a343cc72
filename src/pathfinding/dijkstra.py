"""Dijkstra pathfinding for metro routes."""

import heapq
from dataclasses import dataclass
from enum import Enum
from itertools import count

from .graph import MetroGraph

# Minutes added every time the traveller switches line
DEFAULT_CHANGE_TIME = 2.0


class SearchMode(str, Enum):
    """Optimization criterion for a route search."""

    TIME = "time"
    CHANGES = "changes"


@dataclass(frozen=True, order=True)
class StationNode:
    """A search state: being at a station while on a given line."""

    station: str
    line: str


@dataclass(frozen=True)
class RouteResult:
    """Result of a route search. An empty path means no route was found."""

    path: tuple[StationNode, ...] = ()
    total_minutes: float = 0.0
    num_changes: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def stations(self) -> list[str]:
        """Station names along the path, line switches collapsed."""
        names = []
        for node in self.path:
            if not names or names[-1] != node.station:
                names.append(node.station)
        return names


def count_changes(path: tuple[StationNode, ...] | list[StationNode]) -> int:
    """Count adjacent path entries whose line differs."""
    return sum(1 for prev, cur in zip(path, path[1:]) if prev.line != cur.line)


def _reconstruct_path(
    previous: dict[StationNode, StationNode | None], goal_node: StationNode
) -> tuple[StationNode, ...]:
    path = []
    node = goal_node
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()
    return tuple(path)


def _expand(graph: MetroGraph, current: StationNode):
    """
    Yield (neighbour state, edge minutes or None, is_change) transitions.

    A hop on the current line moves to the next station. An edge on another
    line is a switch to that line at the same station; the move along the
    new line happens when the switch state is expanded.
    """
    for edge in graph.neighbours(current.station):
        if edge.line == current.line:
            yield StationNode(edge.to_station, current.line), edge.minutes, False
        else:
            yield StationNode(current.station, edge.line), None, True


def shortest_time(
    graph: MetroGraph, change_time: float, start: str, goal: str
) -> RouteResult:
    """
    Find the journey with the least total minutes.

    Every line change adds change_time minutes on top of the edge times.

    Args:
        graph: MetroGraph instance
        change_time: Minutes added when switching line
        start: Starting station name
        goal: Goal station name

    Returns:
        RouteResult with the fastest path, empty if no route exists
    """
    best_minutes: dict[StationNode, float] = {}
    previous: dict[StationNode, StationNode | None] = {}
    settled: set[StationNode] = set()
    tie = count()
    frontier: list[tuple[float, int, StationNode]] = []

    # The traveller may start on any line serving the start station
    for line in sorted(graph.lines_at(start)):
        node = StationNode(start, line)
        best_minutes[node] = 0.0
        previous[node] = None
        heapq.heappush(frontier, (0.0, next(tie), node))

    while frontier:
        minutes, _, current = heapq.heappop(frontier)
        if current in settled or minutes > best_minutes[current]:
            continue
        settled.add(current)

        if current.station == goal:
            path = _reconstruct_path(previous, current)
            return RouteResult(path, minutes, count_changes(path))

        for neighbour, edge_minutes, is_change in _expand(graph, current):
            if neighbour in settled:
                continue
            new_minutes = minutes + (change_time if is_change else edge_minutes)
            if neighbour not in best_minutes or new_minutes < best_minutes[neighbour]:
                best_minutes[neighbour] = new_minutes
                previous[neighbour] = current
                heapq.heappush(frontier, (new_minutes, next(tie), neighbour))

    return RouteResult()


def least_changes(
    graph: MetroGraph, change_time: float, start: str, goal: str
) -> RouteResult:
    """
    Find the journey with the fewest line changes.

    Among journeys with the same number of changes the one with the least
    total minutes wins. Minutes include change_time for every switch.
    """
    best: dict[StationNode, tuple[int, float]] = {}
    previous: dict[StationNode, StationNode | None] = {}
    settled: set[StationNode] = set()
    tie = count()
    frontier: list[tuple[int, float, int, StationNode]] = []

    for line in sorted(graph.lines_at(start)):
        node = StationNode(start, line)
        best[node] = (0, 0.0)
        previous[node] = None
        heapq.heappush(frontier, (0, 0.0, next(tie), node))

    while frontier:
        changes, minutes, _, current = heapq.heappop(frontier)
        if current in settled or (changes, minutes) > best[current]:
            continue
        settled.add(current)

        if current.station == goal:
            # The path scan matches the accumulated change counter
            path = _reconstruct_path(previous, current)
            return RouteResult(path, minutes, count_changes(path))

        for neighbour, edge_minutes, is_change in _expand(graph, current):
            if neighbour in settled:
                continue
            if is_change:
                candidate = (changes + 1, minutes + change_time)
            else:
                candidate = (changes, minutes + edge_minutes)
            # Tuple comparison: fewer changes first, then fewer minutes
            if neighbour not in best or candidate < best[neighbour]:
                best[neighbour] = candidate
                previous[neighbour] = current
                heapq.heappush(frontier, (*candidate, next(tie), neighbour))

    return RouteResult()


def find_route(
    graph: MetroGraph,
    start: str,
    goal: str,
    mode: SearchMode | str = SearchMode.TIME,
    change_time: float = DEFAULT_CHANGE_TIME,
) -> RouteResult:
    """
    Find a route using the search matching the given mode.

    Raises:
        ValueError: if mode is not a known SearchMode value
    """
    mode = SearchMode(mode)
    if mode is SearchMode.CHANGES:
        return least_changes(graph, change_time, start, goal)
    return shortest_time(graph, change_time, start, goal)
