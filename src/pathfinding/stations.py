"""Station listing and name suggestions."""

from rapidfuzz import fuzz, process

from .graph import MetroGraph


def sorted_stations(graph: MetroGraph) -> list[str]:
    """All station names in alphabetical order, as shown in drop-downs."""
    return sorted(graph.get_stations())


def suggest_stations(
    name: str,
    stations: list[str],
    threshold: int = 60,
    limit: int = 3,
) -> list[str]:
    """
    Suggest known station names close to an unknown one.

    Only used for "did you mean" hints; routing always uses exact names.

    Args:
        name: Station name as typed by the user
        stations: Known station names
        threshold: Minimum similarity score (0-100)
        limit: Maximum number of suggestions

    Returns:
        Station names sorted by score descending
    """
    if not name or not stations:
        return []

    results = process.extract(
        name,
        stations,
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=threshold,
    )
    return [match for match, _score, _idx in results]


SAME_STATION_MESSAGE = "Start and end station can't be the same. You are already here."


def unknown_station_message(graph: MetroGraph, name: str, role: str) -> str:
    """User-facing message for a station missing from the graph."""
    message = f"Unknown {role} station: {name}"
    suggestions = suggest_stations(name, sorted_stations(graph))
    if suggestions:
        message += f" (did you mean: {', '.join(suggestions)}?)"
    return message


def validate_journey(graph: MetroGraph, start: str, goal: str) -> str | None:
    """
    Check a journey request before searching.

    Returns:
        An error message for the user, or None if the request is valid
    """
    if start == goal:
        return SAME_STATION_MESSAGE
    if not graph.has_station(start):
        return unknown_station_message(graph, start, "start")
    if not graph.has_station(goal):
        return unknown_station_message(graph, goal, "end")
    return None
