"""Render route results as a plain-text itinerary."""

from .dijkstra import RouteResult, SearchMode, StationNode

HEADERS = {
    SearchMode.TIME: "*** Minimal Time Route ***",
    SearchMode.CHANGES: "*** Route with Fewest Changes ***",
}
NO_ROUTE = "No route found."


def format_route(result: RouteResult, mode: SearchMode | str) -> str:
    """
    Format a route as a multi-line itinerary.

    A "Change Line" marker is inserted before every station reached on a
    different line than the previous entry.

    Example:
        *** Minimal Time Route ***
        A on Red line
        B on Red line
        ** Change Line to Blue line **
        B on Blue line
        C on Blue line

        Overall Journey Time (mins) = 17.0
        Number of Changes = 1
    """
    if not result.path:
        return NO_ROUTE

    lines = [HEADERS[SearchMode(mode)]]
    previous_line = result.path[0].line
    for node in result.path:
        if node.line != previous_line:
            lines.append(f"** Change Line to {node.line} line **")
        lines.append(f"{node.station} on {node.line} line")
        previous_line = node.line

    lines.append("")
    lines.append(f"Overall Journey Time (mins) = {float(result.total_minutes)}")
    lines.append(f"Number of Changes = {result.num_changes}")
    return "\n".join(lines)


def parse_itinerary(text: str) -> list[StationNode]:
    """Recover the station/line sequence from a formatted itinerary."""
    nodes = []
    for row in text.splitlines():
        if row.startswith("*") or " on " not in row or not row.endswith(" line"):
            continue
        station, line = row[: -len(" line")].rsplit(" on ", 1)
        nodes.append(StationNode(station, line))
    return nodes
