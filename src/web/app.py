"""
FastAPI web interface for Metro Planner.

Pick a start station, an end station and a journey constraint, get back
the itinerary. Also exposes a small JSON API.
"""

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from src.pathfinding import (
    DEFAULT_CHANGE_TIME,
    ConnectionsFileError,
    MetroGraph,
    SearchMode,
    find_route,
    format_route,
)
from src.pathfinding.stations import sorted_stations, validate_journey

# Paths
BASE_DIR = Path(__file__).parent
TEMPLATES_DIR = BASE_DIR / "templates"
DATA_DIR = Path(__file__).parent.parent.parent / "data"
CONNECTIONS_FILE = DATA_DIR / "metrolink_times_linecolour.csv"

# Labels shown in the constraint drop-down
MODE_LABELS = {
    SearchMode.TIME.value: "Fastest Time",
    SearchMode.CHANGES.value: "Least Amount Of Changes",
}

NOT_LOADED_MESSAGE = "The metro network is not loaded. Please try again later."

# Initialize FastAPI
app = FastAPI(
    title="Metro Planner",
    description="Fastest or fewest-changes routes on a metro network",
    version="0.1.0",
)


# Jinja2 filters
def format_duration(minutes: float | None) -> str:
    """
    Format duration in minutes to human readable string.

    Fractional minutes are kept so the value matches the itinerary text,
    e.g. 3.5 -> "3.5 min", 65.5 -> "1h05.5".
    """
    if minutes is None:
        return ""
    minutes = round(minutes, 2)
    hours = int(minutes // 60)
    rest = minutes - hours * 60
    whole = int(rest)
    fraction = f"{rest - whole:.2f}".rstrip("0").rstrip(".")[1:]
    if hours > 0:
        return f"{hours}h{whole:02d}{fraction}"
    return f"{whole}{fraction} min"


# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_duration"] = format_duration


# Global instance (loaded on startup)
graph: MetroGraph | None = None


@app.on_event("startup")
async def startup_event():
    """Load the metro network on startup."""
    global graph

    loaded = MetroGraph()
    try:
        report = loaded.load_connections(CONNECTIONS_FILE)
    except ConnectionsFileError as e:
        print(f"Failed to load metro network: {e}")
        return

    if report.skipped:
        print(f"Skipped {report.skipped} malformed row(s) in {CONNECTIONS_FILE}")
    print(f"Loaded {len(loaded)} stations from {CONNECTIONS_FILE}")
    graph = loaded


class RouteRequest(BaseModel):
    """Request model for API."""

    start: str
    goal: str
    mode: SearchMode = SearchMode.TIME
    change_time: float = DEFAULT_CHANGE_TIME


class StopDisplay(BaseModel):
    """One entry of the route: a station and the line it is reached on."""

    station: str
    line: str


class RouteResponse(BaseModel):
    """Response model for API."""

    found: bool
    mode: SearchMode = SearchMode.TIME
    path: list[StopDisplay] = []
    total_minutes: float = 0.0
    num_changes: int = 0
    itinerary: str | None = None
    error: str | None = None


class StationsResponse(BaseModel):
    """List of station names."""

    stations: list[str]


def plan_route(
    start: str,
    goal: str,
    mode: SearchMode = SearchMode.TIME,
    change_time: float = DEFAULT_CHANGE_TIME,
) -> RouteResponse:
    """Validate a request, run the search and build the response."""
    if graph is None:
        return RouteResponse(found=False, mode=mode, error=NOT_LOADED_MESSAGE)

    if change_time < 0:
        return RouteResponse(
            found=False, mode=mode, error="Change time must not be negative."
        )

    error = validate_journey(graph, start, goal)
    if error:
        return RouteResponse(found=False, mode=mode, error=error)

    result = find_route(graph, start, goal, mode, change_time)
    return RouteResponse(
        found=result.found,
        mode=mode,
        path=[StopDisplay(station=n.station, line=n.line) for n in result.path],
        total_minutes=result.total_minutes,
        num_changes=result.num_changes,
        itinerary=format_route(result, mode),
    )


def _page_context(**extra) -> dict:
    return {
        "stations": sorted_stations(graph) if graph is not None else [],
        "modes": MODE_LABELS,
        **extra,
    }


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render main page."""
    return templates.TemplateResponse(
        request, "index.html", _page_context(selected_mode=SearchMode.TIME.value)
    )


@app.post("/", response_class=HTMLResponse)
async def process_form(
    request: Request,
    start: str = Form(...),
    goal: str = Form(...),
    mode: SearchMode = Form(SearchMode.TIME),
):
    """Process form submission and return results."""
    result = plan_route(start, goal, mode)
    return templates.TemplateResponse(
        request,
        "index.html",
        _page_context(
            result=result,
            selected_start=start,
            selected_goal=goal,
            selected_mode=mode.value,
        ),
    )


@app.get("/api/stations", response_model=StationsResponse)
async def api_stations() -> StationsResponse:
    """Get all station names in alphabetical order."""
    return StationsResponse(stations=sorted_stations(graph) if graph is not None else [])


@app.post("/api/route", response_model=RouteResponse)
async def api_route(query: RouteRequest) -> RouteResponse:
    """API endpoint for programmatic access."""
    return plan_route(query.start, query.goal, query.mode, query.change_time)
