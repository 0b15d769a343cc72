"""Read metro connections from CSV."""

import csv
import math
from dataclasses import dataclass, field
from pathlib import Path


class ConnectionsFileError(Exception):
    """Raised when the connections file cannot be read."""


@dataclass(frozen=True)
class Connection:
    """An undirected connection between two stations on one line."""

    station1: str
    station2: str
    line: str
    minutes: float


@dataclass
class LoadReport:
    """Result of reading a connections file."""

    connections: list[Connection] = field(default_factory=list)
    skipped_lines: list[int] = field(default_factory=list)  # 1-based file line numbers

    @property
    def skipped(self) -> int:
        return len(self.skipped_lines)


def parse_row(row: list[str]) -> Connection:
    """
    Parse one CSV row into a Connection.

    Expected fields: start station, end station, line colour, minutes.

    Raises:
        ValueError: if the row is incomplete or minutes is not a
            non-negative number
    """
    if len(row) < 4:
        raise ValueError(f"expected 4 fields, got {len(row)}")

    station1 = row[0].strip()
    station2 = row[1].strip()
    line = row[2].strip()
    if not station1 or not station2 or not line:
        raise ValueError("empty station or line name")

    minutes = float(row[3].strip())
    if not math.isfinite(minutes) or minutes < 0:
        raise ValueError(f"invalid minutes: {row[3]!r}")

    return Connection(station1, station2, line, minutes)


def read_connections(filepath: str | Path) -> LoadReport:
    """
    Load connections from CSV.

    The first row is a header and is skipped. Blank lines are ignored,
    malformed rows are skipped and their line numbers recorded.
    """
    filepath = Path(filepath)
    report = LoadReport()

    try:
        with open(filepath, encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            next(reader, None)
            for row in reader:
                if not any(cell.strip() for cell in row):
                    continue
                try:
                    report.connections.append(parse_row(row))
                except ValueError:
                    report.skipped_lines.append(reader.line_num)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise ConnectionsFileError(f"Problem reading CSV {filepath}: {e}") from e

    return report


def read_station_names(filepath: str | Path) -> list[str]:
    """Get the sorted, distinct station names from a connections CSV."""
    names = set()
    for conn in read_connections(filepath).connections:
        names.add(conn.station1)
        names.add(conn.station2)
    return sorted(names)
