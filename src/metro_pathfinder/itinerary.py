"""Turn a station path into presentation-ready itinerary segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Union

from .network import MetroGraph
from .stations import LINES, Station


def _line_name(line: str) -> str:
    info = LINES.get(line)
    return f"{info.name} ({line})" if info else line


@dataclass(frozen=True)
class StartSegment:
    kind: ClassVar[str] = "start"
    station: Station

    def __str__(self):
        return f"Start at {self.station.name} on {_line_name(self.station.line)}"


@dataclass(frozen=True)
class EndSegment:
    kind: ClassVar[str] = "end"
    station: Station

    def __str__(self):
        return f"Arrive at {self.station.name}"


@dataclass(frozen=True)
class LineChangeSegment:
    """Change lines at ``station``, arriving from ``previous_station``."""
    kind: ClassVar[str] = "change"
    station: Station
    previous_station: Station

    @property
    def from_line(self) -> str:
        return self.previous_station.line

    @property
    def to_line(self) -> str:
        return self.station.line

    def __str__(self):
        return (
            f"Change at {self.station.name} from {_line_name(self.from_line)}"
            f" to {_line_name(self.to_line)}"
        )


@dataclass(frozen=True)
class ViaSegment:
    kind: ClassVar[str] = "via"
    station: Station

    def __str__(self):
        return f"Via {self.station.name}"


@dataclass(frozen=True)
class StopsSegment:
    """Stations passed without any event."""
    kind: ClassVar[str] = "stops"
    stations: tuple[Station, ...]

    def __str__(self):
        count = len(self.stations)
        names = ", ".join(s.name for s in self.stations)
        return f"{count} stop{'s' if count != 1 else ''}: {names}"


Segment = Union[StartSegment, EndSegment, LineChangeSegment, ViaSegment, StopsSegment]


def summarize(
    graph: MetroGraph, path: Sequence[str], via_ids: Sequence[Optional[str]] = ()
) -> list[Segment]:
    """Walk a route path and emit start, stops, change, via and end segments.

    For each station the line-change check runs before the via check; both
    flush the pending run of plain stops first. Via ids are matched in order,
    each at most once.
    """
    if not path:
        return []

    stations = [graph.station(station_id) for station_id in path]
    vias = [station_id for station_id in via_ids if station_id]

    segments: list[Segment] = [StartSegment(stations[0])]
    segment_start = 0
    via_cursor = 0

    def flush(until: int):
        stops = tuple(stations[segment_start + 1:until])
        if stops:
            segments.append(StopsSegment(stops))

    for i in range(1, len(stations)):
        prev_station = stations[i - 1]
        curr_station = stations[i]

        if prev_station.line != curr_station.line:
            flush(i)
            segments.append(LineChangeSegment(curr_station, prev_station))
            segment_start = i

        if via_cursor < len(vias) and curr_station.id == vias[via_cursor]:
            flush(i)
            segments.append(ViaSegment(curr_station))
            segment_start = i
            via_cursor += 1

    flush(len(stations) - 1)
    segments.append(EndSegment(stations[-1]))
    return segments


def describe(segments: Sequence[Segment]) -> list[str]:
    """One human-readable line per segment."""
    return [str(segment) for segment in segments]
