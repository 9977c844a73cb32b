"""Trip planning: validate user waypoint picks, route, and summarize."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .exceptions import DuplicateWaypointError, InsufficientWaypoints
from .itinerary import Segment, describe, summarize
from .network import MetroGraph, metro_graph
from .routing import Route, compose_route


@dataclass(frozen=True)
class TripPlan:
    """A computed route with its itinerary."""
    route: Route
    segments: tuple[Segment, ...]
    via_ids: tuple[str, ...]

    @property
    def total_distance(self) -> float:
        return self.route.total_distance

    def __str__(self):
        result = [f"{i+1}. {line}" for i, line in enumerate(describe(self.segments))]
        result.append(f"\nTotal: {self.total_distance:.2f} km, {len(self.route.path)} station(s)")
        return "\n".join(result)


def validate_waypoints(
    start: Optional[str], end: Optional[str], vias: Sequence[Optional[str]] = ()
) -> list[str]:
    """Check a start/vias/end selection and return it as one ordered list.

    Every waypoint must be set and no station may be picked twice.
    """
    waypoints = [start, *vias, end]
    if any(not station_id for station_id in waypoints):
        raise InsufficientWaypoints("Please select all start, via, and end stations")

    seen = set()
    for station_id in waypoints:
        if station_id in seen:
            raise DuplicateWaypointError(station_id)
        seen.add(station_id)
    return waypoints


def plan_trip(
    start: Optional[str],
    end: Optional[str],
    vias: Sequence[Optional[str]] = (),
    graph: MetroGraph = metro_graph,
) -> TripPlan:
    """Plan a trip from ``start`` to ``end`` through ``vias`` in order."""
    waypoints = validate_waypoints(start, end, vias)
    route = compose_route(graph, waypoints)
    via_ids = tuple(waypoints[1:-1])
    return TripPlan(
        route=route,
        segments=tuple(summarize(graph, route.path, via_ids)),
        via_ids=via_ids,
    )


def swap_endpoints(start: Optional[str], end: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Swap start and end selections."""
    return end, start
