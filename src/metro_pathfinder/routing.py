"""Shortest-path search and multi-waypoint route composition."""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .exceptions import InsufficientWaypoints, NotReachable
from .network import MetroGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathResult:
    """Shortest path between two stations."""
    stations: tuple[str, ...]
    distance: float


@dataclass(frozen=True)
class Route:
    """A full route stitched together from one or more segments."""
    path: tuple[str, ...]
    total_distance: float

    def __str__(self):
        return f"{' -> '.join(self.path)} ({self.total_distance:.2f} km)"


def shortest_path(graph: MetroGraph, source_id: str, target_id: str) -> PathResult:
    """Find the shortest path between two stations using Dijkstra.

    Raises:
        UnknownStationError: if either id is not in the graph.
        NotReachable: if no path connects the two stations.
    """
    source = graph.index_of(source_id)
    target = graph.index_of(target_id)

    if source == target:
        return PathResult((source_id,), 0.0)

    distances = [math.inf] * len(graph)
    previous: list[Optional[int]] = [None] * len(graph)
    finalized = [False] * len(graph)

    distances[source] = 0.0
    # Priority queue: (tentative_distance, station_index); stale entries are skipped on pop
    pq = [(0.0, source)]

    while pq:
        distance, current = heapq.heappop(pq)
        if finalized[current]:
            continue
        finalized[current] = True

        if current == target:
            break

        for neighbor, weight in graph.adjacent(current):
            if finalized[neighbor]:
                continue
            new_distance = distance + weight
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                previous[neighbor] = current
                heapq.heappush(pq, (new_distance, neighbor))

    if not finalized[target]:
        raise NotReachable(source_id, target_id)

    path = [target]
    while path[-1] != source:
        step = previous[path[-1]]
        if step is None:
            raise NotReachable(source_id, target_id)
        path.append(step)
    path.reverse()

    return PathResult(
        tuple(graph.station_at(i).id for i in path),
        distances[target],
    )


def compose_route(graph: MetroGraph, waypoints: Sequence[Optional[str]]) -> Route:
    """Route through ``waypoints`` in order (start, vias..., end).

    Each consecutive pair is solved independently and the segments are
    stitched into one path. Consecutive duplicates are skipped.

    Raises:
        InsufficientWaypoints: fewer than two waypoints, or an unset one.
        UnknownStationError: a waypoint is not in the graph.
        NotReachable: naming the first pair that has no path.
    """
    if len(waypoints) < 2:
        raise InsufficientWaypoints("At least a start and an end station are required")
    if any(not station_id for station_id in waypoints):
        raise InsufficientWaypoints("Please select all start, via, and end stations")
    for station_id in waypoints:
        graph.index_of(station_id)

    total_path: list[str] = []
    total_distance = 0.0

    for segment_start, segment_end in zip(waypoints, waypoints[1:]):
        if segment_start == segment_end:
            continue

        segment = shortest_path(graph, segment_start, segment_end)
        logger.debug(
            "Segment %s -> %s: %d stations, %.3f km",
            segment_start, segment_end, len(segment.stations), segment.distance,
        )

        if not total_path:
            total_path.extend(segment.stations)
        else:
            total_path.extend(segment.stations[1:])
        total_distance += segment.distance

    if not total_path:
        total_path.append(waypoints[0])

    return Route(tuple(total_path), total_distance)
