"""Routing errors."""

from __future__ import annotations


class RoutingError(Exception):
    """Base class for every error raised by the routing engine."""


class UnknownStationError(RoutingError):
    """A station id is not part of the graph."""

    def __init__(self, station_id: str):
        self.station_id = station_id
        super().__init__(f"Unknown station: {station_id}")


class DuplicateStationError(RoutingError):
    """Two station records share the same id."""

    def __init__(self, station_id: str):
        self.station_id = station_id
        super().__init__(f"Duplicate station id in reference data: {station_id}")


class UnknownStationReference(RoutingError):
    """A connection names a station id that is not in the station set.

    Raised and recovered inside graph construction: the edge is dropped.
    """

    def __init__(self, station_a: str, station_b: str, missing_id: str):
        self.station_a = station_a
        self.station_b = station_b
        self.missing_id = missing_id
        super().__init__(
            f"Connection {station_a!r} <-> {station_b!r} references unknown station {missing_id!r}"
        )


class NotReachable(RoutingError):
    """No path exists between two stations."""

    def __init__(self, source_id: str, target_id: str):
        self.source_id = source_id
        self.target_id = target_id
        super().__init__(f"No path between {source_id} and {target_id}")


class InsufficientWaypoints(RoutingError):
    """Fewer than two defined waypoints, or an unset waypoint in the list."""


class DuplicateWaypointError(RoutingError):
    """The same station was picked twice among start, vias and end."""

    def __init__(self, station_id: str):
        self.station_id = station_id
        super().__init__(f"Station {station_id} is already part of the route")
