"""Weighted metro graph built from station and connection data."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from .config import SAME_LINE_EPSILON_KM, TRANSFER_PENALTY_KM
from .exceptions import DuplicateStationError, UnknownStationError, UnknownStationReference
from .geo import haversine_distance_km
from .stations import CONNECTIONS, STATIONS, Station

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Neighbor:
    """An adjacent station and the weight (km) of the edge leading to it."""
    station_id: str
    weight: float


def edge_weight(
    a: Station,
    b: Station,
    transfer_penalty: float = TRANSFER_PENALTY_KM,
    same_line_epsilon: float = SAME_LINE_EPSILON_KM,
) -> float:
    """Weight of the edge between two stations.

    Geographic distance, plus ``transfer_penalty`` when the stations are on
    different lines. Distinct same-line stations at identical coordinates get
    ``same_line_epsilon`` so the edge keeps a positive cost.
    """
    distance = haversine_distance_km(a.latitude, a.longitude, b.latitude, b.longitude)
    if a.line != b.line:
        distance += transfer_penalty
    elif distance == 0 and a.id != b.id:
        distance = same_line_epsilon
    return distance


class MetroGraph:
    """Immutable undirected graph of metro stations.

    Stations are assigned a dense integer index at build time; adjacency is
    stored per index. Use :func:`build_graph` to construct one.
    """

    def __init__(
        self,
        stations: tuple[Station, ...],
        adjacency: tuple[tuple[tuple[int, float], ...], ...],
        dropped_connections: tuple[tuple[str, str], ...] = (),
    ):
        self._stations = stations
        self._index = {station.id: i for i, station in enumerate(stations)}
        self._adjacency = adjacency
        self.dropped_connections = dropped_connections
        self.interchange_ids = frozenset(s.id for s in stations if s.interchange)

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, station_id: object) -> bool:
        return station_id in self._index

    def __iter__(self) -> Iterator[str]:
        return (station.id for station in self._stations)

    def index_of(self, station_id: str) -> int:
        try:
            return self._index[station_id]
        except KeyError:
            raise UnknownStationError(station_id) from None

    def station(self, station_id: str) -> Station:
        return self._stations[self.index_of(station_id)]

    def station_at(self, index: int) -> Station:
        return self._stations[index]

    def adjacent(self, index: int) -> tuple[tuple[int, float], ...]:
        """Raw ``(neighbor_index, weight)`` pairs for the solver."""
        return self._adjacency[index]

    def neighbors(self, station_id: str) -> tuple[Neighbor, ...]:
        """Neighbors of a station in connection insertion order."""
        return tuple(
            Neighbor(self._stations[j].id, weight)
            for j, weight in self._adjacency[self.index_of(station_id)]
        )

    @property
    def stations(self) -> tuple[Station, ...]:
        return self._stations


def build_graph(
    stations: Iterable[Station],
    connections: Iterable[tuple[str, str]],
    transfer_penalty: float = TRANSFER_PENALTY_KM,
    same_line_epsilon: float = SAME_LINE_EPSILON_KM,
) -> MetroGraph:
    """Build an undirected weighted graph.

    Connections that reference an unknown station are dropped (and logged)
    instead of failing the whole build.
    """
    station_list = tuple(stations)
    index: dict[str, int] = {}
    for i, station in enumerate(station_list):
        if station.id in index:
            raise DuplicateStationError(station.id)
        index[station.id] = i

    adjacency: list[list[tuple[int, float]]] = [[] for _ in station_list]
    dropped = []

    for id1, id2 in connections:
        try:
            for station_id in (id1, id2):
                if station_id not in index:
                    raise UnknownStationReference(id1, id2, station_id)
        except UnknownStationReference as e:
            logger.warning("Dropping connection: %s", e)
            dropped.append((id1, id2))
            continue

        i, j = index[id1], index[id2]
        weight = edge_weight(station_list[i], station_list[j], transfer_penalty, same_line_epsilon)
        adjacency[i].append((j, weight))
        adjacency[j].append((i, weight))

    logger.debug(
        "Built graph with %d stations, %d dropped connections", len(station_list), len(dropped)
    )
    return MetroGraph(
        station_list,
        tuple(tuple(neighbors) for neighbors in adjacency),
        tuple(dropped),
    )


# Singleton instance
metro_graph = build_graph(STATIONS.values(), CONNECTIONS)
