"""Shared fixtures: small hand-built networks."""

import pytest

from metro_pathfinder.network import build_graph
from metro_pathfinder.stations import Station


@pytest.fixture
def interchange_graph():
    """A-B on line X, C-D on line Y; B and C share a location."""
    stations = [
        Station("A", "Alpha", "X", 0.0, 0.0),
        Station("B", "Bravo", "X", 0.0, 1.0),
        Station("C", "Charlie", "Y", 0.0, 1.0, interchange=True),
        Station("D", "Delta", "Y", 0.0, 2.0),
    ]
    return build_graph(stations, [("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def disconnected_graph():
    """Two components with no link between them."""
    stations = [
        Station("A", "Alpha", "X", 0.0, 0.0),
        Station("B", "Bravo", "X", 0.0, 0.1),
        Station("E", "Echo", "Z", 10.0, 10.0),
        Station("F", "Foxtrot", "Z", 10.0, 10.1),
    ]
    return build_graph(stations, [("A", "B"), ("E", "F")])


@pytest.fixture
def two_line_graph():
    """X1-X2-X3 on line X, transfer X3<->Y1, then Y1-Y2-Y3 on line Y."""
    stations = [
        Station("X1", "X One", "X", 0.0, 0.00),
        Station("X2", "X Two", "X", 0.0, 0.01),
        Station("X3", "X Three", "X", 0.0, 0.02, interchange=True),
        Station("Y1", "Y One", "Y", 0.0, 0.02, interchange=True),
        Station("Y2", "Y Two", "Y", 0.0, 0.03),
        Station("Y3", "Y Three", "Y", 0.0, 0.04),
    ]
    connections = [("X1", "X2"), ("X2", "X3"), ("X3", "Y1"), ("Y1", "Y2"), ("Y2", "Y3")]
    return build_graph(stations, connections)
