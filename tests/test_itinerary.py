"""Tests for itinerary summaries."""

from metro_pathfinder.itinerary import (
    EndSegment,
    LineChangeSegment,
    StartSegment,
    StopsSegment,
    ViaSegment,
    describe,
    summarize,
)
from metro_pathfinder.network import metro_graph
from metro_pathfinder.routing import compose_route

FULL_PATH = ["X1", "X2", "X3", "Y1", "Y2", "Y3"]


def _kinds(segments):
    return [segment.kind for segment in segments]


def _ids(segment):
    if isinstance(segment, StopsSegment):
        return [s.id for s in segment.stations]
    return [segment.station.id]


def test_summary_with_line_change(two_line_graph):
    """Test stops are flushed around a line change."""
    segments = summarize(two_line_graph, FULL_PATH)
    assert _kinds(segments) == ["start", "stops", "change", "stops", "end"]
    assert [s.id for s in segments[1].stations] == ["X2", "X3"]

    change = segments[2]
    assert isinstance(change, LineChangeSegment)
    assert change.station.id == "Y1"
    assert change.previous_station.id == "X3"
    assert (change.from_line, change.to_line) == ("X", "Y")


def test_summary_with_via(two_line_graph):
    """Test a via station gets its own segment rather than joining a stops run."""
    segments = summarize(two_line_graph, FULL_PATH, ["X2"])
    assert _kinds(segments) == ["start", "via", "stops", "change", "stops", "end"]
    assert segments[1] == ViaSegment(two_line_graph.station("X2"))


def test_via_at_line_change(two_line_graph):
    """Test the change is emitted before the via and no empty stops appear."""
    segments = summarize(two_line_graph, FULL_PATH, ["Y1"])
    assert _kinds(segments) == ["start", "stops", "change", "via", "stops", "end"]
    assert segments[2].station.id == segments[3].station.id == "Y1"


def test_vias_matched_in_order(two_line_graph):
    """Test vias are consumed in order, so an out-of-order via is not matched."""
    segments = summarize(two_line_graph, FULL_PATH, ["Y2", "X2"])
    vias = [s.station.id for s in segments if isinstance(s, ViaSegment)]
    assert vias == ["Y2"]


def test_unset_and_missing_vias_ignored(two_line_graph):
    """Test vias that are unset or off the path do not produce segments."""
    segments = summarize(two_line_graph, ["X1", "X2", "X3"], [None, "Y3"])
    assert _kinds(segments) == ["start", "stops", "end"]


def test_single_station_path(two_line_graph):
    """Test a path of one station is just start and end."""
    segments = summarize(two_line_graph, ["X1"])
    assert segments == [
        StartSegment(two_line_graph.station("X1")),
        EndSegment(two_line_graph.station("X1")),
    ]


def test_empty_path(two_line_graph):
    """Test an empty path has no segments."""
    assert summarize(two_line_graph, []) == []


def test_summary_reproduces_path():
    """Test stops and event stations cover the composed path once each, in order."""
    vias = ["and", "dad"]
    route = compose_route(metro_graph, ["vsv", *vias, "cuf"])
    segments = summarize(metro_graph, route.path, vias)

    covered = []
    for segment in segments:
        covered.extend(_ids(segment))
    assert covered == list(route.path)
    assert _kinds(segments) == [
        "start", "stops", "via", "stops", "change", "stops", "via", "stops", "end",
    ]


def test_describe():
    """Test every segment renders to a readable line."""
    route = compose_route(metro_graph, ["vsv", "cuf"])
    lines = describe(summarize(metro_graph, route.path))
    assert lines[0] == "Start at Versova on Line 1 (blue)"
    assert lines[2] == "Change at Marol Naka from Line 1 (blue) to Line 3 (aqua)"
    assert lines[-1] == "Arrive at Cuffe Parade"
    assert lines[1].startswith("7 stops: D.N. Nagar")
