"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from metro_pathfinder import api
from metro_pathfinder.exceptions import NotReachable


@pytest.fixture
def client():
    return TestClient(api.app)


def test_health(client):
    """Test the health check."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_lines(client):
    """Test the four lines are listed with colors."""
    lines = client.get("/lines").json()["lines"]
    assert {line["code"] for line in lines} == {"blue", "yellow", "red", "aqua"}
    assert all(line["color"].startswith("#") for line in lines)


def test_list_stations_by_line(client):
    """Test filtering stations by line."""
    data = client.get("/stations", params={"line": "aqua"}).json()
    assert data["count"] == 19
    assert all(s["line"] == "aqua" for s in data["stations"])


def test_search_stations(client):
    """Test searching stations by text."""
    data = client.get("/stations", params={"q": "marol"}).json()
    assert {s["id"] for s in data["stations"]} == {"mar", "mar-a"}


def test_nearest_station(client):
    """Test nearest station lookup for a map point."""
    data = client.get("/stations/nearest", params={"lat": 18.9131, "lon": 72.8171}).json()
    assert data["station"]["id"] == "cuf"
    assert data["distance_km"] < 0.1


def test_nearest_station_rejects_bad_latitude(client):
    """Test out-of-range coordinates are refused."""
    response = client.get("/stations/nearest", params={"lat": 123, "lon": 72.8})
    assert response.status_code == 422


def test_route(client):
    """Test a route across the Marol Naka interchange."""
    response = client.post("/route", json={"start": "vsv", "end": "cuf"})
    assert response.status_code == 200
    data = response.json()
    assert data["path"][0] == "vsv"
    assert data["path"][-1] == "cuf"
    assert data["display_distance"].endswith(" km")
    assert [s["type"] for s in data["segments"]] == ["start", "stops", "change", "stops", "end"]

    change = data["segments"][2]
    assert change["station"]["id"] == "mar-a"
    assert (change["from_line"], change["to_line"]) == ("blue", "aqua")


def test_route_with_via(client):
    """Test via stops show up as segments."""
    response = client.post("/route", json={"start": "vsv", "end": "cuf", "vias": ["dad"]})
    assert response.status_code == 200
    assert "via" in [s["type"] for s in response.json()["segments"]]


def test_route_missing_end(client):
    """Test an incomplete selection is a bad request."""
    response = client.post("/route", json={"start": "vsv"})
    assert response.status_code == 400


def test_route_duplicate_station(client):
    """Test a repeated station is a bad request."""
    response = client.post("/route", json={"start": "vsv", "end": "cuf", "vias": ["vsv"]})
    assert response.status_code == 400
    assert "Versova" in response.json()["detail"]


def test_route_unknown_station(client):
    """Test an unknown station id is not found."""
    response = client.post("/route", json={"start": "vsv", "end": "nowhere"})
    assert response.status_code == 404
    assert "nowhere" in response.json()["detail"]


def test_route_not_reachable(client, monkeypatch):
    """Test an unreachable pair is reported by station name."""
    def fake_plan_trip(start, end, vias):
        raise NotReachable("vsv", "cuf")

    monkeypatch.setattr(api, "plan_trip", fake_plan_trip)
    response = client.post("/route", json={"start": "vsv", "end": "cuf"})
    assert response.status_code == 404
    assert response.json()["detail"] == "No path could be found between Versova and Cuffe Parade."
