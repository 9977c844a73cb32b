"""FastAPI web interface for the metro pathfinder."""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .config import API_HOST, API_PORT, LOG_LEVEL
from .exceptions import (
    DuplicateWaypointError,
    InsufficientWaypoints,
    NotReachable,
    UnknownStationError,
)
from .geo import haversine_distance_km
from .itinerary import LineChangeSegment, Segment, StopsSegment
from .network import metro_graph
from .planner import plan_trip
from .stations import LINES, STATIONS, Station, find_stations_by_line, nearest_station, search_stations

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Metro Pathfinder",
    description="Shortest multi-stop routes on the Mumbai metro",
    version="0.1.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RouteRequest(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None
    vias: list[Optional[str]] = []


class StationOut(BaseModel):
    id: str
    name: str
    line: str
    latitude: float
    longitude: float
    interchange: bool


class SegmentOut(BaseModel):
    type: str
    station: Optional[StationOut] = None
    from_line: Optional[str] = None
    to_line: Optional[str] = None
    stops: Optional[list[StationOut]] = None


class RouteResponse(BaseModel):
    path: list[str]
    total_distance_km: float
    display_distance: str
    segments: list[SegmentOut]


def _station_out(station: Station) -> StationOut:
    return StationOut(
        id=station.id,
        name=station.name,
        line=station.line,
        latitude=station.latitude,
        longitude=station.longitude,
        interchange=station.interchange,
    )


def _segment_out(segment: Segment) -> SegmentOut:
    if isinstance(segment, StopsSegment):
        return SegmentOut(type=segment.kind, stops=[_station_out(s) for s in segment.stations])
    if isinstance(segment, LineChangeSegment):
        return SegmentOut(
            type=segment.kind,
            station=_station_out(segment.station),
            from_line=segment.from_line,
            to_line=segment.to_line,
        )
    return SegmentOut(type=segment.kind, station=_station_out(segment.station))


def _station_name(station_id: str) -> str:
    station = STATIONS.get(station_id)
    return station.name if station else station_id


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Metro Pathfinder", "stations": len(metro_graph)}


@app.get("/lines")
async def list_lines():
    """List metro lines with their display colors."""
    return {
        "lines": [
            {"code": line.code, "name": line.name, "color": line.color}
            for line in LINES.values()
        ]
    }


@app.get("/stations")
async def list_stations(line: Optional[str] = None, q: Optional[str] = None):
    """List all stations, optionally filtered by line and search text."""
    stations = find_stations_by_line(line) if line else list(STATIONS.values())
    if q is not None:
        stations = search_stations(q, stations)

    return {
        "count": len(stations),
        "stations": [_station_out(s) for s in stations],
    }


@app.get("/stations/nearest")
async def get_nearest_station(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    """Find the station closest to a map point."""
    station = nearest_station(lat, lon)
    if not station:
        raise HTTPException(status_code=404, detail="No stations available")

    return {
        "station": _station_out(station),
        "distance_km": haversine_distance_km(lat, lon, station.latitude, station.longitude),
    }


@app.post("/route", response_model=RouteResponse)
async def get_route_endpoint(request: RouteRequest):
    """Compute the shortest route from start to end through the via stations."""
    try:
        plan = plan_trip(request.start, request.end, request.vias)
    except UnknownStationError as e:
        raise HTTPException(status_code=404, detail=f"Station not found: {e.station_id}")
    except InsufficientWaypoints as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateWaypointError as e:
        raise HTTPException(
            status_code=400,
            detail=f"{_station_name(e.station_id)} is already part of the route",
        )
    except NotReachable as e:
        logger.info("No path between %s and %s", e.source_id, e.target_id)
        raise HTTPException(
            status_code=404,
            detail=(
                f"No path could be found between {_station_name(e.source_id)}"
                f" and {_station_name(e.target_id)}."
            ),
        )

    return RouteResponse(
        path=list(plan.route.path),
        total_distance_km=plan.total_distance,
        display_distance=f"{plan.total_distance:.2f} km",
        segments=[_segment_out(segment) for segment in plan.segments],
    )


def run_server(host: str = API_HOST, port: int = API_PORT):
    """Run the FastAPI server."""
    import uvicorn
    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
