"""Mumbai metro station data and station lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .geo import haversine_distance_km


@dataclass(frozen=True)
class Line:
    """A metro line."""
    code: str
    name: str
    color: str


@dataclass(frozen=True)
class Station:
    """Represents one line's platform at a metro station."""
    id: str
    name: str
    line: str
    latitude: float
    longitude: float
    interchange: bool = False


LINES: dict[str, Line] = {
    "blue": Line("blue", "Line 1", "#007bff"),
    "yellow": Line("yellow", "Line 2A", "#ffc107"),
    "red": Line("red", "Line 7", "#dc3545"),
    "aqua": Line("aqua", "Line 3", "#00ffff"),
}

# Format: id, name, line, lat, lon, interchange
# Interchanges are modelled as one station record per line, joined by a transfer link.
STATIONS_DATA = [
    # Line 1 (blue)
    ("vsv", "Versova", "blue", 19.1213, 72.8175, False),
    ("dnn", "D.N. Nagar", "blue", 19.1200, 72.8270, True),
    ("azn", "Azad Nagar", "blue", 19.1215, 72.8330, False),
    ("and", "Andheri", "blue", 19.1195, 72.8435, True),
    ("weh", "W.E.H.", "blue", 19.1158, 72.8530, True),
    ("cha", "Chakala (J.B. Nagar)", "blue", 19.1100, 72.8590, False),
    ("air", "Airport Road", "blue", 19.1055, 72.8645, False),
    ("mar", "Marol Naka", "blue", 19.1040, 72.8730, True),
    ("sak", "Saki Naka", "blue", 19.0915, 72.8830, False),
    ("asa", "Asalpha", "blue", 19.0850, 72.8880, False),
    ("jag", "Jagruti Nagar", "blue", 19.0780, 72.8980, False),
    ("ght", "Ghatkopar", "blue", 19.0740, 72.9040, True),

    # Line 2A (yellow)
    ("dah", "Dahisar (East)", "yellow", 19.2510, 72.8645, True),
    ("y-an", "Anand Nagar", "yellow", 19.2455, 72.8597, False),
    ("y-ka", "Kandarpada", "yellow", 19.2393, 72.8549, False),
    ("y-ma", "Mandapeshwar", "yellow", 19.2340, 72.8502, False),
    ("y-ek", "Eksar", "yellow", 19.2278, 72.8465, False),
    ("y-bo", "Borivali (West)", "yellow", 19.2230, 72.8440, False),
    ("y-pe", "Pahadi Eksar", "yellow", 19.2162, 72.8420, False),
    ("y-da", "Dahanukarwadi", "yellow", 19.2085, 72.8410, False),
    ("y-va", "Valnai", "yellow", 19.1995, 72.8390, False),
    ("y-ml", "Malad (West)", "yellow", 19.1918, 72.8375, False),
    ("y-lm", "Lower Malad", "yellow", 19.1845, 72.8360, False),
    ("y-kp", "Kasturi Park", "yellow", 19.1770, 72.8345, False),
    ("y-bn", "Bangur Nagar", "yellow", 19.1680, 72.8325, False),
    ("y-go", "Goregaon (West)", "yellow", 19.1610, 72.8310, False),
    ("y-os", "Oshiwara", "yellow", 19.1480, 72.8290, False),
    ("y-lo", "Lower Oshiwara", "yellow", 19.1400, 72.8280, False),
    ("y-aw", "Andheri (West)", "yellow", 19.1310, 72.8275, False),
    ("dnn-y", "D.N. Nagar", "yellow", 19.1200, 72.8270, True),

    # Line 7 (red)
    ("dah-r", "Dahisar (East)", "red", 19.2510, 72.8645, True),
    ("ovp-r", "Ovaripada", "red", 19.2430, 72.8615, False),
    ("ras-r", "Rashtriya Udyan", "red", 19.2360, 72.8630, False),
    ("dev-r", "Devipada", "red", 19.2290, 72.8640, False),
    ("mag-r", "Magathane", "red", 19.2220, 72.8650, False),
    ("poi-r", "Poisar", "red", 19.2130, 72.8660, False),
    ("aku-r", "Akurli", "red", 19.2040, 72.8670, False),
    ("kur-r", "Kurar", "red", 19.1950, 72.8680, False),
    ("din-r", "Dindoshi", "red", 19.1770, 72.8700, False),
    ("aar-r", "Aarey", "red", 19.1640, 72.8710, False),
    ("jog-r", "Jogeshwari (E)", "red", 19.1430, 72.8660, False),
    ("mog-r", "Mogra", "red", 19.1310, 72.8610, False),
    ("gun", "Gundavali", "red", 19.1159, 72.8535, True),

    # Line 3 (aqua)
    ("aar", "Aarey", "aqua", 19.1411, 72.8710, False),
    ("see", "SEEPZ", "aqua", 19.1290, 72.8768, False),
    ("mid", "MIDC", "aqua", 19.1215, 72.8805, False),
    ("mar-a", "Marol Naka", "aqua", 19.1082, 72.8837, True),
    ("csm-t2", "CSMIA T2", "aqua", 19.1002, 72.8745, False),
    ("sah", "Sahar Airport", "aqua", 19.0985, 72.8620, False),
    ("csm-t1", "CSMIA T1", "aqua", 19.0910, 72.8655, False),
    ("san", "Santacruz", "aqua", 19.0830, 72.8590, False),
    ("bkc", "BKC", "aqua", 19.0665, 72.8625, False),
    ("dha", "Dharavi", "aqua", 19.0520, 72.8580, False),
    ("dad", "Dadar", "aqua", 19.0220, 72.8445, True),
    ("sid", "Siddhivinayak", "aqua", 19.0275, 72.8442, False),
    ("wor", "Worli", "aqua", 19.0170, 72.8290, False),
    ("sci", "Science Museum", "aqua", 19.0060, 72.8190, False),
    ("mct", "Mumbai Central", "aqua", 18.9730, 72.8190, True),
    ("kal", "Kalbadevi", "aqua", 18.9480, 72.8270, False),
    ("cst", "CST Metro", "aqua", 18.9400, 72.8340, True),
    ("chu", "Churchgate", "aqua", 18.9330, 72.8280, True),
    ("cuf", "Cuffe Parade", "aqua", 18.9130, 72.8170, False),
]

# Stations in running order for each line
LINE_SEQUENCES: dict[str, list[str]] = {
    "blue": [
        "vsv", "dnn", "azn", "and", "weh", "cha", "air", "mar", "sak", "asa",
        "jag", "ght"
    ],
    "yellow": [
        "dah", "y-an", "y-ka", "y-ma", "y-ek", "y-bo", "y-pe", "y-da", "y-va",
        "y-ml", "y-lm", "y-kp", "y-bn", "y-go", "y-os", "y-lo", "y-aw", "dnn-y"
    ],
    "red": [
        "dah-r", "ovp-r", "ras-r", "dev-r", "mag-r", "poi-r", "aku-r", "kur-r",
        "din-r", "aar-r", "jog-r", "mog-r", "gun"
    ],
    "aqua": [
        "aar", "see", "mid", "mar-a", "csm-t2", "sah", "csm-t1", "san", "bkc",
        "dha", "dad", "sid", "wor", "sci", "mct", "kal", "cst", "chu", "cuf"
    ],
}

# Physical transfer links between interchange platforms on different lines
INTERCHANGE_LINKS: list[tuple[str, str]] = [
    ("dnn", "dnn-y"),  # Blue <-> Yellow at D.N. Nagar
    ("dah", "dah-r"),  # Yellow <-> Red at Dahisar (East)
    ("weh", "gun"),    # Blue <-> Red at W.E.H./Gundavali
    ("mar", "mar-a"),  # Blue <-> Aqua at Marol Naka
]


def _line_connections() -> list[tuple[str, str]]:
    connections = []
    for stations in LINE_SEQUENCES.values():
        for i in range(len(stations) - 1):
            connections.append((stations[i], stations[i + 1]))
    return connections


CONNECTIONS: list[tuple[str, str]] = _line_connections() + INTERCHANGE_LINKS

# Build station objects
STATIONS: dict[str, Station] = {}
for data in STATIONS_DATA:
    station = Station(
        id=data[0],
        name=data[1],
        line=data[2],
        latitude=data[3],
        longitude=data[4],
        interchange=data[5],
    )
    STATIONS[station.id] = station

# Lookup by lower-cased name; the first platform listed wins for shared names
STATION_NAME_INDEX: dict[str, Station] = {}
for station in STATIONS.values():
    STATION_NAME_INDEX.setdefault(station.name.lower(), station)


def station_label(station: Station) -> str:
    """Display label used in station pickers, e.g. ``Andheri (blue)``."""
    return f"{station.name} ({station.line})"


def find_station(query: str) -> Optional[Station]:
    """Find a station by id or name (fuzzy match)."""
    query_lower = query.lower().strip()
    if not query_lower:
        return None

    if query_lower in STATIONS:
        return STATIONS[query_lower]

    # Exact match
    if query_lower in STATION_NAME_INDEX:
        return STATION_NAME_INDEX[query_lower]

    # Partial match - prefer shorter station names (more specific)
    matches = []
    for name, station in STATION_NAME_INDEX.items():
        if query_lower in name:
            matches.append((len(name), station))

    if matches:
        matches.sort(key=lambda x: x[0])
        return matches[0][1]

    return None


def find_stations_by_line(line: str) -> list[Station]:
    """Find all stations on a given line."""
    line = line.lower()
    return [s for s in STATIONS.values() if s.line == line]


def search_stations(query: str, stations: Optional[Iterable[Station]] = None) -> list[Station]:
    """Filter stations whose name or line contains ``query``, sorted by name."""
    pool = sorted(STATIONS.values() if stations is None else stations, key=lambda s: s.name)
    query_lower = query.lower()
    if not query_lower:
        return pool
    return [s for s in pool if query_lower in s.name.lower() or query_lower in s.line.lower()]


def nearest_station(
    latitude: float, longitude: float, stations: Optional[Iterable[Station]] = None
) -> Optional[Station]:
    """Return the station closest to a point, or None when there are no stations."""
    closest = None
    min_distance = float("inf")
    for station in STATIONS.values() if stations is None else stations:
        distance = haversine_distance_km(latitude, longitude, station.latitude, station.longitude)
        if distance < min_distance:
            min_distance = distance
            closest = station
    return closest
