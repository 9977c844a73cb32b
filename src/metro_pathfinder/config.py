"""Configuration settings for the metro pathfinder."""

import os

from dotenv import load_dotenv

load_dotenv()

# Geometry
EARTH_RADIUS_KM = 6371.0

# Edge weights (kilometers)
TRANSFER_PENALTY_KM = float(os.getenv("METRO_TRANSFER_PENALTY_KM", "0.5"))
SAME_LINE_EPSILON_KM = float(os.getenv("METRO_SAME_LINE_EPSILON_KM", "0.01"))

# Logging
LOG_LEVEL = os.getenv("METRO_LOG_LEVEL", "WARNING").upper()

# HTTP API
API_HOST = os.getenv("METRO_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("METRO_API_PORT", "8000"))
