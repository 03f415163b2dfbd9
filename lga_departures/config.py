#!/usr/bin/env python3

"""
Runtime configuration for the LaGuardia departure tool.

Values come from environment variables with sensible defaults.
"""

import os
from typing import Optional

# Reference point for all navaid distances (KLGA airport reference point)
HUB_IDENT = "KLGA"
HUB_LATITUDE = 40.7772
HUB_LONGITUDE = -73.8726

# Earth radius used for great-circle distances, nautical miles
EARTH_RADIUS_NM = 3440.065

# Snapshot tables
DATA_DIR = os.getenv("LGADEP_DATA_DIR", "data")
DATA_URL: Optional[str] = os.getenv("LGADEP_DATA_URL") or None
HTTP_TIMEOUT = int(os.getenv("LGADEP_HTTP_TIMEOUT", "15"))

# Search
SEARCH_LIMIT = 50

# Weather
METAR_URL = os.getenv("LGADEP_METAR_URL", "https://aviationweather.gov/api/data/metar")
WX_CONCURRENCY = int(os.getenv("LGADEP_WX_CONCURRENCY", "5"))
WX_INTERVAL_SECONDS = float(os.getenv("LGADEP_WX_INTERVAL", "60"))

# Persisted preferences
STATE_FILE = os.getenv("LGADEP_STATE_FILE", os.path.expanduser("~/.lga_departures.json"))
WATCHLIST_MAX = 20
SECONDARY_WATCHLIST_MAX = 15

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
