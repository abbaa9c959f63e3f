"""Constants for the Navitia API adapter.

Uses the Navitia API served by the Île-de-France Mobilités PRIM marketplace.
API Documentation: https://doc.navitia.io/

Authentication: a static key in the "apiKey" header.
"""

# Header carrying the PRIM API key
API_KEY_HEADER = "apiKey"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Relative endpoints
PLACES_PATH = "/places"  # GET /places?q=...
JOURNEYS_PATH = "/journeys"  # GET /journeys?from=...&to=...
LINES_PATH = "/lines"  # GET /lines?count=...&filter=...
LINE_STOP_POINTS_PATH = "/lines/{line_id}/stop_points"  # GET /lines/:id/stop_points
# Navitia expects "lon;lat", longitude first
PLACES_NEARBY_PATH = "/coord/{lon};{lat}/places_nearby"

# Place type used for whole stations (as opposed to stop points, addresses, POIs)
STOP_AREA_TYPE = "stop_area"

# Commercial mode filter for the metro network
METRO_COMMERCIAL_MODE_ID = "commercial_mode:Metro"

# RER and Transilien line letters included in the catalog
TARGET_TRAIN_CODES = ("A", "B", "C", "D", "E", "H", "J", "K", "L", "N", "P", "R", "U")

# Line defaults when the upstream entry omits a field
DEFAULT_LINE_COLOR = "333333"
DEFAULT_LINE_MODE = "Transport"

UNKNOWN_API_ERROR = "Unknown API Error"
