"""Constants for the SNCF API adapter.

Uses the SNCF open data API, a Navitia coverage.
API Documentation: https://doc.navitia.io/

Authentication: the API key is sent as the user of a basic auth header with an
empty password. The free plan allows 5000 requests per day.
"""

SNCF_BASE_URL = "https://api.sncf.com/v1/coverage/sncf"

# Endpoint paths relative to the coverage base URL
PLACES_PATH = "/places"  # GET /places?q=...
STOP_AREA_DEPARTURES_PATH = "/stop_areas/{stop_area_id}/departures"
VEHICLE_JOURNEY_PATH = "/vehicle_journeys/{vehicle_journey_id}"
DISRUPTIONS_PATH = "/disruptions"
EQUIPMENT_REPORTS_PATH = "/equipment_reports"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Navitia vocabulary
STOP_AREA_TYPE = "stop_area"
VEHICLE_JOURNEY_LINK_TYPE = "vehicle_journey"
REALTIME_FRESHNESS = "realtime"

PLATFORM_FALLBACK = "N/A"
