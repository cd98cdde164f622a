"""Paths of the festival backend REST API.

All paths are relative to the configured backend URL.
"""

NEAREST_STATION_PATH = "/metro/nearest/location"  # GET ?lat=&lon=
ALL_FACILITIES_PATH = "/pandals"
FACILITIES_BY_ZONE_PATH = "/pandals/zone/{zone_code}/simple"
STATIONS_BY_ZONE_PATH = "/zone/{zone_code}/metros/simple"
FACILITIES_BY_STATION_PATH = "/zone/{zone_code}/metro/{station_id}/pandals/simple"
ROUTE_PATH = "/api/route/optimal"  # POST
SIGNUP_PATH = "/auth/signup"  # POST
LOGIN_PATH = "/auth/login"  # POST

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
