"""Application services (use cases) of the trip planner."""

from pandal_planner.application.services.auth_service import AuthService
from pandal_planner.application.services.geolocation_resolver import GeolocationResolver
from pandal_planner.application.services.map_adapter import MapAdapter
from pandal_planner.application.services.nearest_station_resolver import NearestStationResolver
from pandal_planner.application.services.route_planner import RoutePlanner
from pandal_planner.application.services.selection_controller import SelectionController
from pandal_planner.application.services.zone_browser import ZoneBrowser

__all__ = [
    "AuthService",
    "GeolocationResolver",
    "MapAdapter",
    "NearestStationResolver",
    "RoutePlanner",
    "SelectionController",
    "ZoneBrowser",
]
