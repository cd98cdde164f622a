"""Ports (interfaces) for the ports-and-adapters architecture."""

from pandal_planner.domain.ports.auth_gateway import AuthGateway
from pandal_planner.domain.ports.facility_repository import FacilityRepository
from pandal_planner.domain.ports.geolocation_provider import GeolocationProvider
from pandal_planner.domain.ports.map_surface import MapSurface, MarkerClickHandler
from pandal_planner.domain.ports.route_optimizer import RouteOptimizer
from pandal_planner.domain.ports.session_store import SessionStore
from pandal_planner.domain.ports.station_repository import StationRepository

__all__ = [
    "AuthGateway",
    "FacilityRepository",
    "GeolocationProvider",
    "MapSurface",
    "MarkerClickHandler",
    "RouteOptimizer",
    "SessionStore",
    "StationRepository",
]
