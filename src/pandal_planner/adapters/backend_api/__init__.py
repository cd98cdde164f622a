"""Adapters for the festival backend REST API."""

from pandal_planner.adapters.backend_api.auth_gateway import BackendAuthGateway
from pandal_planner.adapters.backend_api.facility_repository import BackendFacilityRepository
from pandal_planner.adapters.backend_api.http_client import BackendHttpClient
from pandal_planner.adapters.backend_api.route_optimizer import BackendRouteOptimizer
from pandal_planner.adapters.backend_api.station_repository import BackendStationRepository

__all__ = [
    "BackendAuthGateway",
    "BackendFacilityRepository",
    "BackendHttpClient",
    "BackendRouteOptimizer",
    "BackendStationRepository",
]
