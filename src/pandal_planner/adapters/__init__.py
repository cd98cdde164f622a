"""Adapters layer - external system integrations."""

from pandal_planner.adapters.backend_api import (
    BackendAuthGateway,
    BackendFacilityRepository,
    BackendHttpClient,
    BackendRouteOptimizer,
    BackendStationRepository,
)
from pandal_planner.adapters.config import AppConfig
from pandal_planner.adapters.geolocation import (
    StaticGeolocationProvider,
    UnsupportedGeolocationProvider,
)
from pandal_planner.adapters.map import GeoJsonMapSurface
from pandal_planner.adapters.session import FileSessionStore, MemorySessionStore

__all__ = [
    "AppConfig",
    "BackendAuthGateway",
    "BackendFacilityRepository",
    "BackendHttpClient",
    "BackendRouteOptimizer",
    "BackendStationRepository",
    "FileSessionStore",
    "GeoJsonMapSurface",
    "MemorySessionStore",
    "StaticGeolocationProvider",
    "UnsupportedGeolocationProvider",
]
