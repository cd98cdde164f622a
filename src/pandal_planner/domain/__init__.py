"""Domain layer - core models and ports."""

from pandal_planner.domain.models import (
    Coordinate,
    Facility,
    RoutePlan,
    Selection,
    Station,
    Zone,
)
from pandal_planner.domain.ports import (
    FacilityRepository,
    MapSurface,
    RouteOptimizer,
    StationRepository,
)

__all__ = [
    "Coordinate",
    "Facility",
    "FacilityRepository",
    "MapSurface",
    "RouteOptimizer",
    "RoutePlan",
    "Selection",
    "Station",
    "StationRepository",
    "Zone",
]
