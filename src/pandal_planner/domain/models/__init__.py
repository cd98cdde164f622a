"""Domain models for the festival trip planner."""

from pandal_planner.domain.models.coordinate import Coordinate
from pandal_planner.domain.models.errors import (
    AuthenticationError,
    ErrorDetails,
    GeolocationError,
    GeolocationPermissionDenied,
    GeolocationUnavailable,
    GeolocationUnsupported,
    InvalidCoordinate,
    NetworkError,
    NoFacilities,
    PlanningRejected,
    StationNotFound,
    TripPlannerError,
)
from pandal_planner.domain.models.facility import Facility
from pandal_planner.domain.models.map_frame import MapFrame, Marker, MarkerKind
from pandal_planner.domain.models.request_generation import RequestGeneration
from pandal_planner.domain.models.route_plan import RoutePlan, RouteStop
from pandal_planner.domain.models.selection import Selection
from pandal_planner.domain.models.session import Session
from pandal_planner.domain.models.station import Station
from pandal_planner.domain.models.zone import Zone

__all__ = [
    "AuthenticationError",
    "Coordinate",
    "ErrorDetails",
    "Facility",
    "GeolocationError",
    "GeolocationPermissionDenied",
    "GeolocationUnavailable",
    "GeolocationUnsupported",
    "InvalidCoordinate",
    "MapFrame",
    "Marker",
    "MarkerKind",
    "NetworkError",
    "NoFacilities",
    "PlanningRejected",
    "RequestGeneration",
    "RoutePlan",
    "RouteStop",
    "Selection",
    "Session",
    "Station",
    "StationNotFound",
    "TripPlannerError",
    "Zone",
]
