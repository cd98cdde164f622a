"""Error taxonomy for the trip planner.

Every condition raised by the core derives from TripPlannerError so the UI
boundary can catch them in one place. None of them is fatal to the process.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def from_status(cls, status_code: int | None) -> "ErrorDetails":
        """Build details with a human readable reason for an HTTP status code."""
        if status_code is None:
            reason = "Connection failed"
        elif status_code == 429:
            reason = "Rate limit exceeded"
        elif status_code == 502:
            reason = "Bad gateway (server error)"
        elif status_code == 503:
            reason = "Service unavailable"
        elif status_code == 504:
            reason = "Gateway timeout"
        else:
            reason = f"HTTP {status_code}"
        return cls(status_code=status_code, reason=reason)


class TripPlannerError(Exception):
    """Base class for all recoverable trip planner conditions."""


class InvalidCoordinate(TripPlannerError, ValueError):
    """A latitude or longitude was missing, non-numeric or non-finite."""


class GeolocationError(TripPlannerError):
    """The user's position could not be resolved."""


class GeolocationPermissionDenied(GeolocationError):
    """The user refused to share their location."""


class GeolocationUnsupported(GeolocationError):
    """The platform has no geolocation capability."""


class GeolocationUnavailable(GeolocationError):
    """Geolocation is supported and allowed but no position could be obtained."""


class StationNotFound(TripPlannerError):
    """No station lies within the service area of the given position."""


class NoFacilities(TripPlannerError):
    """A route was requested without an origin station or without facilities."""


class _DetailedError(TripPlannerError):
    def __init__(self, message: str, details: ErrorDetails | None = None) -> None:
        super().__init__(message)
        self.details = details or ErrorDetails(reason=message)


class NetworkError(_DetailedError):
    """Transport or HTTP failure talking to the backend."""


class PlanningRejected(_DetailedError):
    """The backend understood the route request but could not satisfy it."""


class AuthenticationError(_DetailedError):
    """Sign up or login was refused by the backend."""
