"""Geolocation provider port."""

from typing import Protocol

from pandal_planner.domain.models.coordinate import Coordinate


class GeolocationProvider(Protocol):
    """Port for the platform capability that knows where the user is."""

    async def current_position(self) -> Coordinate:
        """Return the user's current position.

        Raises:
            GeolocationPermissionDenied: If the user refused location access.
            GeolocationUnsupported: If the platform cannot locate the user.
            GeolocationUnavailable: If no position could be obtained.
        """
        ...
