"""Geolocation providers for environments without a positioning service."""

import logging

from pandal_planner.domain.models import (
    Coordinate,
    GeolocationPermissionDenied,
    GeolocationUnavailable,
    GeolocationUnsupported,
)
from pandal_planner.domain.ports import GeolocationProvider

logger = logging.getLogger(__name__)


class StaticGeolocationProvider(GeolocationProvider):
    """Reports a fixed position, e.g. from configuration or the command line."""

    def __init__(self, lat: float | None, lon: float | None, enabled: bool = True) -> None:
        """Initialize the provider.

        Args:
            lat: Latitude, or None when unknown.
            lon: Longitude, or None when unknown.
            enabled: False when the user has not allowed location access.
        """
        self._lat = lat
        self._lon = lon
        self._enabled = enabled

    async def current_position(self) -> Coordinate:
        if not self._enabled:
            raise GeolocationPermissionDenied("Location access is disabled")
        if self._lat is None or self._lon is None:
            raise GeolocationUnavailable("No position configured")
        return Coordinate.parse(self._lat, self._lon)


class UnsupportedGeolocationProvider(GeolocationProvider):
    """Provider for platforms that cannot locate the user at all."""

    async def current_position(self) -> Coordinate:
        raise GeolocationUnsupported("Geolocation is not supported on this platform")
