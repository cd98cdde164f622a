"""Geolocation adapters."""

from pandal_planner.adapters.geolocation.static_provider import (
    StaticGeolocationProvider,
    UnsupportedGeolocationProvider,
)

__all__ = ["StaticGeolocationProvider", "UnsupportedGeolocationProvider"]
