"""Tests for the static geolocation providers."""

import pytest

from pandal_planner.adapters.geolocation import (
    StaticGeolocationProvider,
    UnsupportedGeolocationProvider,
)
from pandal_planner.domain.models import (
    Coordinate,
    GeolocationPermissionDenied,
    GeolocationUnavailable,
    GeolocationUnsupported,
    InvalidCoordinate,
)


@pytest.mark.asyncio
async def test_configured_position_is_returned() -> None:
    provider = StaticGeolocationProvider(22.5, 88.3)

    assert await provider.current_position() == Coordinate(22.5, 88.3)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("provider", "error"),
    [
        (StaticGeolocationProvider(22.5, 88.3, enabled=False), GeolocationPermissionDenied),
        (StaticGeolocationProvider(None, 88.3), GeolocationUnavailable),
        (StaticGeolocationProvider(float("nan"), 88.3), InvalidCoordinate),
        (UnsupportedGeolocationProvider(), GeolocationUnsupported),
    ],
)
async def test_failures(provider: object, error: type[Exception]) -> None:
    """Given an unusable provider, when asking for a position, then the matching error is raised."""
    with pytest.raises(error):
        await provider.current_position()  # type: ignore[attr-defined]
