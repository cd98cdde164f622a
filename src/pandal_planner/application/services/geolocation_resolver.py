"""Geolocation resolver."""

import logging

from pandal_planner.domain.models import Coordinate
from pandal_planner.domain.ports import GeolocationProvider

logger = logging.getLogger(__name__)


class GeolocationResolver:
    """Resolves the user's position once per session."""

    def __init__(self, provider: GeolocationProvider) -> None:
        self._provider = provider
        self._position: Coordinate | None = None

    @property
    def position(self) -> Coordinate | None:
        return self._position

    async def resolve(self) -> Coordinate:
        """Return the user's position, asking the provider only until it succeeds.

        Raises:
            GeolocationError: If the provider cannot supply a position.
            InvalidCoordinate: If the provider produced a non-finite position.
        """
        if self._position is not None:
            return self._position

        position = await self._provider.current_position()
        self._position = position
        logger.info(f"Resolved user location: {position.lat:.4f}, {position.lon:.4f}")
        return position
