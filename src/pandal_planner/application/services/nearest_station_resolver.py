"""Nearest-station resolver."""

import logging

from pandal_planner.domain.models import Coordinate, Station
from pandal_planner.domain.ports import StationRepository

logger = logging.getLogger(__name__)


class NearestStationResolver:
    """Looks up the station closest to the user, independent of zone selection."""

    def __init__(self, station_repository: StationRepository) -> None:
        self._station_repository = station_repository

    async def find_nearest(self, location: Coordinate) -> Station:
        """Find the nearest station.

        Raises:
            StationNotFound: If no station lies within the service area.
            NetworkError: If the backend could not be reached. Not retried here.
        """
        station = await self._station_repository.find_nearest_station(location)
        logger.info(f"Nearest station to {location.lat:.4f}, {location.lon:.4f}: {station.name}")
        return station
