"""Station repository port."""

from typing import Protocol

from pandal_planner.domain.models.coordinate import Coordinate
from pandal_planner.domain.models.station import Station
from pandal_planner.domain.models.zone import Zone


class StationRepository(Protocol):
    """Port for retrieving station information."""

    async def find_nearest_station(self, location: Coordinate) -> Station:
        """Find the station closest to a position.

        Raises:
            StationNotFound: If no station lies within the service area.
            NetworkError: On transport or HTTP failure.
        """
        ...

    async def get_stations_by_zone(self, zone: Zone) -> list[Station]:
        """List the stations of a scoped zone."""
        ...
