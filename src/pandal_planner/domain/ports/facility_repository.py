"""Facility repository port."""

from typing import Protocol

from pandal_planner.domain.models.facility import Facility
from pandal_planner.domain.models.zone import Zone


class FacilityRepository(Protocol):
    """Port for retrieving facility (pandal) listings.

    All methods raise NetworkError on transport or HTTP failure.
    """

    async def get_all_facilities(self) -> list[Facility]:
        """List every facility regardless of zone."""
        ...

    async def get_facilities_by_zone(self, zone: Zone) -> list[Facility]:
        """List the facilities of a scoped zone."""
        ...

    async def get_facilities_by_station(self, zone: Zone, station_id: int) -> list[Facility]:
        """List the facilities associated with one station of a zone."""
        ...
