"""Backend facility repository adapter."""

from pandal_planner.adapters.backend_api.constants import (
    ALL_FACILITIES_PATH,
    FACILITIES_BY_STATION_PATH,
    FACILITIES_BY_ZONE_PATH,
)
from pandal_planner.adapters.backend_api.http_client import BackendHttpClient
from pandal_planner.adapters.backend_api.parsers import parse_facilities
from pandal_planner.domain.models import Facility, Zone
from pandal_planner.domain.ports import FacilityRepository


class BackendFacilityRepository(FacilityRepository):
    """Adapter for the backend's pandal listings."""

    def __init__(self, http_client: BackendHttpClient) -> None:
        self._http_client = http_client

    async def get_all_facilities(self) -> list[Facility]:
        return parse_facilities(await self._http_client.get_json(ALL_FACILITIES_PATH))

    async def get_facilities_by_zone(self, zone: Zone) -> list[Facility]:
        if zone.code is None:
            return await self.get_all_facilities()
        path = FACILITIES_BY_ZONE_PATH.format(zone_code=zone.code)
        return parse_facilities(await self._http_client.get_json(path))

    async def get_facilities_by_station(self, zone: Zone, station_id: int) -> list[Facility]:
        if zone.code is None:
            raise ValueError("Station pandals need a scoped zone")
        path = FACILITIES_BY_STATION_PATH.format(zone_code=zone.code, station_id=station_id)
        return parse_facilities(await self._http_client.get_json(path))
