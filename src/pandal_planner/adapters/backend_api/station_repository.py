"""Backend station repository adapter."""

import logging

from pandal_planner.adapters.backend_api.constants import (
    NEAREST_STATION_PATH,
    STATIONS_BY_ZONE_PATH,
)
from pandal_planner.adapters.backend_api.http_client import BackendHttpClient
from pandal_planner.adapters.backend_api.parsers import (
    parse_nearest_station,
    parse_zone_stations,
)
from pandal_planner.domain.models import (
    Coordinate,
    ErrorDetails,
    NetworkError,
    Station,
    StationNotFound,
    Zone,
)
from pandal_planner.domain.ports import StationRepository

logger = logging.getLogger(__name__)


class BackendStationRepository(StationRepository):
    """Adapter for the backend's metro station endpoints."""

    def __init__(self, http_client: BackendHttpClient) -> None:
        self._http_client = http_client

    async def find_nearest_station(self, location: Coordinate) -> Station:
        """Find the station closest to a position.

        A 404 or an empty body means there is no station in the service area.
        """
        params = {"lat": str(location.lat), "lon": str(location.lon)}
        response = await self._http_client.request("GET", NEAREST_STATION_PATH, params=params)

        if response.status == 404:
            raise StationNotFound(f"No station near {location.lat}, {location.lon}")
        if not response.ok:
            details = ErrorDetails.from_status(response.status)
            logger.error(
                f"Nearest station lookup returned status {response.status}: "
                f"{response.error_message()}"
            )
            raise NetworkError(f"Nearest station lookup failed: {details.reason}", details)
        if not isinstance(response.body, dict) or not response.body:
            raise StationNotFound(f"No station near {location.lat}, {location.lon}")

        return parse_nearest_station(response.body)

    async def get_stations_by_zone(self, zone: Zone) -> list[Station]:
        if zone.code is None:
            return []
        data = await self._http_client.get_json(STATIONS_BY_ZONE_PATH.format(zone_code=zone.code))
        return parse_zone_stations(data)
