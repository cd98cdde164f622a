"""Route optimizer port."""

from typing import Protocol

from pandal_planner.domain.models.facility import Facility
from pandal_planner.domain.models.route_plan import RoutePlan
from pandal_planner.domain.models.station import Station


class RouteOptimizer(Protocol):
    """Port for the backend that orders a multi-stop visit."""

    async def optimize(self, origin: Station, facilities: list[Facility]) -> RoutePlan:
        """Request an ordered route from origin through all facilities.

        Raises:
            NetworkError: On transport failure or server error.
            PlanningRejected: If the backend refused the request.
        """
        ...
