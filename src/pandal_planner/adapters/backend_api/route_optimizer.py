"""Backend route optimizer adapter."""

import logging

from pandal_planner.adapters.backend_api.constants import ROUTE_PATH
from pandal_planner.adapters.backend_api.http_client import BackendHttpClient
from pandal_planner.adapters.backend_api.parsers import parse_route_plan, route_request_payload
from pandal_planner.domain.models import (
    ErrorDetails,
    Facility,
    NetworkError,
    PlanningRejected,
    RoutePlan,
    Station,
)
from pandal_planner.domain.ports import RouteOptimizer

logger = logging.getLogger(__name__)


class BackendRouteOptimizer(RouteOptimizer):
    """Adapter for ``POST /api/route/optimal``.

    5xx statuses and transport failures are network errors; 4xx statuses and
    unusable success bodies mean the backend rejected the plan.
    """

    def __init__(self, http_client: BackendHttpClient) -> None:
        self._http_client = http_client

    async def optimize(self, origin: Station, facilities: list[Facility]) -> RoutePlan:
        payload = route_request_payload(origin, facilities)
        response = await self._http_client.request("POST", ROUTE_PATH, payload=payload)

        if response.status >= 500:
            details = ErrorDetails.from_status(response.status)
            logger.error(f"Route service returned status {response.status}: {details.reason}")
            raise NetworkError(f"Route service failed: {details.reason}", details)
        if not response.ok:
            details = ErrorDetails(status_code=response.status, reason=response.error_message())
            raise PlanningRejected(f"Route request rejected: {details.reason}", details)

        try:
            return parse_route_plan(response.body)
        except ValueError as e:
            logger.error(f"Unusable route response: {e}")
            details = ErrorDetails(status_code=response.status, reason=str(e))
            raise PlanningRejected("Route response could not be used", details) from e
