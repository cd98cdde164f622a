"""Route planner: on-demand multi-stop planning with superseding."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pandal_planner.domain.models import NoFacilities, TripPlannerError

if TYPE_CHECKING:
    from pandal_planner.application.state import TripState
    from pandal_planner.domain.models import Facility, RequestGeneration, RoutePlan, Station
    from pandal_planner.domain.ports import RouteOptimizer

logger = logging.getLogger(__name__)


class RoutePlanner:
    """Owns the visible RoutePlan and the "route" request generation."""

    def __init__(
        self,
        state: TripState,
        optimizer: RouteOptimizer,
        generation: RequestGeneration,
    ) -> None:
        self._state = state
        self._optimizer = optimizer
        self._generation = generation

    async def plan(
        self, origin: Station | None, facilities: Sequence[Facility]
    ) -> RoutePlan | None:
        """Plan a route from origin through the given facilities.

        Only the most recently issued request may change the visible plan. A
        superseded request returns None whether it succeeded or failed.

        Raises:
            NoFacilities: If origin is missing or facilities is empty. No request is sent.
            NetworkError: If the current request failed in transport.
            PlanningRejected: If the backend refused the current request.
        """
        if origin is None:
            raise NoFacilities("Select a station to start the route from")
        if not facilities:
            raise NoFacilities("There are no pandals to visit from this station")

        tag = self._generation.issue()
        self._state.route_loading = True
        logger.info(
            f"Requesting route from {origin.name} through {len(facilities)} pandal(s) (tag {tag})"
        )

        try:
            plan = await self._optimizer.optimize(origin, list(facilities))
        except TripPlannerError as e:
            if not self._generation.is_current(tag):
                logger.debug(f"Discarding stale route failure (tag {tag}): {e}")
                return None
            self._state.route_loading = False
            logger.warning(f"Route planning failed: {e}")
            raise

        if not self._generation.is_current(tag):
            logger.debug(
                f"Discarding stale route plan (tag {tag}, current {self._generation.current})"
            )
            return None

        self._state.route_plan = plan
        self._state.route_loading = False
        logger.info(
            f"Route planned with {len(plan.waypoints)} waypoint(s) to {plan.destination.name}"
        )
        return plan

    def invalidate(self) -> None:
        """Supersede any in-flight request and drop the visible plan.

        Called on every selection change.
        """
        self._generation.issue()
        if self._state.route_plan is not None:
            logger.info("Clearing route plan after selection change")
        self._state.route_plan = None
        self._state.route_loading = False

    def clear(self) -> None:
        """Explicit user action: remove the route from the map."""
        self.invalidate()
