"""Route plan domain model."""

from dataclasses import dataclass

from pandal_planner.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class RouteStop:
    """A named stop on a planned route."""

    name: str
    location: Coordinate


@dataclass(frozen=True)
class RoutePlan:
    """Ordered stops returned by the route optimizer.

    Waypoints are kept in the order the backend returned them.
    """

    origin: RouteStop
    destination: RouteStop
    waypoints: tuple[RouteStop, ...] = ()

    def stops(self) -> list[RouteStop]:
        """All stops in travel order: origin, waypoints, destination."""
        return [self.origin, *self.waypoints, self.destination]
