"""Station domain model."""

from dataclasses import dataclass

from pandal_planner.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class Station:
    """A transit station.

    The nearest station has no id; zone-scoped stations carry an id that is
    unique within their zone.
    """

    name: str
    location: Coordinate
    id: int | None = None
