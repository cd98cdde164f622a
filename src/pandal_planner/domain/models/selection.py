"""Selection domain model."""

from dataclasses import dataclass

from pandal_planner.domain.models.zone import Zone


@dataclass(frozen=True)
class Selection:
    """The user's current zone and, within a scoped zone, station."""

    zone: Zone
    station_id: int | None = None

    def __post_init__(self) -> None:
        if self.zone is Zone.ALL and self.station_id is not None:
            raise ValueError("A station cannot be selected in the unscoped ALL view")

    @classmethod
    def initial(cls) -> "Selection":
        return cls(zone=Zone.ALL)

    def with_zone(self, zone: Zone) -> "Selection":
        """Return a selection for another zone. The station is always cleared."""
        return Selection(zone=zone)

    def with_station(self, station_id: int) -> "Selection":
        return Selection(zone=self.zone, station_id=station_id)
