"""Trip state shared by the orchestrator components."""

from dataclasses import dataclass, field

from pandal_planner.domain.models import (
    Coordinate,
    Facility,
    RequestGeneration,
    RoutePlan,
    Selection,
    Station,
    Zone,
)

# Keys of TripState.messages
LOCATION_MESSAGE = "location"
NEAREST_STATION_MESSAGE = "nearest_station"
ROUTE_MESSAGE = "route"


@dataclass
class RequestGenerations:
    """One generation counter per kind of asynchronous fetch."""

    stations: RequestGeneration = field(default_factory=lambda: RequestGeneration("stations"))
    facilities: RequestGeneration = field(default_factory=lambda: RequestGeneration("facilities"))
    route: RequestGeneration = field(default_factory=lambda: RequestGeneration("route"))


@dataclass
class TripState:
    """State of one planning session.

    Ownership: selection, stations and facilities are written by the zone
    browser and selection controller, route_plan by the route planner. The
    map adapter only reads.
    """

    user_location: Coordinate | None = None
    nearest_station: Station | None = None
    nearest_status: str = "unknown"  # unknown, loading, found, not_found, error
    selection: Selection = field(default_factory=Selection.initial)
    stations: list[Station] = field(default_factory=list)
    # Zone the stations list was loaded for; lags selection.zone while loading
    stations_zone: Zone = Zone.ALL
    facilities: list[Facility] = field(default_factory=list)
    stations_loading: bool = False
    facilities_loading: bool = False
    route_plan: RoutePlan | None = None
    route_loading: bool = False
    # User-visible messages by topic (see *_MESSAGE keys)
    messages: dict[str, str] = field(default_factory=dict)

    def selected_station(self) -> Station | None:
        """The zone station matching the current selection, if it is loaded."""
        station_id = self.selection.station_id
        if station_id is None:
            return None
        for station in self.stations:
            if station.id == station_id:
                return station
        return None

    def station_in_selected_zone(self, station_id: int) -> Station | None:
        """The listed station with this id, if the listing is the selected zone's and settled."""
        if self.stations_loading or self.stations_zone is not self.selection.zone:
            return None
        return next((s for s in self.stations if s.id == station_id), None)
