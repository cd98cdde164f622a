"""Map adapter: trip state to render primitives, clicks back to selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pandal_planner.domain.models import Coordinate, MapFrame, Marker, MarkerKind, Zone

if TYPE_CHECKING:
    from pandal_planner.application.services.selection_controller import SelectionController
    from pandal_planner.application.state import TripState
    from pandal_planner.domain.models import Facility
    from pandal_planner.domain.ports import MapSurface

logger = logging.getLogger(__name__)

USER_MARKER_ID = "user"
NEAREST_STATION_MARKER_ID = "nearest"
STATION_MARKER_PREFIX = "station:"
FACILITY_MARKER_PREFIX = "facility:"


def station_marker_id(station_id: int) -> str:
    return f"{STATION_MARKER_PREFIX}{station_id}"


def facility_marker_id(facility: Facility) -> str:
    """Identity of a pandal marker, stable across list reloads."""
    location = facility.location
    return f"{FACILITY_MARKER_PREFIX}{facility.name}@{location.lat:.6f},{location.lon:.6f}"


class MapAdapter:
    """Translates trip state into map frames for the external map surface.

    Keeps only presentation state of its own: the locked center set by the
    last clicked marker and the facility highlighted by a click.
    """

    def __init__(
        self,
        state: TripState,
        surface: MapSurface,
        selection_controller: SelectionController,
        fallback_center: Coordinate,
    ) -> None:
        self._state = state
        self._surface = surface
        self._selection_controller = selection_controller
        self._fallback_center = fallback_center
        self._locked_center: Coordinate | None = None
        self._selected_facility: Facility | None = None
        surface.on_marker_click(self.handle_marker_click)

    @property
    def locked_center(self) -> Coordinate | None:
        return self._locked_center

    @property
    def selected_facility(self) -> Facility | None:
        return self._selected_facility

    def render(self, state: TripState) -> MapFrame:
        """Build the frame for a state without touching the surface."""
        return MapFrame(
            center=self._center(state),
            markers=tuple(self._markers(state)),
            path=tuple(self._path(state)),
        )

    def present(self, state: TripState | None = None) -> MapFrame:
        """Render a state (the live one by default) and hand it to the surface."""
        frame = self.render(state if state is not None else self._state)
        self._surface.render(frame)
        logger.debug(
            f"Presented map centered at {frame.center.lat:.4f}, {frame.center.lon:.4f} "
            f"with {len(frame.markers)} marker(s) and {len(frame.path)} path point(s)"
        )
        return frame

    def reset_center(self) -> None:
        """Forget the clicked center so the map follows the user again."""
        self._locked_center = None

    async def handle_marker_click(self, marker_id: str) -> None:
        """React to a click reported by the surface.

        Station clicks select the station, facility clicks highlight the
        facility. Both lock the center on the clicked marker.
        """
        if marker_id.startswith(STATION_MARKER_PREFIX):
            await self._click_station(marker_id)
        elif marker_id.startswith(FACILITY_MARKER_PREFIX):
            self._click_facility(marker_id)
        else:
            logger.debug(f"Ignoring click on non-interactive marker {marker_id}")

    async def _click_station(self, marker_id: str) -> None:
        station_id = _parse_index(marker_id, STATION_MARKER_PREFIX)
        station = (
            self._state.station_in_selected_zone(station_id) if station_id is not None else None
        )
        if station is None or station.id is None:
            logger.warning(f"Ignoring click on station marker {marker_id} outside this zone")
            return
        self._locked_center = station.location
        self.present()
        await self._selection_controller.select_station(station.id)
        self.present()

    def _click_facility(self, marker_id: str) -> None:
        facility = next(
            (f for f in self._state.facilities if facility_marker_id(f) == marker_id), None
        )
        if facility is None:
            logger.warning(f"Ignoring click on pandal marker {marker_id} no longer listed")
            return
        self._selected_facility = facility
        self._locked_center = facility.location
        self.present()

    def _center(self, state: TripState) -> Coordinate:
        if self._locked_center is not None:
            return self._locked_center
        if state.user_location is not None:
            return state.user_location
        if state.stations:
            return state.stations[0].location
        if state.facilities:
            return state.facilities[0].location
        return self._fallback_center

    def _markers(self, state: TripState) -> list[Marker]:
        markers: list[Marker] = []
        if state.user_location is not None:
            markers.append(
                Marker(USER_MARKER_ID, MarkerKind.USER, "You", state.user_location)
            )
        # The nearest station only belongs to the unscoped view
        if state.nearest_station is not None and state.selection.zone is Zone.ALL:
            markers.append(
                Marker(
                    NEAREST_STATION_MARKER_ID,
                    MarkerKind.NEAREST_STATION,
                    state.nearest_station.name or "Nearest Metro Station",
                    state.nearest_station.location,
                )
            )
        for station in state.stations:
            if station.id is None:
                continue
            markers.append(
                Marker(
                    station_marker_id(station.id),
                    MarkerKind.STATION,
                    station.name,
                    station.location,
                    clickable=True,
                    selected=station.id == state.selection.station_id,
                )
            )
        for facility in state.facilities:
            markers.append(
                Marker(
                    facility_marker_id(facility),
                    MarkerKind.FACILITY,
                    facility.name,
                    facility.location,
                    clickable=True,
                    selected=facility == self._selected_facility,
                )
            )
        return markers

    @staticmethod
    def _path(state: TripState) -> list[Coordinate]:
        if state.route_plan is not None:
            return [stop.location for stop in state.route_plan.stops()]
        if (
            state.selection.zone is Zone.ALL
            and state.user_location is not None
            and state.nearest_station is not None
        ):
            return [state.user_location, state.nearest_station.location]
        return []


def _parse_index(marker_id: str, prefix: str) -> int | None:
    try:
        return int(marker_id[len(prefix) :])
    except ValueError:
        return None
