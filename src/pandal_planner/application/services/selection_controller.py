"""Selection controller: station selection within a zone."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pandal_planner.application.services.guarded_fetch import fetch_if_current

if TYPE_CHECKING:
    from pandal_planner.application.services.route_planner import RoutePlanner
    from pandal_planner.application.services.zone_browser import ZoneBrowser
    from pandal_planner.application.state import RequestGenerations, TripState
    from pandal_planner.domain.ports import FacilityRepository

logger = logging.getLogger(__name__)


class SelectionController:
    """Owns the selected station and narrows facilities to that station."""

    def __init__(
        self,
        state: TripState,
        facility_repository: FacilityRepository,
        generations: RequestGenerations,
        route_planner: RoutePlanner,
        zone_browser: ZoneBrowser,
    ) -> None:
        self._state = state
        self._facilities = facility_repository
        self._generations = generations
        self._route_planner = route_planner
        self._zone_browser = zone_browser

    async def select_station(self, station_id: int) -> None:
        """Select a station of the current zone and show only its facilities.

        Does nothing in the unscoped ALL view, or for a station that is not in
        the settled station listing of the selected zone.
        """
        selection = self._state.selection
        if not selection.zone.is_scoped:
            logger.debug(f"Ignoring selection of station {station_id} in the unscoped view")
            return

        zone = selection.zone
        if self._state.station_in_selected_zone(station_id) is None:
            logger.warning(
                f"Ignoring selection of station {station_id}: not listed for zone {zone.value}"
            )
            return

        logger.info(f"Selecting station {station_id} in zone {zone.value}")
        self._state.selection = selection.with_station(station_id)
        self._route_planner.invalidate()

        tag = self._generations.facilities.issue()
        self._state.facilities_loading = True
        facilities = await fetch_if_current(
            self._generations.facilities,
            tag,
            lambda: self._facilities.get_facilities_by_station(zone, station_id),
            f"station {station_id} in zone {zone.value}",
        )
        if facilities is None:
            return
        self._state.facilities = facilities
        self._state.facilities_loading = False
        logger.info(f"Narrowed to {len(facilities)} pandal(s) near station {station_id}")

    async def clear_station(self) -> None:
        """Deselect the station and go back to the zone-wide facility list."""
        selection = self._state.selection
        if selection.station_id is None:
            return
        logger.info(f"Clearing station {selection.station_id} in zone {selection.zone.value}")
        self._state.selection = selection.with_zone(selection.zone)
        self._route_planner.invalidate()
        await self._zone_browser.reload_zone_facilities()
