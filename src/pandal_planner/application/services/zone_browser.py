"""Zone browser: zone-scoped station and facility listings."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from pandal_planner.application.services.guarded_fetch import fetch_if_current
from pandal_planner.domain.models import Zone

if TYPE_CHECKING:
    from pandal_planner.application.services.route_planner import RoutePlanner
    from pandal_planner.application.state import RequestGenerations, TripState
    from pandal_planner.domain.ports import FacilityRepository, StationRepository

logger = logging.getLogger(__name__)


class ZoneBrowser:
    """Owns the selected zone and the zone-level station and facility lists."""

    def __init__(
        self,
        state: TripState,
        station_repository: StationRepository,
        facility_repository: FacilityRepository,
        generations: RequestGenerations,
        route_planner: RoutePlanner,
    ) -> None:
        self._state = state
        self._stations = station_repository
        self._facilities = facility_repository
        self._generations = generations
        self._route_planner = route_planner

    async def load_initial(self, zone: Zone = Zone.ALL) -> None:
        """Load the listings of the zone a fresh session starts in."""
        await self.select_zone(zone)

    async def select_zone(self, zone: Zone) -> None:
        """Switch to a zone and load its stations and facilities.

        Any result of a previously selected zone that arrives later is dropped.
        Never raises for fetch failures; the affected list becomes empty.
        """
        logger.info(f"Selecting zone {zone.value}")
        self._state.selection = self._state.selection.with_zone(zone)
        self._route_planner.invalidate()

        stations_tag = self._generations.stations.issue()
        facilities_tag = self._generations.facilities.issue()

        if zone is Zone.ALL:
            self._state.stations = []
            self._state.stations_zone = zone
            self._state.stations_loading = False
            await self._load_facilities(zone, facilities_tag)
            return

        await asyncio.gather(
            self._load_stations(zone, stations_tag),
            self._load_facilities(zone, facilities_tag),
        )

    async def reload_zone_facilities(self) -> None:
        """Restore the zone-wide facility view under a new generation."""
        zone = self._state.selection.zone
        await self._load_facilities(zone, self._generations.facilities.issue())

    async def _load_stations(self, zone: Zone, tag: int) -> None:
        self._state.stations_loading = True
        stations = await fetch_if_current(
            self._generations.stations,
            tag,
            lambda: self._stations.get_stations_by_zone(zone),
            f"zone {zone.value}",
        )
        if stations is None:
            return
        self._state.stations = stations
        self._state.stations_zone = zone
        self._state.stations_loading = False
        logger.info(f"Loaded {len(stations)} station(s) for zone {zone.value}")

    async def _load_facilities(self, zone: Zone, tag: int) -> None:
        self._state.facilities_loading = True
        facilities = await fetch_if_current(
            self._generations.facilities,
            tag,
            (
                self._facilities.get_all_facilities
                if zone is Zone.ALL
                else lambda: self._facilities.get_facilities_by_zone(zone)
            ),
            "all zones" if zone is Zone.ALL else f"zone {zone.value}",
        )
        if facilities is None:
            return
        self._state.facilities = facilities
        self._state.facilities_loading = False
        logger.info(f"Loaded {len(facilities)} pandal(s) for zone {zone.value}")
