"""Trip orchestrator: wires the planning components around one TripState."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from pandal_planner.application.services import (
    GeolocationResolver,
    MapAdapter,
    NearestStationResolver,
    RoutePlanner,
    SelectionController,
    ZoneBrowser,
)
from pandal_planner.application.state import (
    LOCATION_MESSAGE,
    NEAREST_STATION_MESSAGE,
    ROUTE_MESSAGE,
    RequestGenerations,
    TripState,
)
from pandal_planner.domain.models import (
    GeolocationPermissionDenied,
    GeolocationUnsupported,
    InvalidCoordinate,
    NetworkError,
    NoFacilities,
    PlanningRejected,
    StationNotFound,
    TripPlannerError,
    Zone,
)

if TYPE_CHECKING:
    from pandal_planner.domain.models import Coordinate, MapFrame, RoutePlan
    from pandal_planner.domain.ports import (
        FacilityRepository,
        GeolocationProvider,
        MapSurface,
        RouteOptimizer,
        StationRepository,
    )

logger = logging.getLogger(__name__)


class TripOrchestrator:
    """Entry point of the UI layer into trip planning.

    Every public operation leaves the map re-presented and turns failures into
    user-visible messages in ``state.messages`` instead of raising.
    """

    def __init__(
        self,
        geolocation_provider: GeolocationProvider,
        station_repository: StationRepository,
        facility_repository: FacilityRepository,
        route_optimizer: RouteOptimizer,
        map_surface: MapSurface,
        fallback_center: Coordinate,
    ) -> None:
        self.state = TripState()
        generations = RequestGenerations()
        self.geolocation = GeolocationResolver(geolocation_provider)
        self.nearest_station = NearestStationResolver(station_repository)
        self.route_planner = RoutePlanner(self.state, route_optimizer, generations.route)
        self.zone_browser = ZoneBrowser(
            self.state, station_repository, facility_repository, generations, self.route_planner
        )
        self.selection_controller = SelectionController(
            self.state, facility_repository, generations, self.route_planner, self.zone_browser
        )
        self.map_adapter = MapAdapter(
            self.state, map_surface, self.selection_controller, fallback_center
        )

    async def start(self, initial_zone: Zone = Zone.ALL) -> None:
        """Session start: locate the user and load the initial zone listings."""
        await asyncio.gather(self.locate_user(), self.zone_browser.load_initial(initial_zone))
        self.refresh_map()

    async def locate_user(self) -> None:
        """Resolve the user's position, then their nearest station."""
        try:
            location = await self.geolocation.resolve()
        except GeolocationPermissionDenied:
            self._set_message(
                LOCATION_MESSAGE, "Unable to get your location. Please enable location access."
            )
        except GeolocationUnsupported:
            self._set_message(LOCATION_MESSAGE, "Geolocation is not supported on this device.")
        except TripPlannerError as e:
            self._set_message(LOCATION_MESSAGE, "Your location is currently unavailable.")
            logger.warning(f"Geolocation failed: {e}")
        else:
            self.state.messages.pop(LOCATION_MESSAGE, None)
            self.state.user_location = location
            self.refresh_map()
            await self._resolve_nearest_station(location)
        self.refresh_map()

    async def retry_nearest_station(self) -> None:
        """Manual retry after a failed nearest-station lookup."""
        if self.state.user_location is None:
            logger.info("Cannot look up the nearest station without a user location")
            return
        await self._resolve_nearest_station(self.state.user_location)
        self.refresh_map()

    async def select_zone(self, zone: Zone) -> None:
        self.state.messages.pop(ROUTE_MESSAGE, None)
        await self.zone_browser.select_zone(zone)
        self.refresh_map()

    async def select_station(self, station_id: int) -> None:
        if not self.state.selection.zone.is_scoped:
            logger.debug(f"Ignoring selection of station {station_id} in the unscoped view")
            return
        self.state.messages.pop(ROUTE_MESSAGE, None)
        await self.selection_controller.select_station(station_id)
        self.refresh_map()

    async def clear_station(self) -> None:
        self.state.messages.pop(ROUTE_MESSAGE, None)
        await self.selection_controller.clear_station()
        self.refresh_map()

    async def request_route(self) -> RoutePlan | None:
        """Plan a route from the selected station through the visible pandals."""
        self.state.messages.pop(ROUTE_MESSAGE, None)
        plan: RoutePlan | None = None
        try:
            plan = await self.route_planner.plan(
                self.state.selected_station(), list(self.state.facilities)
            )
        except NoFacilities as e:
            self._set_message(ROUTE_MESSAGE, f"Cannot plan a route: {e}.")
        except PlanningRejected as e:
            self._set_message(ROUTE_MESSAGE, f"No feasible route: {e.details.reason}.")
        except NetworkError as e:
            self._set_message(
                ROUTE_MESSAGE,
                f"Route service unreachable ({e.details.reason}). Please try again.",
            )
        self.refresh_map()
        return plan

    def clear_route(self) -> None:
        self.route_planner.clear()
        self.refresh_map()

    async def click_marker(self, marker_id: str) -> None:
        await self.map_adapter.handle_marker_click(marker_id)

    def reset_center(self) -> None:
        self.map_adapter.reset_center()
        self.refresh_map()

    def refresh_map(self) -> MapFrame:
        return self.map_adapter.present(self.state)

    async def _resolve_nearest_station(self, location: Coordinate) -> None:
        # A missing nearest station leaves the zone selection untouched
        self.state.nearest_status = "loading"
        self.state.messages.pop(NEAREST_STATION_MESSAGE, None)
        try:
            station = await self.nearest_station.find_nearest(location)
        except StationNotFound:
            self.state.nearest_station = None
            self.state.nearest_status = "not_found"
            self._set_message(NEAREST_STATION_MESSAGE, "No metro station found nearby.")
        except (NetworkError, InvalidCoordinate) as e:
            self.state.nearest_status = "error"
            self._set_message(
                NEAREST_STATION_MESSAGE,
                "Failed to fetch nearest metro station. Please check your backend connection.",
            )
            logger.error(f"Nearest station lookup failed: {e}")
        else:
            self.state.nearest_station = station
            self.state.nearest_status = "found"

    def _set_message(self, topic: str, text: str) -> None:
        self.state.messages[topic] = text
        logger.info(f"[{topic}] {text}")
