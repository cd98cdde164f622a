"""Main entry point: runs one trip planning session from configuration."""

import asyncio
import logging
import sys

import aiohttp

from pandal_planner.adapters.backend_api import (
    BackendFacilityRepository,
    BackendHttpClient,
    BackendRouteOptimizer,
    BackendStationRepository,
)
from pandal_planner.adapters.config import AppConfig
from pandal_planner.adapters.geolocation import StaticGeolocationProvider
from pandal_planner.adapters.map import GeoJsonMapSurface
from pandal_planner.adapters.session import FileSessionStore
from pandal_planner.application import TripOrchestrator
from pandal_planner.domain.ports import GeolocationProvider, MapSurface, SessionStore

logger = logging.getLogger(__name__)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging the same way for every entry point."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_orchestrator(
    config: AppConfig,
    session: aiohttp.ClientSession,
    map_surface: MapSurface,
    session_store: SessionStore | None = None,
    geolocation_provider: GeolocationProvider | None = None,
) -> TripOrchestrator:
    """Wire the backend adapters into a TripOrchestrator."""
    http_client = BackendHttpClient(
        session,
        config.backend_url,
        session_store=session_store,
        timeout_seconds=config.http_timeout_seconds,
    )
    if geolocation_provider is None:
        geolocation_provider = StaticGeolocationProvider(
            config.user_lat, config.user_lon, enabled=config.geolocation_enabled
        )
    return TripOrchestrator(
        geolocation_provider=geolocation_provider,
        station_repository=BackendStationRepository(http_client),
        facility_repository=BackendFacilityRepository(http_client),
        route_optimizer=BackendRouteOptimizer(http_client),
        map_surface=map_surface,
        fallback_center=config.fallback_center,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.logging_level)

    surface = GeoJsonMapSurface(config.map_output_file)
    session_store = FileSessionStore(config.session_file)

    async with aiohttp.ClientSession() as session:
        orchestrator = create_orchestrator(config, session, surface, session_store)
        await orchestrator.start(config.zone)

        state = orchestrator.state
        for text in state.messages.values():
            logger.warning(text)
        if state.nearest_station is not None:
            logger.info(f"Nearest metro station: {state.nearest_station.name}")
        logger.info(
            f"Zone {state.selection.zone.value}: {len(state.stations)} station(s), "
            f"{len(state.facilities)} pandal(s)"
        )
        logger.info(f"Map written to {config.map_output_file}")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
