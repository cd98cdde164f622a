"""Shared fixtures for trip planner tests."""

import pytest

from pandal_planner.application import TripOrchestrator
from pandal_planner.domain.models import Coordinate, Facility, Station
from tests.fakes import (
    KOLKATA,
    FakeFacilityRepository,
    FakeGeolocationProvider,
    FakeMapSurface,
    FakeRouteOptimizer,
    FakeStationRepository,
)


@pytest.fixture
def user_location() -> Coordinate:
    return Coordinate(22.50, 88.30)


@pytest.fixture
def park_street() -> Station:
    return Station(name="Park Street", location=Coordinate(22.5519, 88.3520))


@pytest.fixture
def north_stations() -> list[Station]:
    return [
        Station(name="Shyambazar", location=Coordinate(22.6005, 88.3726), id=7),
        Station(name="Belgachia", location=Coordinate(22.6056, 88.3807), id=8),
    ]


@pytest.fixture
def north_facilities() -> list[Facility]:
    return [
        Facility(name=f"North Pandal {n}", location=Coordinate(22.60 + n / 1000, 88.37))
        for n in range(1, 6)
    ]


@pytest.fixture
def station_seven_facilities() -> list[Facility]:
    return [
        Facility(name="Kumartuli Park", location=Coordinate(22.6006, 88.3610)),
        Facility(name="Bagbazar Sarbojanin", location=Coordinate(22.6047, 88.3673)),
    ]


@pytest.fixture
def station_repository() -> FakeStationRepository:
    return FakeStationRepository()


@pytest.fixture
def facility_repository() -> FakeFacilityRepository:
    return FakeFacilityRepository()


@pytest.fixture
def route_optimizer() -> FakeRouteOptimizer:
    return FakeRouteOptimizer()


@pytest.fixture
def geolocation_provider(user_location: Coordinate) -> FakeGeolocationProvider:
    return FakeGeolocationProvider(user_location)


@pytest.fixture
def map_surface() -> FakeMapSurface:
    return FakeMapSurface()


@pytest.fixture
def orchestrator(
    geolocation_provider: FakeGeolocationProvider,
    station_repository: FakeStationRepository,
    facility_repository: FakeFacilityRepository,
    route_optimizer: FakeRouteOptimizer,
    map_surface: FakeMapSurface,
) -> TripOrchestrator:
    return TripOrchestrator(
        geolocation_provider=geolocation_provider,
        station_repository=station_repository,
        facility_repository=facility_repository,
        route_optimizer=route_optimizer,
        map_surface=map_surface,
        fallback_center=KOLKATA,
    )

