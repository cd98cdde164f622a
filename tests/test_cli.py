"""Tests for the command line interface."""

import json
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from pandal_planner.application import TripState
from pandal_planner.cli import build_parser, main, state_summary
from pandal_planner.domain.models import (
    Coordinate,
    Facility,
    Selection,
    Station,
    Zone,
)
from tests.fakes import make_plan


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    session_file = tmp_path / "session.json"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SESSION_FILE", str(session_file))
    for name in ("BACKEND_URL", "USER_LAT", "USER_LON", "GEOLOCATION_ENABLED", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return session_file


class TestParser:
    def test_plan_arguments(self) -> None:
        args = build_parser().parse_args(
            ["plan", "North", "7", "--lat", "22.5", "--lon", "88.3", "--map", "route.geojson"]
        )

        assert args.command == "plan"
        assert (args.zone, args.station) == ("North", 7)
        assert (args.lat, args.lon) == (22.5, 88.3)
        assert args.map == "route.geojson"
        assert args.json is False

    def test_zone_station_is_optional(self) -> None:
        args = build_parser().parse_args(["--backend-url", "http://x", "zone", "South"])

        assert args.backend_url == "http://x"
        assert args.station is None

    def test_station_must_be_numeric(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["plan", "North", "seven"])


def test_state_summary_lists_visible_data(
    north_stations: list[Station], station_seven_facilities: list[Facility]
) -> None:
    """Given a planned route, when summarizing, then stops are listed in visiting order."""
    state = TripState(
        user_location=Coordinate(22.5, 88.3),
        selection=Selection(zone=Zone.NORTH, station_id=7),
        stations=north_stations,
        facilities=station_seven_facilities,
        route_plan=make_plan(north_stations[0], *reversed(station_seven_facilities)),
        messages={"route": "something"},
    )

    summary = state_summary(state)

    assert summary["zone"] == "North"
    assert summary["station_id"] == 7
    assert summary["user_location"] == {"lat": 22.5, "lon": 88.3}
    assert summary["nearest_station"] is None
    assert [s["id"] for s in summary["stations"]] == [7, 8]
    assert [stop["name"] for stop in summary["route"]] == [
        "Shyambazar",
        "Bagbazar Sarbojanin",
        "Kumartuli Park",
    ]
    assert summary["messages"] == {"route": "something"}


@pytest.mark.asyncio
async def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert await main([]) == 1
    assert "usage:" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_whoami_and_logout(isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a stored session, when asking who is logged in and logging out, then the file is updated."""
    isolated_env.write_text(json.dumps({"jwt": "token", "userId": "42"}))

    assert await main(["whoami"]) == 0
    assert "Logged in as user 42" in capsys.readouterr().out

    assert await main(["logout"]) == 0
    assert await main(["whoami"]) == 1
    assert json.loads(isolated_env.read_text()) == {}


@pytest.mark.asyncio
async def test_nearest_without_location_access_fails(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("GEOLOCATION_ENABLED", "false")

    assert await main(["nearest", "--lat", "22.5", "--lon", "88.3", "--json"]) == 1

    output = json.loads(capsys.readouterr().out)
    assert output["user_location"] is None
    assert "enable location access" in output["messages"]["location"]


@pytest.mark.asyncio
async def test_unknown_zone_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert await main(["zone", "Midwest"]) == 2
    assert "Unknown zone" in capsys.readouterr().err


@pytest_asyncio.fixture
async def backend_url() -> AsyncIterator[str]:
    async def nearest(request: web.Request) -> web.Response:
        return web.json_response({"name": "Shyambazar", "lat": 22.6005, "lon": 88.3726})

    async def stations(request: web.Request) -> web.Response:
        return web.json_response(
            [{"metroId": 7, "metroName": "Shyambazar", "metroLat": 22.6005, "metroLon": 88.3726}]
        )

    async def pandals(request: web.Request) -> web.Response:
        return web.json_response([{"name": "Kumartuli Park", "latitude": 22.6006, "longitude": 88.3610}])

    async def route(request: web.Request) -> web.Response:
        body = await request.json()
        start = body["startPoint"]
        (pandal,) = body["pandals"]
        return web.json_response({"origin": start, "waypoints": [], "destination": pandal})

    app = web.Application()
    app.router.add_get("/metro/nearest/location", nearest)
    app.router.add_get("/zone/NORTH/metros/simple", stations)
    app.router.add_get("/pandals/zone/NORTH/simple", pandals)
    app.router.add_get("/zone/NORTH/metro/7/pandals/simple", pandals)
    app.router.add_post("/api/route/optimal", route)
    server = TestServer(app)
    await server.start_server()
    try:
        yield str(server.make_url("/")).rstrip("/")
    finally:
        await server.close()


@pytest.mark.asyncio
async def test_plan_writes_route_and_map(
    backend_url: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a reachable backend, when planning from station 7, then the route and map are produced."""
    map_file = tmp_path / "route.geojson"

    exit_code = await main(
        [
            "--backend-url",
            backend_url,
            "plan",
            "North",
            "7",
            "--lat",
            "22.60",
            "--lon",
            "88.37",
            "--map",
            str(map_file),
            "--json",
        ]
    )

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["zone"] == "North"
    assert output["station_id"] == 7
    assert [stop["name"] for stop in output["route"]] == ["Shyambazar", "Kumartuli Park"]
    written = json.loads(map_file.read_text(encoding="utf-8"))
    assert any(f["geometry"]["type"] == "LineString" for f in written["features"])
