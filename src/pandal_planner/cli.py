"""Command line interface for the festival trip planner."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import json
import sys
from typing import TYPE_CHECKING, Any

import aiohttp

from pandal_planner.adapters.backend_api import BackendAuthGateway, BackendHttpClient
from pandal_planner.adapters.config import AppConfig
from pandal_planner.adapters.geolocation import StaticGeolocationProvider
from pandal_planner.adapters.map import GeoJsonMapSurface
from pandal_planner.adapters.session import FileSessionStore
from pandal_planner.application.services import AuthService
from pandal_planner.application.state import (
    LOCATION_MESSAGE,
    NEAREST_STATION_MESSAGE,
    ROUTE_MESSAGE,
)
from pandal_planner.domain.models import TripPlannerError, Zone
from pandal_planner.main import configure_logging, create_orchestrator

if TYPE_CHECKING:
    from pandal_planner.application import TripState
    from pandal_planner.domain.models import Coordinate, RoutePlan


def _point(name: str, location: Coordinate) -> dict[str, Any]:
    return {"name": name, "lat": location.lat, "lon": location.lon}


def state_summary(state: TripState) -> dict[str, Any]:
    """JSON-friendly view of what the user currently sees."""
    nearest = state.nearest_station
    return {
        "zone": state.selection.zone.value,
        "station_id": state.selection.station_id,
        "user_location": (
            {"lat": state.user_location.lat, "lon": state.user_location.lon}
            if state.user_location
            else None
        ),
        "nearest_station": _point(nearest.name, nearest.location) if nearest else None,
        "stations": [{"id": s.id, **_point(s.name, s.location)} for s in state.stations],
        "pandals": [_point(f.name, f.location) for f in state.facilities],
        "route": route_summary(state.route_plan) if state.route_plan else None,
        "messages": dict(state.messages),
    }


def route_summary(plan: RoutePlan) -> list[dict[str, Any]]:
    return [_point(stop.name, stop.location) for stop in plan.stops()]


def print_state(state: TripState, format_json: bool) -> None:
    summary = state_summary(state)
    if format_json:
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return

    for text in summary["messages"].values():
        print(f"! {text}", file=sys.stderr)
    if summary["nearest_station"]:
        nearest = summary["nearest_station"]
        print(
            f"\nNearest metro station: {nearest['name']} "
            f"({nearest['lat']:.6f}, {nearest['lon']:.6f})"
        )
    print(f"\nZone: {summary['zone']}")
    if summary["stations"]:
        print(f"\nStations: {len(summary['stations'])}")
        for station in summary["stations"]:
            marker = "*" if station["id"] == summary["station_id"] else " "
            print(f" {marker} [{station['id']}] {station['name']}")
    print(f"\nPandals: {len(summary['pandals'])}")
    for pandal in summary["pandals"]:
        print(f"    {pandal['name']} ({pandal['lat']:.4f}, {pandal['lon']:.4f})")
    if summary["route"]:
        print("\nRoute:")
        for number, stop in enumerate(summary["route"], start=1):
            print(f"  {number}. {stop['name']}")
    print()


async def run_session(config: AppConfig, args: argparse.Namespace) -> int:
    """Run the nearest/zone/plan commands against the backend."""
    lat = getattr(args, "lat", None)
    lon = getattr(args, "lon", None)
    provider = StaticGeolocationProvider(
        lat if lat is not None else config.user_lat,
        lon if lon is not None else config.user_lon,
        enabled=config.geolocation_enabled,
    )
    surface = GeoJsonMapSurface(getattr(args, "map", None))
    session_store = FileSessionStore(config.session_file)

    async with aiohttp.ClientSession() as session:
        orchestrator = create_orchestrator(
            config, session, surface, session_store, geolocation_provider=provider
        )
        if args.command == "nearest":
            await orchestrator.locate_user()
        else:
            zone = Zone.from_name(args.zone)
            await orchestrator.start(zone)
            if args.station is not None:
                await orchestrator.select_station(args.station)
            if args.command == "plan":
                await orchestrator.request_route()

    print_state(orchestrator.state, args.json)
    failed_topics = {
        "nearest": (LOCATION_MESSAGE, NEAREST_STATION_MESSAGE),
        "zone": (),
        "plan": (ROUTE_MESSAGE,),
    }[args.command]
    return 1 if any(topic in orchestrator.state.messages for topic in failed_topics) else 0


async def run_account(config: AppConfig, args: argparse.Namespace) -> int:
    """Run the signup/login/logout/whoami commands."""
    session_store = FileSessionStore(config.session_file)

    async with aiohttp.ClientSession() as session:
        http_client = BackendHttpClient(
            session, config.backend_url, timeout_seconds=config.http_timeout_seconds
        )
        auth = AuthService(BackendAuthGateway(http_client), session_store)

        if args.command == "logout":
            auth.logout()
            print("Logged out.")
            return 0
        if args.command == "whoami":
            current = auth.current_session()
            if current is None:
                print("Not logged in.")
                return 1
            print(f"Logged in as user {current.user_id}")
            return 0

        password = args.password or getpass.getpass("Password: ")
        if args.command == "signup":
            created = await auth.signup(args.username, args.email, password)
            if created is None:
                print("Account created. Please log in.")
            else:
                print(f"Account created. Logged in as user {created.user_id}")
            return 0

        logged_in = await auth.login(args.email, password)
        print(f"Logged in as user {logged_in.user_id}")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find metro stations and plan pandal visits during the festival",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pandal-planner nearest --lat 22.50 --lon 88.30
  pandal-planner zone North
  pandal-planner zone North --station 7 --json
  pandal-planner plan North 7 --lat 22.50 --lon 88.30 --map route.geojson
  pandal-planner login user@example.com
        """,
    )
    parser.add_argument("--backend-url", help="Override the backend base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    nearest_parser = subparsers.add_parser("nearest", help="Find the nearest metro station")
    nearest_parser.add_argument("--lat", type=float, help="Your latitude")
    nearest_parser.add_argument("--lon", type=float, help="Your longitude")
    nearest_parser.add_argument("--map", help="Write the map as GeoJSON to this file")
    nearest_parser.add_argument("--json", action="store_true", help="Output as JSON")

    zone_parser = subparsers.add_parser("zone", help="List stations and pandals of a zone")
    zone_parser.add_argument("zone", help="Zone name (All, North, South, East, Central, Howrah)")
    zone_parser.add_argument("--station", type=int, help="Only show pandals near this station id")
    zone_parser.add_argument("--lat", type=float, help="Your latitude")
    zone_parser.add_argument("--lon", type=float, help="Your longitude")
    zone_parser.add_argument("--map", help="Write the map as GeoJSON to this file")
    zone_parser.add_argument("--json", action="store_true", help="Output as JSON")

    plan_parser = subparsers.add_parser("plan", help="Plan a route from a station")
    plan_parser.add_argument("zone", help="Zone name")
    plan_parser.add_argument("station", type=int, help="Station id to start from")
    plan_parser.add_argument("--lat", type=float, help="Your latitude")
    plan_parser.add_argument("--lon", type=float, help="Your longitude")
    plan_parser.add_argument("--map", help="Write the map as GeoJSON to this file")
    plan_parser.add_argument("--json", action="store_true", help="Output as JSON")

    signup_parser = subparsers.add_parser("signup", help="Create an account")
    signup_parser.add_argument("username", help="User name")
    signup_parser.add_argument("email", help="E-mail address")
    signup_parser.add_argument("--password", help="Password (prompted if omitted)")

    login_parser = subparsers.add_parser("login", help="Log in and store the session")
    login_parser.add_argument("email", help="E-mail address")
    login_parser.add_argument("--password", help="Password (prompted if omitted)")

    subparsers.add_parser("logout", help="Forget the stored session")
    subparsers.add_parser("whoami", help="Show the logged in user")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    overrides: dict[str, Any] = {}
    if args.backend_url:
        overrides["backend_url"] = args.backend_url
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    config = AppConfig(**overrides)
    configure_logging(config.logging_level)

    try:
        if args.command in ("nearest", "zone", "plan"):
            return await run_session(config, args)
        return await run_account(config, args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except TripPlannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the console script."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
