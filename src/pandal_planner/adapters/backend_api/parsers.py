"""Translation between backend JSON and domain models.

Entries with missing fields or invalid coordinates are dropped where they
are parsed so they never reach rendering or later requests.
"""

import logging
from typing import Any

from pandal_planner.domain.models import (
    Coordinate,
    Facility,
    InvalidCoordinate,
    RoutePlan,
    RouteStop,
    Session,
    Station,
)

logger = logging.getLogger(__name__)


def _as_list(data: Any, what: str) -> list[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        logger.warning(f"Expected a list of {what}, got {type(data).__name__}")
        return []
    return data


def parse_nearest_station(data: dict[str, Any]) -> Station:
    """Parse ``{name, lat, lon}``.

    Raises:
        InvalidCoordinate: If lat/lon are missing or not finite.
    """
    name = str(data.get("name") or "")
    return Station(name=name, location=Coordinate.parse(data.get("lat"), data.get("lon")))


def parse_zone_stations(data: Any) -> list[Station]:
    """Parse a list of ``{metroId, metroName, metroLat, metroLon}``."""
    stations: list[Station] = []
    for entry in _as_list(data, "stations"):
        if not isinstance(entry, dict):
            continue
        try:
            station_id = int(entry["metroId"])
            location = Coordinate.parse(entry.get("metroLat"), entry.get("metroLon"))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping station entry {entry!r}: {e}")
            continue
        name = str(entry.get("metroName") or station_id)
        stations.append(Station(name=name, location=location, id=station_id))
    return stations


def parse_facilities(data: Any) -> list[Facility]:
    """Parse a list of ``{name, latitude, longitude}`` (``lat``/``lon`` also accepted)."""
    facilities: list[Facility] = []
    for entry in _as_list(data, "pandals"):
        if not isinstance(entry, dict):
            continue
        lat = entry.get("latitude", entry.get("lat"))
        lon = entry.get("longitude", entry.get("lon"))
        try:
            location = Coordinate.parse(lat, lon)
        except InvalidCoordinate as e:
            logger.warning(f"Skipping pandal {entry.get('name')!r}: {e}")
            continue
        facilities.append(Facility(name=str(entry.get("name") or ""), location=location))
    return facilities


def _point(name: str, location: Coordinate) -> dict[str, Any]:
    return {"lat": location.lat, "lon": location.lon, "name": name}


def route_request_payload(origin: Station, facilities: list[Facility]) -> dict[str, Any]:
    """Build the body of the route optimization request."""
    return {
        "startPoint": _point(origin.name, origin.location),
        "pandals": [_point(facility.name, facility.location) for facility in facilities],
    }


def _parse_stop(data: Any) -> RouteStop:
    if not isinstance(data, dict):
        raise ValueError(f"Route stop must be an object, got {data!r}")
    return RouteStop(
        name=str(data.get("name") or ""),
        location=Coordinate.parse(data.get("lat"), data.get("lon")),
    )


def parse_route_plan(data: Any) -> RoutePlan:
    """Parse ``{origin, destination, waypoints: [...]}`` keeping waypoint order.

    Raises:
        ValueError: If the body is not a complete route (InvalidCoordinate included).
    """
    if not isinstance(data, dict):
        raise ValueError("Route response must be an object")
    if "origin" not in data or "destination" not in data:
        raise ValueError("Route response lacks origin or destination")
    waypoints = data.get("waypoints") or []
    if not isinstance(waypoints, list):
        raise ValueError("Route waypoints must be a list")
    return RoutePlan(
        origin=_parse_stop(data["origin"]),
        destination=_parse_stop(data["destination"]),
        waypoints=tuple(_parse_stop(waypoint) for waypoint in waypoints),
    )


def parse_session(data: Any) -> Session | None:
    """Parse ``{jwt, userId}``; None if either is missing."""
    if not isinstance(data, dict):
        return None
    token = data.get("jwt")
    user_id = data.get("userId")
    if not token or user_id in (None, ""):
        return None
    return Session(token=str(token), user_id=str(user_id))
