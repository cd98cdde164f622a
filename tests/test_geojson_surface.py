"""Tests for the GeoJSON map surface."""

import json
from pathlib import Path

import pytest

from pandal_planner.adapters.map import GeoJsonMapSurface, frame_to_feature_collection
from pandal_planner.domain.models import Coordinate, MapFrame, Marker, MarkerKind

USER = Coordinate(22.50, 88.30)
STATION = Coordinate(22.5519, 88.3520)
PANDAL = Coordinate(22.6006, 88.3610)


@pytest.fixture
def frame() -> MapFrame:
    return MapFrame(
        center=USER,
        markers=(
            Marker("user", MarkerKind.USER, "You", USER),
            Marker("station:7", MarkerKind.STATION, "Shyambazar", STATION, clickable=True, selected=True),
            Marker("facility:0", MarkerKind.FACILITY, "Kumartuli Park", PANDAL, clickable=True),
        ),
        path=(STATION, PANDAL),
    )


def test_frame_becomes_points_and_path(frame: MapFrame) -> None:
    """Given a frame with markers and a path, when converting, then positions are (lon, lat)."""
    collection = json.loads(json.dumps(frame_to_feature_collection(frame)))

    assert collection["type"] == "FeatureCollection"
    assert collection["properties"] == {"center": [88.30, 22.50]}
    points = [f for f in collection["features"] if f["geometry"]["type"] == "Point"]
    assert [f["id"] for f in points] == ["user", "station:7", "facility:0"]
    assert points[1]["geometry"]["coordinates"] == [88.3520, 22.5519]
    assert points[1]["properties"]["icon"] == "yellow-dot"
    assert points[2]["properties"] == {
        "marker_id": "facility:0",
        "kind": "facility",
        "label": "Kumartuli Park",
        "clickable": True,
        "selected": False,
        "icon": "red-dot",
    }
    path = collection["features"][-1]
    assert path["geometry"] == {
        "type": "LineString",
        "coordinates": [[88.3520, 22.5519], [88.3610, 22.6006]],
    }


def test_single_point_path_is_not_drawn() -> None:
    frame = MapFrame(center=USER, path=(USER,))

    collection = frame_to_feature_collection(frame)

    assert collection["features"] == []


def test_render_writes_file(tmp_path: Path, frame: MapFrame) -> None:
    output = tmp_path / "maps" / "map.geojson"
    surface = GeoJsonMapSurface(output)

    surface.render(frame)

    written = json.loads(output.read_text(encoding="utf-8"))
    assert len(written["features"]) == 4
    assert surface.last_frame is frame


@pytest.mark.asyncio
async def test_only_clickable_markers_reach_handler(frame: MapFrame) -> None:
    """Given a rendered frame, when clicking markers, then only clickable ones are dispatched."""
    surface = GeoJsonMapSurface()
    clicks: list[str] = []

    async def handler(marker_id: str) -> None:
        clicks.append(marker_id)

    surface.on_marker_click(handler)
    surface.render(frame)

    await surface.click("user")
    await surface.click("facility:0")
    await surface.click("facility:9")

    assert clicks == ["facility:0"]
