"""Map surface that draws frames as GeoJSON feature collections.

Markers become Point features, the path a LineString. GeoJSON positions are
(longitude, latitude). The map center travels in the collection's
``properties`` member.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import geojson
from geojson import Feature, FeatureCollection, LineString, Point

from pandal_planner.domain.models import MarkerKind
from pandal_planner.domain.ports import MapSurface

if TYPE_CHECKING:
    from pandal_planner.domain.models import Coordinate, MapFrame, Marker
    from pandal_planner.domain.ports import MarkerClickHandler

logger = logging.getLogger(__name__)

# Icon variants per marker kind; selected stations use a distinct variant
ICONS = {
    MarkerKind.USER: "blue-dot",
    MarkerKind.NEAREST_STATION: "green-dot",
    MarkerKind.STATION: "green-dot",
    MarkerKind.FACILITY: "red-dot",
}
SELECTED_ICON = "yellow-dot"


def _position(coordinate: Coordinate) -> tuple[float, float]:
    return (coordinate.lon, coordinate.lat)


def _marker_feature(marker: Marker) -> Feature:
    return Feature(
        id=marker.marker_id,
        geometry=Point(_position(marker.position)),
        properties={
            "marker_id": marker.marker_id,
            "kind": marker.kind.value,
            "label": marker.label,
            "clickable": marker.clickable,
            "selected": marker.selected,
            "icon": SELECTED_ICON if marker.selected else ICONS[marker.kind],
        },
    )


def frame_to_feature_collection(frame: MapFrame) -> FeatureCollection:
    """Convert a frame to a GeoJSON FeatureCollection."""
    features = [_marker_feature(marker) for marker in frame.markers]
    if len(frame.path) >= 2:
        features.append(
            Feature(
                id="path",
                geometry=LineString([_position(point) for point in frame.path]),
                properties={"kind": "path"},
            )
        )
    return FeatureCollection(features, properties={"center": list(_position(frame.center))})


class GeoJsonMapSurface(MapSurface):
    """Keeps the last drawn frame as GeoJSON and optionally writes it to a file."""

    def __init__(self, output_path: str | Path | None = None) -> None:
        self._output_path = Path(output_path) if output_path is not None else None
        self._click_handler: MarkerClickHandler | None = None
        self.last_frame: MapFrame | None = None
        self.last_collection: FeatureCollection | None = None

    def render(self, frame: MapFrame) -> None:
        collection = frame_to_feature_collection(frame)
        self.last_frame = frame
        self.last_collection = collection
        if self._output_path is not None:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(geojson.dumps(collection, indent=2), encoding="utf-8")
            logger.debug(
                f"Wrote map with {len(collection['features'])} feature(s) to {self._output_path}"
            )

    def on_marker_click(self, handler: MarkerClickHandler) -> None:
        self._click_handler = handler

    async def click(self, marker_id: str) -> None:
        """Deliver a click on a marker to the registered handler."""
        if self._click_handler is None:
            logger.warning(f"Click on {marker_id} with no handler registered")
            return
        marker = self.last_frame.marker(marker_id) if self.last_frame is not None else None
        if marker is None or not marker.clickable:
            logger.debug(f"Ignoring click on {marker_id}: not a clickable marker")
            return
        await self._click_handler(marker_id)
