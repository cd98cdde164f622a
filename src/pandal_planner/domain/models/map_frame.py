"""Render primitives handed to the map surface."""

from dataclasses import dataclass, field
from enum import Enum

from pandal_planner.domain.models.coordinate import Coordinate


class MarkerKind(Enum):
    """What a marker stands for. Drives the icon variant on the surface."""

    USER = "user"
    NEAREST_STATION = "nearest_station"
    STATION = "station"
    FACILITY = "facility"


@dataclass(frozen=True)
class Marker:
    """A labelled point on the map.

    marker_id is the identity carried back by click events; clickable markers
    are the only ones the surface should attach a click handler to.
    """

    marker_id: str
    kind: MarkerKind
    label: str
    position: Coordinate
    clickable: bool = False
    selected: bool = False


@dataclass(frozen=True)
class MapFrame:
    """Everything the surface needs to draw one state of the map."""

    center: Coordinate
    markers: tuple[Marker, ...] = field(default_factory=tuple)
    path: tuple[Coordinate, ...] = field(default_factory=tuple)

    def marker(self, marker_id: str) -> Marker | None:
        for marker in self.markers:
            if marker.marker_id == marker_id:
                return marker
        return None

    def markers_of_kind(self, kind: MarkerKind) -> list[Marker]:
        return [marker for marker in self.markers if marker.kind is kind]
