"""Map surface port."""

from collections.abc import Awaitable, Callable
from typing import Protocol

from pandal_planner.domain.models.map_frame import MapFrame

MarkerClickHandler = Callable[[str], Awaitable[None]]


class MapSurface(Protocol):
    """Port for the external map rendering surface."""

    def render(self, frame: MapFrame) -> None:
        """Draw the given frame, replacing whatever was drawn before."""
        ...

    def on_marker_click(self, handler: MarkerClickHandler) -> None:
        """Register the callback invoked with the clicked marker's id."""
        ...
