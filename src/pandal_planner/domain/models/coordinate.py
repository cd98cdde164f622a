"""Coordinate domain model."""

import math
from dataclasses import dataclass
from typing import Any

from pandal_planner.domain.models.errors import InvalidCoordinate


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position. Both components are always finite."""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        for label, value in (("lat", self.lat), ("lon", self.lon)):
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise InvalidCoordinate(f"{label} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidCoordinate(f"{label} must be finite, got {value!r}")
        object.__setattr__(self, "lat", float(self.lat))
        object.__setattr__(self, "lon", float(self.lon))

    @classmethod
    def parse(cls, lat: Any, lon: Any) -> "Coordinate":
        """Build a coordinate from loosely typed values (numbers or numeric strings).

        Raises:
            InvalidCoordinate: If either value is missing, not numeric or not finite.
        """
        try:
            return cls(float(lat), float(lon))
        except (TypeError, ValueError) as e:
            if isinstance(e, InvalidCoordinate):
                raise
            raise InvalidCoordinate(f"Cannot parse coordinate ({lat!r}, {lon!r})") from e
