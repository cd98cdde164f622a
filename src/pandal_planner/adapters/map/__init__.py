"""Map surface adapters."""

from pandal_planner.adapters.map.geojson_surface import (
    GeoJsonMapSurface,
    frame_to_feature_collection,
)

__all__ = ["GeoJsonMapSurface", "frame_to_feature_collection"]
