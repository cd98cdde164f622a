"""Facility (pandal) domain model."""

from dataclasses import dataclass

from pandal_planner.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class Facility:
    """A point of interest the visitor may want to include in a route."""

    name: str
    location: Coordinate
