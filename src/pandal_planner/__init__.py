"""Festival trip planner: nearest station, zone browsing and route planning."""

__version__ = "0.1.0"
