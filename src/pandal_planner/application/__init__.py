"""Application layer - trip planning use cases and orchestration."""

from pandal_planner.application.orchestrator import TripOrchestrator
from pandal_planner.application.state import TripState

__all__ = ["TripOrchestrator", "TripState"]
