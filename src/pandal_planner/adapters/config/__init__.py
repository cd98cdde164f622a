"""Configuration adapters."""

from pandal_planner.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
