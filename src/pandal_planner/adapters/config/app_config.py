"""12-factor configuration adapter using environment variables."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pandal_planner.domain.models import Coordinate, Zone


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend configuration
    backend_url: str = Field(
        default="http://localhost:8080", description="Base URL of the festival backend"
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        description="Total timeout for backend requests in seconds (unset for no timeout)",
    )

    # Session configuration
    session_file: str = Field(
        default=str(Path.home() / ".pandal_planner" / "session.json"),
        description="File holding the persisted login session (jwt and userId)",
    )

    # Location configuration
    geolocation_enabled: bool = Field(
        default=True, description="Whether the user allows their location to be used"
    )
    user_lat: float | None = Field(default=None, description="Static user latitude")
    user_lon: float | None = Field(default=None, description="Static user longitude")

    # Map configuration
    fallback_center_lat: float = Field(
        default=22.5726, description="Map center latitude when nothing else is known (Kolkata)"
    )
    fallback_center_lon: float = Field(
        default=88.3639, description="Map center longitude when nothing else is known (Kolkata)"
    )
    initial_zone: str = Field(default="All", description="Zone selected when a session starts")
    map_output_file: str = Field(
        default="map.geojson", description="Where the GeoJSON map surface writes its frames"
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("backend_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the backend URL so paths can be appended directly."""
        return v.rstrip("/")

    @field_validator("initial_zone")
    @classmethod
    def validate_initial_zone(cls, v: str) -> str:
        """Validate that the initial zone names a known zone."""
        return Zone.from_name(v).value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def fallback_center(self) -> Coordinate:
        return Coordinate(self.fallback_center_lat, self.fallback_center_lon)

    @property
    def zone(self) -> Zone:
        return Zone.from_name(self.initial_zone)

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)
