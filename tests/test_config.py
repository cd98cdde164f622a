"""Tests for configuration adapter."""

import logging
from pathlib import Path

import pytest

from pandal_planner.adapters.config import AppConfig
from pandal_planner.domain.models import Coordinate, Zone

CONFIG_ENV_VARS = (
    "BACKEND_URL",
    "HTTP_TIMEOUT_SECONDS",
    "SESSION_FILE",
    "GEOLOCATION_ENABLED",
    "USER_LAT",
    "USER_LON",
    "FALLBACK_CENTER_LAT",
    "FALLBACK_CENTER_LON",
    "INITIAL_ZONE",
    "MAP_OUTPUT_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig(_env_file=None)

    assert config.backend_url == "http://localhost:8080"
    assert config.http_timeout_seconds is None
    assert config.geolocation_enabled is True
    assert config.user_lat is None
    assert config.fallback_center == Coordinate(22.5726, 88.3639)
    assert config.zone is Zone.ALL
    assert config.logging_level == logging.INFO


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("BACKEND_URL", "https://pandals.example.in/")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "7.5")
    monkeypatch.setenv("INITIAL_ZONE", "north")
    monkeypatch.setenv("USER_LAT", "22.5")
    monkeypatch.setenv("USER_LON", "88.3")
    monkeypatch.setenv("GEOLOCATION_ENABLED", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig(_env_file=None)

    assert config.backend_url == "https://pandals.example.in"
    assert config.http_timeout_seconds == 7.5
    assert config.initial_zone == "North"
    assert config.zone is Zone.NORTH
    assert (config.user_lat, config.user_lon) == (22.5, 88.3)
    assert config.geolocation_enabled is False
    assert config.log_level == "DEBUG"
    assert config.logging_level == logging.DEBUG


def test_config_rejects_unknown_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown initial zone, when loading config, then validation error is raised."""
    monkeypatch.setenv("INITIAL_ZONE", "Midwest")

    with pytest.raises(ValueError, match="Unknown zone"):
        AppConfig(_env_file=None)


def test_config_rejects_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig(_env_file=None)


def test_config_reads_env_file(tmp_path: Path) -> None:
    """Given a .env file, when loading config from it, then its values are used."""
    env_file = tmp_path / ".env"
    env_file.write_text("BACKEND_URL=http://backend:9000\nMAP_OUTPUT_FILE=out/map.geojson\n")

    config = AppConfig(_env_file=env_file)

    assert config.backend_url == "http://backend:9000"
    assert config.map_output_file == "out/map.geojson"
