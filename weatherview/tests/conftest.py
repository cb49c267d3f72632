"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest
import yaml

from weatherview.config.schema import AppConfig
from weatherview.models.weather import Location

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_raw(fixtures_dir: Path) -> dict:
    """A well-formed Open-Meteo response (fresh copy per test)."""
    with open(fixtures_dir / "open_meteo_forecast.json") as f:
        return copy.deepcopy(json.load(f))


@pytest.fixture
def location() -> Location:
    return Location(name="Ludhiana, Punjab", latitude=30.9009, longitude=75.8573)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "location": {"name": "Test Town", "latitude": 51.5, "longitude": -0.12},
        "provider": {"base_url": "https://test-meteo.example.com", "timeout": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
