"""Tests for config loading and dotted-key lookup."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from weatherview.config.loader import get_config_value, load_config
from weatherview.config.schema import AppConfig, LocationConfig
from weatherview.models.weather import Location


class TestLoadConfig:
    def test_no_path_uses_defaults(self):
        config = load_config(None)
        assert config.location.name == "Ludhiana, Punjab"
        assert config.location.latitude == 30.9009
        assert config.location.longitude == 75.8573
        assert config.provider.base_url == "https://api.open-meteo.com"
        assert config.provider.max_retries == 0

    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.location.name == "Test Town"
        assert config.location.latitude == 51.5
        assert config.provider.timeout == 5.0
        assert config.dashboard.port == 8000

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("location:\n  city: Paris\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")


class TestSchema:
    def test_latitude_range(self):
        with pytest.raises(ValidationError):
            LocationConfig(latitude=91.0)

    def test_longitude_range(self):
        with pytest.raises(ValidationError):
            LocationConfig(longitude=-181.0)

    def test_retry_bound(self):
        with pytest.raises(ValidationError):
            AppConfig(provider={"max_retries": 10})

    def test_to_location(self):
        loc = LocationConfig(name="X", latitude=1.0, longitude=2.0).to_location()
        assert loc == Location(name="X", latitude=1.0, longitude=2.0)


class TestGetConfigValue:
    def test_dotted_key(self, default_config: AppConfig):
        assert get_config_value(default_config, "location.latitude") == 30.9009

    def test_section(self, default_config: AppConfig):
        assert get_config_value(default_config, "dashboard").host == "127.0.0.1"

    def test_invalid_key(self, default_config: AppConfig):
        with pytest.raises(KeyError):
            get_config_value(default_config, "nonexistent.key")
