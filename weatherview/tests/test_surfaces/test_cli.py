"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx

from weatherview.cli import main

FORECAST_URL = "https://test-meteo.example.com/v1/forecast"


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_codes(self, capsys):
        assert main(["codes"]) == 0
        captured = capsys.readouterr()
        assert "Clear sky" in captured.out
        assert "Thunderstorm with heavy hail" in captured.out

    def test_config_show(self, config_yaml_path: Path, capsys):
        assert main(["--config", str(config_yaml_path), "config", "show"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["location"]["name"] == "Test Town"

    @respx.mock
    def test_show_text(self, config_yaml_path: Path, forecast_raw: dict, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_raw))

        assert main(["--config", str(config_yaml_path), "show"]) == 0
        out = capsys.readouterr().out
        assert "Test Town" in out
        assert "Today" in out
        assert "Clear sky" in out

    @respx.mock
    def test_show_json(self, config_yaml_path: Path, forecast_raw: dict, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_raw))

        assert main(["--config", str(config_yaml_path), "show", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "loaded"
        assert len(data["forecast"]) == 7

    @respx.mock
    def test_show_error(self, config_yaml_path: Path, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(500))

        assert main(["--config", str(config_yaml_path), "show"]) == 1
        captured = capsys.readouterr()
        assert "Unable to load weather data" in captured.out
        assert "Failed to fetch weather data. Please try again." in captured.err

    @respx.mock
    def test_watch_refresh_then_quit(
        self, config_yaml_path: Path, forecast_raw: dict, monkeypatch, capsys
    ):
        route = respx.get(FORECAST_URL).mock(
            side_effect=[httpx.Response(500), httpx.Response(200, json=forecast_raw)]
        )
        answers = iter(["r", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert main(["--config", str(config_yaml_path), "watch"]) == 0
        assert route.call_count == 2
        out = capsys.readouterr().out
        assert "Loading weather data..." in out
        assert "Unable to load weather data" in out
        assert "Clear sky" in out

    @respx.mock
    def test_watch_eof_exits(self, config_yaml_path: Path, forecast_raw: dict, monkeypatch):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_raw))

        def _eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert main(["--config", str(config_yaml_path), "watch"]) == 0
