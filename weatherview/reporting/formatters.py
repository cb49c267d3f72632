"""Output formatters for the weather screen."""

import json
from dataclasses import asdict

from weatherview.classify.weather_codes import WEATHER_CODES, known_codes
from weatherview.models.state import FetchStatus
from weatherview.reporting.views import ScreenView


def format_screen_text(v: ScreenView) -> str:
    """Plain text screen for the terminal."""
    lines = [
        f"=== {v.title} ===",
        v.date_text,
    ]
    if v.status != FetchStatus.LOADED or v.current is None:
        lines.append("")
        lines.append(v.message)
        return "\n".join(lines)

    c = v.current
    lines += [
        "",
        f"{c.icon}  {c.temperature}  {c.description}",
        c.feels_like,
        "",
        f"💧 Humidity: {c.humidity} | 🌧️ Precipitation: {c.precipitation}",
        f"💨 Wind Speed: {c.wind_speed} | 🧭 Wind Direction: {c.wind_direction}",
        "",
        "7-Day Forecast",
    ]
    for row in v.forecast:
        lines.append(
            f"  {row.label:<12} {row.icon}  {row.description:<30} "
            f"{row.high:>4} / {row.low:>4}"
        )
    return "\n".join(lines)


def format_screen_json(v: ScreenView) -> str:
    """JSON screen for the dashboard and programmatic consumption."""
    return json.dumps(screen_to_dict(v), indent=2, ensure_ascii=False)


def screen_to_dict(v: ScreenView) -> dict:
    data = asdict(v)
    data["status"] = v.status.value
    return data


def format_codes_text() -> str:
    """The classification table, one code per line."""
    lines = [f"{'Code':>4}  Day  Night  Description"]
    for code in known_codes():
        e = WEATHER_CODES[code]
        lines.append(f"{code:>4}  {e.day_icon}   {e.night_icon}    {e.description}")
    return "\n".join(lines)
