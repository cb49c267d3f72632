"""WMO weather-code classification: code -> icon glyph and description.

One table keyed by code holds every entry, so icon and description lookups
cannot drift apart. Lookups are total: codes outside the table resolve to
FALLBACK_ICON and UNKNOWN_DESCRIPTION.
"""

from dataclasses import dataclass

FALLBACK_ICON = "🌤️"
UNKNOWN_DESCRIPTION = "Unknown"


@dataclass(frozen=True)
class WeatherCodeEntry:
    description: str
    day_icon: str
    night_icon: str


def _entry(description: str, day_icon: str, night_icon: str | None = None) -> WeatherCodeEntry:
    return WeatherCodeEntry(
        description=description,
        day_icon=day_icon,
        night_icon=night_icon if night_icon is not None else day_icon,
    )


WEATHER_CODES: dict[int, WeatherCodeEntry] = {
    0: _entry("Clear sky", "☀️", "🌙"),
    1: _entry("Mainly clear", "🌤️", "🌙"),
    2: _entry("Partly cloudy", "⛅"),
    3: _entry("Overcast", "☁️"),
    45: _entry("Fog", "🌫️"),
    48: _entry("Depositing rime fog", "🌫️"),
    51: _entry("Light drizzle", "🌦️"),
    53: _entry("Moderate drizzle", "🌦️"),
    55: _entry("Dense drizzle", "🌦️"),
    61: _entry("Slight rain", "🌧️"),
    63: _entry("Moderate rain", "🌧️"),
    65: _entry("Heavy rain", "🌧️"),
    71: _entry("Slight snow fall", "❄️"),
    73: _entry("Moderate snow fall", "❄️"),
    75: _entry("Heavy snow fall", "❄️"),
    77: _entry("Snow grains", "❄️"),
    80: _entry("Slight rain showers", "🌦️"),
    81: _entry("Moderate rain showers", "🌦️"),
    82: _entry("Violent rain showers", "🌦️"),
    85: _entry("Slight snow showers", "🌨️"),
    86: _entry("Heavy snow showers", "🌨️"),
    95: _entry("Thunderstorm", "⛈️"),
    96: _entry("Thunderstorm with slight hail", "⛈️"),
    99: _entry("Thunderstorm with heavy hail", "⛈️"),
}


def weather_icon(code: int, is_day: bool) -> str:
    """Icon glyph for a weather code. Only codes 0 and 1 have a night variant."""
    entry = WEATHER_CODES.get(code)
    if entry is None:
        return FALLBACK_ICON
    return entry.day_icon if is_day else entry.night_icon


def weather_description(code: int) -> str:
    entry = WEATHER_CODES.get(code)
    if entry is None:
        return UNKNOWN_DESCRIPTION
    return entry.description


def classify(code: int, is_day: bool) -> tuple[str, str]:
    """Resolve (icon, description) for a code in one call."""
    return weather_icon(code, is_day), weather_description(code)


def known_codes() -> list[int]:
    return sorted(WEATHER_CODES)
