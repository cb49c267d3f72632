"""Screen view model: turns a FetchState into display-ready values.

Exactly one of the three FetchState variants is rendered. Loaded screens
carry the current block and seven forecast rows; Loading and Error screens
carry only a message.
"""

from dataclasses import dataclass, field
from datetime import date

from weatherview.classify.weather_codes import weather_description, weather_icon
from weatherview.models.common import round_half_up
from weatherview.models.state import ErrorState, FetchState, FetchStatus, LoadedState
from weatherview.models.weather import DailyForecastEntry, Location, WeatherSnapshot

LOADING_TEXT = "Loading weather data..."
ERROR_TEXT = "Unable to load weather data"
TODAY_LABEL = "Today"

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


@dataclass(frozen=True)
class Theme:
    gradient_start: str
    gradient_end: str


DAY_THEME = Theme("#4A90E2", "#7BB3F0")
NIGHT_THEME = Theme("#2C3E50", "#34495E")


@dataclass(frozen=True)
class CurrentView:
    icon: str
    temperature: str
    description: str
    feels_like: str
    humidity: str
    precipitation: str
    wind_speed: str
    wind_direction: str


@dataclass(frozen=True)
class ForecastRow:
    label: str
    icon: str
    description: str
    high: str
    low: str


@dataclass(frozen=True)
class ScreenView:
    status: FetchStatus
    title: str
    date_text: str
    theme: Theme
    message: str = ""
    error_reason: str = ""
    current: CurrentView | None = None
    forecast: list[ForecastRow] = field(default_factory=list)


def compass_point(degrees: int) -> str:
    """16-point compass label for a bearing in degrees."""
    return COMPASS_POINTS[int((degrees % 360) / 22.5 + 0.5) % 16]


def long_date(d: date) -> str:
    return f"{d:%A, %B} {d.day}, {d.year}"


def day_label(index: int, d: date) -> str:
    if index == 0:
        return TODAY_LABEL
    return f"{d:%a, %b} {d.day}"


def _number(value: float) -> str:
    return f"{value:g}"


def _current_view(s: WeatherSnapshot) -> CurrentView:
    return CurrentView(
        icon=weather_icon(s.weather_code, s.is_day),
        temperature=f"{round_half_up(s.temperature_c)}°C",
        description=weather_description(s.weather_code),
        feels_like=f"Feels like {round_half_up(s.apparent_temperature_c)}°C",
        humidity=f"{s.relative_humidity_pct}%",
        precipitation=f"{_number(s.precipitation_mm)} mm",
        wind_speed=f"{_number(s.wind_speed_kmh)} km/h",
        wind_direction=f"{s.wind_direction_deg}° {compass_point(s.wind_direction_deg)}",
    )


def _forecast_row(index: int, e: DailyForecastEntry) -> ForecastRow:
    # Daily rows always show the daytime icon.
    return ForecastRow(
        label=day_label(index, e.date),
        icon=weather_icon(e.weather_code, True),
        description=weather_description(e.weather_code),
        high=f"{round_half_up(e.temperature_max_c)}°",
        low=f"{round_half_up(e.temperature_min_c)}°",
    )


def build_screen(state: FetchState, location: Location, today: date) -> ScreenView:
    """Build the view for whichever FetchState variant is current."""
    date_text = long_date(today)
    if isinstance(state, LoadedState):
        snapshot = state.snapshot
        return ScreenView(
            status=state.status,
            title=location.name,
            date_text=date_text,
            theme=DAY_THEME if snapshot.is_day else NIGHT_THEME,
            current=_current_view(snapshot),
            forecast=[_forecast_row(i, e) for i, e in enumerate(state.forecast)],
        )
    if isinstance(state, ErrorState):
        return ScreenView(
            status=state.status,
            title=location.name,
            date_text=date_text,
            theme=DAY_THEME,
            message=ERROR_TEXT,
            error_reason=state.reason,
        )
    return ScreenView(
        status=state.status,
        title=location.name,
        date_text=date_text,
        theme=DAY_THEME,
        message=LOADING_TEXT,
    )
