"""Weather data models: current conditions and the daily forecast set."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date

FORECAST_DAYS = 7


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherSnapshot:
    temperature_c: float
    apparent_temperature_c: float
    relative_humidity_pct: int
    precipitation_mm: float
    wind_speed_kmh: float
    wind_direction_deg: int
    weather_code: int
    is_day: bool


@dataclass(frozen=True)
class DailyForecastEntry:
    date: date
    weather_code: int
    temperature_max_c: float
    temperature_min_c: float
    precipitation_sum_mm: float
    wind_speed_max_kmh: float


@dataclass(frozen=True)
class ForecastSet:
    """Exactly FORECAST_DAYS entries, one per day in increasing date order, today first."""

    entries: tuple[DailyForecastEntry, ...]

    def __post_init__(self) -> None:
        if len(self.entries) != FORECAST_DAYS:
            raise ValueError(
                f"ForecastSet needs {FORECAST_DAYS} entries, got {len(self.entries)}"
            )
        dates = [e.date for e in self.entries]
        if not all(a < b for a, b in zip(dates, dates[1:])):
            raise ValueError("ForecastSet dates must be strictly increasing")

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[DailyForecastEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> DailyForecastEntry:
        return self.entries[index]
