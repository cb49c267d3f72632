"""Parse an Open-Meteo forecast response into a snapshot and forecast set.

The provider returns the daily block as parallel arrays indexed together
(index i across every array is the same calendar day). The lengths are
validated before any indexing; a mismatch is a SchemaError, never a
truncated forecast.
"""

import logging
from datetime import date

from pydantic import BaseModel, Field, ValidationError, model_validator

from weatherview.ingest.errors import SchemaError
from weatherview.models.weather import (
    FORECAST_DAYS,
    DailyForecastEntry,
    ForecastSet,
    WeatherSnapshot,
)

logger = logging.getLogger(__name__)

DAILY_ARRAYS = (
    "time",
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "wind_speed_10m_max",
)


class CurrentBlock(BaseModel):
    model_config = {"allow_inf_nan": False}

    temperature_2m: float
    relative_humidity_2m: int = Field(ge=0, le=100)
    apparent_temperature: float
    is_day: bool
    precipitation: float = Field(ge=0.0)
    weather_code: int
    wind_speed_10m: float = Field(ge=0.0)
    wind_direction_10m: int = Field(ge=0, le=360)


class DailyBlock(BaseModel):
    model_config = {"allow_inf_nan": False}

    time: list[date]
    weather_code: list[int]
    temperature_2m_max: list[float]
    temperature_2m_min: list[float]
    precipitation_sum: list[float]
    wind_speed_10m_max: list[float]

    @model_validator(mode="after")
    def _check_alignment(self) -> "DailyBlock":
        lengths = {name: len(getattr(self, name)) for name in DAILY_ARRAYS}
        if set(lengths.values()) != {FORECAST_DAYS}:
            raise ValueError(
                f"daily arrays must all have {FORECAST_DAYS} entries, got {lengths}"
            )
        return self


class ForecastResponse(BaseModel):
    current: CurrentBlock
    daily: DailyBlock


def parse_forecast(raw: dict) -> tuple[WeatherSnapshot, ForecastSet]:
    """Validate a raw response and build the domain models.

    Raises SchemaError on missing fields, wrong types or misaligned arrays.
    """
    try:
        resp = ForecastResponse.model_validate(raw)
    except ValidationError as e:
        logger.error("Forecast response failed validation: %d error(s)", e.error_count())
        raise SchemaError(str(e)) from e

    return _to_snapshot(resp.current), _to_forecast_set(resp.daily)


def _to_snapshot(c: CurrentBlock) -> WeatherSnapshot:
    return WeatherSnapshot(
        temperature_c=c.temperature_2m,
        apparent_temperature_c=c.apparent_temperature,
        relative_humidity_pct=c.relative_humidity_2m,
        precipitation_mm=c.precipitation,
        wind_speed_kmh=c.wind_speed_10m,
        wind_direction_deg=c.wind_direction_10m % 360,
        weather_code=c.weather_code,
        is_day=c.is_day,
    )


def _to_forecast_set(d: DailyBlock) -> ForecastSet:
    entries = tuple(
        DailyForecastEntry(
            date=d.time[i],
            weather_code=d.weather_code[i],
            temperature_max_c=d.temperature_2m_max[i],
            temperature_min_c=d.temperature_2m_min[i],
            precipitation_sum_mm=d.precipitation_sum[i],
            wind_speed_max_kmh=d.wind_speed_10m_max[i],
        )
        for i in range(len(d.time))
    )
    try:
        return ForecastSet(entries=entries)
    except ValueError as e:
        raise SchemaError(str(e)) from e
