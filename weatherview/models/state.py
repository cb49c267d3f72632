"""FetchState: the screen's relationship to the forecast request.

A tagged variant rather than loading/error flags, so illegal combinations
such as "loading and errored" cannot be represented.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from weatherview.models.common import utc_now_iso
from weatherview.models.weather import ForecastSet, WeatherSnapshot


class FetchStatus(StrEnum):
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


@dataclass(frozen=True)
class LoadingState:
    status: FetchStatus = field(default=FetchStatus.LOADING, init=False)


@dataclass(frozen=True)
class ErrorState:
    message: str
    reason: str = ""
    status: FetchStatus = field(default=FetchStatus.ERROR, init=False)


@dataclass(frozen=True)
class LoadedState:
    snapshot: WeatherSnapshot
    forecast: ForecastSet
    fetched_at: str = field(default_factory=utc_now_iso)
    status: FetchStatus = field(default=FetchStatus.LOADED, init=False)


FetchState: TypeAlias = LoadingState | ErrorState | LoadedState
