"""Open-Meteo forecast API client with optional bounded retry."""

import json
import logging
import time

import httpx

from weatherview.ingest.errors import HttpStatusError, NetworkError, ParseError
from weatherview.models.weather import FORECAST_DAYS, Location

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com"
DEFAULT_USER_AGENT = "weatherview/0.1.0"

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "wind_direction_10m",
)
DAILY_FIELDS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "wind_speed_10m_max",
)

RETRYABLE_STATUSES = (429, 503)


def build_forecast_params(location: Location) -> dict[str, str | float | int]:
    return {
        "latitude": location.latitude,
        "longitude": location.longitude,
        "current": ",".join(CURRENT_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
        "timezone": "auto",
        "forecast_days": FORECAST_DAYS,
    }


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_base_delay: float = 2.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_forecast(self, location: Location) -> dict:
        """Fetch current conditions and the 7-day daily forecast.

        Retries on 503/429 and transport errors with exponential backoff,
        up to max_retries extra attempts (none by default).

        Raises NetworkError, HttpStatusError or ParseError.
        """
        url = f"{self.base_url}/v1/forecast"
        params = build_forecast_params(location)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Open-Meteo request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise NetworkError(str(e)) from e

            if resp.status_code in RETRYABLE_STATUSES and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "Open-Meteo %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            if not resp.is_success:
                raise HttpStatusError(resp.status_code, url)
            return _decode_body(resp)

        raise AssertionError("unreachable")


def _decode_body(resp: httpx.Response) -> dict:
    try:
        data = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Response body is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    return data
