"""Forecast fetch controller: owns the screen's FetchState.

The controller is the only writer of the state. It moves to Loading, awaits
one provider request, then settles into Loaded or Error. There is no polling;
fetches happen on start() (the screen mounting) and on user refresh().

A refresh requested while a fetch is in flight is ignored.
"""

import logging
import threading
from collections.abc import Callable

from weatherview.config.schema import AppConfig
from weatherview.ingest.errors import FetchError
from weatherview.ingest.open_meteo_client import OpenMeteoClient
from weatherview.ingest.response_parser import parse_forecast
from weatherview.models.state import ErrorState, FetchState, LoadedState, LoadingState
from weatherview.models.weather import Location

logger = logging.getLogger(__name__)

ERROR_NOTICE = "Failed to fetch weather data. Please try again."

StateListener = Callable[[FetchState], None]
Notifier = Callable[[str], None]


class ForecastController:
    def __init__(
        self,
        client: OpenMeteoClient,
        location: Location,
        notifier: Notifier | None = None,
    ):
        self.client = client
        self.location = location
        self.notifier = notifier
        self._state: FetchState = LoadingState()
        self._listeners: list[StateListener] = []
        self._in_flight = threading.Lock()

    @property
    def state(self) -> FetchState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked with every new state."""
        self._listeners.append(listener)

    def start(self) -> bool:
        """Initial fetch when the screen mounts."""
        return self._run_fetch("mount")

    def refresh(self) -> bool:
        """User-initiated refetch. Returns False if a fetch was already in flight."""
        return self._run_fetch("refresh")

    def _run_fetch(self, trigger: str) -> bool:
        if not self._in_flight.acquire(blocking=False):
            logger.info("Ignoring %s: a fetch is already in flight", trigger)
            return False
        try:
            self._set_state(LoadingState())
            settled = self._fetch()
            self._set_state(settled)
            if isinstance(settled, ErrorState) and self.notifier is not None:
                self.notifier(settled.message)
            return True
        finally:
            self._in_flight.release()

    def _fetch(self) -> FetchState:
        loc = self.location
        try:
            raw = self.client.get_forecast(loc)
            snapshot, forecast = parse_forecast(raw)
        except FetchError as e:
            logger.error(
                "Weather fetch failed for %s (%s): %s",
                loc.name, type(e).__name__, e,
            )
            return ErrorState(message=ERROR_NOTICE, reason=type(e).__name__)
        except Exception:
            logger.exception("Weather fetch crashed for %s", loc.name)
            return ErrorState(message=ERROR_NOTICE, reason="UnexpectedError")

        logger.info(
            "Fetched weather for %s: code=%d temp=%.1fC, %d forecast days",
            loc.name, snapshot.weather_code, snapshot.temperature_c, len(forecast),
        )
        return LoadedState(snapshot=snapshot, forecast=forecast)

    def _set_state(self, state: FetchState) -> None:
        logger.debug("FetchState %s -> %s", self._state.status, state.status)
        self._state = state
        for listener in self._listeners:
            listener(state)


def build_controller(config: AppConfig, notifier: Notifier | None = None) -> ForecastController:
    p = config.provider
    client = OpenMeteoClient(
        base_url=p.base_url,
        user_agent=p.user_agent,
        timeout=p.timeout,
        max_retries=p.max_retries,
        retry_base_delay=p.retry_base_delay,
    )
    return ForecastController(client, config.location.to_location(), notifier=notifier)
