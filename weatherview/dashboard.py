"""Weather dashboard: FastAPI backend serving the single weather screen.

The refresh button posts to /api/refresh, which plays the part of the
pull-to-refresh gesture.
"""

import html
import logging
import threading
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from weatherview.classify.weather_codes import WEATHER_CODES, known_codes
from weatherview.config.schema import AppConfig
from weatherview.controller import ForecastController, build_controller
from weatherview.models.state import FetchStatus
from weatherview.reporting.formatters import screen_to_dict
from weatherview.reporting.views import ScreenView, build_screen

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
  body {{ margin: 0; min-height: 100vh; color: #fff; font-family: sans-serif;
         background: linear-gradient({start}, {end}); }}
  main {{ max-width: 480px; margin: 0 auto; padding: 20px; text-align: center; }}
  .icon {{ font-size: 80px; }}
  .temp {{ font-size: 64px; font-weight: 200; }}
  .details {{ display: grid; grid-template-columns: 1fr 1fr; gap: 12px; margin: 20px 0; }}
  .details div, .forecast {{ background: rgba(255,255,255,0.2); border-radius: 12px; padding: 12px; }}
  .row {{ display: flex; justify-content: space-between; padding: 6px 0; }}
  button {{ margin-top: 16px; padding: 8px 24px; border: 0; border-radius: 16px; }}
</style>
</head>
<body>
<main>
  <h2>{title}</h2>
  <p>{date_text}</p>
  {body}
  <button onclick="refresh()">Refresh</button>
</main>
<script>
  async function refresh() {{
    await fetch("/api/refresh", {{ method: "POST" }});
    location.reload();
  }}
  {alert}
</script>
</body>
</html>
"""


def render_page(v: ScreenView) -> str:
    e = html.escape
    if v.status == FetchStatus.LOADED and v.current is not None:
        c = v.current
        rows = "".join(
            f'<div class="row"><span>{e(r.label)}</span>'
            f"<span>{r.icon} {e(r.description)}</span>"
            f"<span>{e(r.high)} / {e(r.low)}</span></div>"
            for r in v.forecast
        )
        body = (
            f'<div class="icon">{c.icon}</div>'
            f'<div class="temp">{e(c.temperature)}</div>'
            f"<p>{e(c.description)}<br>{e(c.feels_like)}</p>"
            '<div class="details">'
            f"<div>💧 Humidity<br>{e(c.humidity)}</div>"
            f"<div>🌧️ Precipitation<br>{e(c.precipitation)}</div>"
            f"<div>💨 Wind Speed<br>{e(c.wind_speed)}</div>"
            f"<div>🧭 Wind Direction<br>{e(c.wind_direction)}</div>"
            "</div>"
            f'<div class="forecast"><h3>7-Day Forecast</h3>{rows}</div>'
        )
    else:
        body = f"<p>{e(v.message)}</p>"

    alert = ""
    if v.status == FetchStatus.ERROR:
        alert = 'alert("Failed to fetch weather data. Please try again.");'
    elif v.status == FetchStatus.LOADING:
        alert = "setTimeout(() => location.reload(), 1000);"

    return PAGE_TEMPLATE.format(
        title=e(v.title),
        date_text=e(v.date_text),
        start=v.theme.gradient_start,
        end=v.theme.gradient_end,
        body=body,
        alert=alert,
    )


def create_app(
    config: AppConfig,
    controller: ForecastController | None = None,
) -> FastAPI:
    controller = controller or build_controller(config)
    location = config.location.to_location()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Mount fetch runs off the event loop so the Loading screen can be served.
        mount = threading.Thread(target=controller.start, name="mount-fetch", daemon=True)
        app.state.mount_thread = mount
        mount.start()
        yield
        mount.join(timeout=config.provider.timeout)
        if mount.is_alive():
            logger.warning(
                "Mount fetch still running after %.1fs at shutdown", config.provider.timeout
            )

    app = FastAPI(title="Weather Dashboard", version="0.1.0", lifespan=lifespan)

    def _screen() -> ScreenView:
        return build_screen(controller.state, location, date.today())

    @app.get("/", response_class=HTMLResponse)
    def index():
        return render_page(_screen())

    @app.get("/api/weather")
    def get_weather():
        """Current screen: status, theme, current block and forecast rows."""
        return screen_to_dict(_screen())

    @app.post("/api/refresh")
    def refresh():
        """User-initiated refresh. started=False when a fetch was already in flight."""
        started = controller.refresh()
        return {"started": started, "status": controller.state.status.value}

    @app.get("/api/codes")
    def get_codes():
        return [
            {
                "code": code,
                "description": WEATHER_CODES[code].description,
                "day_icon": WEATHER_CODES[code].day_icon,
                "night_icon": WEATHER_CODES[code].night_icon,
            }
            for code in known_codes()
        ]

    return app
