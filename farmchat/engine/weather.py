"""
OpenWeatherMap current conditions for a point, metric units.
"""
import logging
from typing import Any, Dict
import httpx
from farmchat.config import Settings
from farmchat.schema import UNKNOWN, Coordinates, WeatherSnapshot
from farmchat.engine.result import Lookup
from farmchat.engine.geocode import PARSE_ERRORS

logger = logging.getLogger(__name__)

FALLBACK_WEATHER = WeatherSnapshot(temp=30, humidity=50, description="Clear")

def parse_weather(data: Dict[str, Any]) -> WeatherSnapshot:
    main = data.get("main") or {}
    conditions = data.get("weather") or [{}]
    return WeatherSnapshot(
        temp=main.get("temp") or 0,
        humidity=main.get("humidity") or 0,
        description=conditions[0].get("description") or UNKNOWN,
    )

class WeatherLookup:
    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def fetch(self, coords: Coordinates) -> Lookup[WeatherSnapshot]:
        params = {
            "lat": coords.lat,
            "lon": coords.lng,
            "appid": self.settings.openweather_key,
            "units": "metric",
        }
        try:
            r = await self.client.get(self.settings.weather_url, params=params)
            r.raise_for_status()
            data = r.json()
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            return Lookup.ok(parse_weather(data))
        except (httpx.HTTPError, *PARSE_ERRORS) as e:
            logger.warning("Weather API failed (%s). Using fallback.", e)
            return Lookup.degraded(FALLBACK_WEATHER, f"weather lookup failed: {e!r}")
