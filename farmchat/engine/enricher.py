import asyncio
from typing import Tuple
from farmchat.schema import Coordinates, SoilSample, WeatherSnapshot
from farmchat.engine.result import Lookup
from farmchat.engine.soil import SoilLookup
from farmchat.engine.weather import WeatherLookup

class EnvironmentEnricher:
    """Soil and weather for one point. The two calls share nothing, so they run together."""

    def __init__(self, soil: SoilLookup, weather: WeatherLookup):
        self.soil = soil
        self.weather = weather

    async def enrich(
        self, coords: Coordinates
    ) -> Tuple[Lookup[SoilSample], Lookup[WeatherSnapshot]]:
        soil, weather = await asyncio.gather(
            self.soil.fetch(coords),
            self.weather.fetch(coords),
        )
        return soil, weather
