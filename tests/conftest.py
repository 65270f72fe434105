"""
Shared fixtures. Outbound HTTP goes through httpx.MockTransport, the LLM and
the Mongo collection are mocks, so nothing here touches the network.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from langchain_core.messages import AIMessage

from farmchat.config import Settings
from farmchat.profiles import ProfileLookup
from farmchat.handler import AdviceRequestHandler
from farmchat.engine.geocode import GeoResolver
from farmchat.engine.soil import SoilLookup
from farmchat.engine.weather import WeatherLookup
from farmchat.engine.enricher import EnvironmentEnricher
from farmchat.engine.advisor import AdvisorClient

GEOCODE_URL = "https://geocode.test/v1/json"
SOIL_URL = "https://soil.test/query"
WEATHER_URL = "https://weather.test/data/2.5/weather"

SPRINGFIELD_FARMER = {
    "_id": "665f1c2e9b1e8a0012345678",
    "email": "ada@farm.test",
    "city": "Springfield",
    "state": "IL",
    "crop": "corn",
}

GEOCODE_OK = {"results": [
    {"geometry": {"lat": 39.7817, "lng": -89.6501}},
    {"geometry": {"lat": 37.2153, "lng": -93.2982}},
]}

SOIL_OK = {
    "soil": [{"name": "Mollisols"}, {"name": "Alfisols"}],
    "phh2o": {"mean": [6.8, 7.1]},
    "organiccarbon": {"mean": [2.4, 1.9]},
}

WEATHER_OK = {
    "main": {"temp": 21.5, "humidity": 64},
    "weather": [{"description": "scattered clouds"}, {"description": "mist"}],
}


class FakeUpstreams:
    """Routes requests to canned payloads by host and records every call."""

    def __init__(self, geocode=GEOCODE_OK, soil=SOIL_OK, weather=WEATHER_OK):
        self.payloads = {
            "geocode.test": geocode,
            "soil.test": soil,
            "weather.test": weather,
        }
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        payload = self.payloads[request.url.host]
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, httpx.Response):
            return payload
        return httpx.Response(200, json=payload)

    def hosts(self):
        return [r.url.host for r in self.requests]


@pytest.fixture
def settings():
    return Settings(
        mongodb_uri="mongodb://localhost:27017/farmchat_test",
        opencage_key="geo-key",
        openweather_key="weather-key",
        geocode_url=GEOCODE_URL,
        soil_url=SOIL_URL,
        weather_url=WEATHER_URL,
        groq_api_key="llm-key",
    )


@pytest.fixture
def upstreams():
    return FakeUpstreams()


@pytest.fixture
def farmers():
    """Stand-in for the motor collection: find_one by email."""
    docs = {SPRINGFIELD_FARMER["email"]: SPRINGFIELD_FARMER}
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=lambda query: docs.get(query["email"]))
    return collection


@pytest.fixture
def llm():
    fake = MagicMock()
    fake.ainvoke = AsyncMock(return_value=AIMessage(content="Side-dress nitrogen before V6."))
    return fake


@pytest.fixture
def build_handler(settings, farmers, llm):
    """Factory: wires a handler around an httpx client backed by the given upstreams."""

    def _build(upstreams: FakeUpstreams) -> AdviceRequestHandler:
        client = httpx.AsyncClient(transport=httpx.MockTransport(upstreams))
        return AdviceRequestHandler(
            profiles=ProfileLookup(farmers),
            geo=GeoResolver(settings, client),
            enricher=EnvironmentEnricher(
                SoilLookup(settings, client), WeatherLookup(settings, client)
            ),
            advisor=AdvisorClient(settings, llm=llm),
        )

    return _build
