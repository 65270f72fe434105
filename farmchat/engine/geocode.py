"""
OpenCage geocoding: turns a farmer's "city, state" into coordinates.

Falls back to (0, 0) on any failure so the request can carry on.
"""
import logging
import httpx
from farmchat.config import Settings
from farmchat.schema import Coordinates
from farmchat.engine.result import Lookup

logger = logging.getLogger(__name__)

FALLBACK_COORDINATES = Coordinates(lat=0, lng=0)

# everything a bad payload can raise while we pick it apart
PARSE_ERRORS = (ValueError, KeyError, IndexError, TypeError, AttributeError)

class GeoResolver:
    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def resolve(self, city: str, state: str) -> Lookup[Coordinates]:
        params = {"q": f"{city},{state}", "key": self.settings.opencage_key}
        try:
            r = await self.client.get(self.settings.geocode_url, params=params)
            r.raise_for_status()
            results = r.json()["results"]
            if not results:
                return self._fallback(f"no geocoding results for {city!r}, {state!r}")
            geometry = results[0]["geometry"]
            return Lookup.ok(Coordinates(lat=geometry["lat"], lng=geometry["lng"]))
        except httpx.HTTPError as e:
            return self._fallback(f"geocoding request failed: {e}")
        except PARSE_ERRORS as e:
            return self._fallback(f"malformed geocoding response: {e!r}")

    @staticmethod
    def _fallback(reason: str) -> Lookup[Coordinates]:
        logger.warning("Geocoding failed: %s", reason)
        return Lookup.degraded(FALLBACK_COORDINATES, reason)
