"""
SoilGrids point query: soil class, topsoil pH and organic carbon.

A reachable service with gaps in its payload yields per-field "Unknown"
sentinels; an unreachable or unparseable one yields FALLBACK_SOIL.
"""
import logging
from typing import Any, Dict, Optional
import httpx
from farmchat.config import Settings
from farmchat.schema import UNKNOWN, Coordinates, SoilSample
from farmchat.engine.result import Lookup
from farmchat.engine.geocode import PARSE_ERRORS

logger = logging.getLogger(__name__)

FALLBACK_SOIL = SoilSample(soilType="Loam", pH=6.5, organicCarbon=1.2)

def _first(seq: Any) -> Optional[Any]:
    if isinstance(seq, list) and seq:
        return seq[0]
    return None

def _mean(data: Dict[str, Any], prop: str) -> Any:
    layer = data.get(prop)
    value = _first(layer.get("mean")) if isinstance(layer, dict) else None
    return value or UNKNOWN

def parse_soil(data: Dict[str, Any]) -> SoilSample:
    first_class = _first(data.get("soil"))
    name = first_class.get("name") if isinstance(first_class, dict) else None
    return SoilSample(
        soilType=name or UNKNOWN,
        pH=_mean(data, "phh2o"),
        organicCarbon=_mean(data, "organiccarbon"),
    )

class SoilLookup:
    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def fetch(self, coords: Coordinates) -> Lookup[SoilSample]:
        params = {"lat": coords.lat, "lon": coords.lng}
        try:
            r = await self.client.get(
                self.settings.soil_url, params=params,
                headers={"Accept": "application/json"},
            )
            r.raise_for_status()
            data = r.json()
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            return Lookup.ok(parse_soil(data))
        except (httpx.HTTPError, *PARSE_ERRORS) as e:
            logger.warning("SoilGrids API unreachable (%s). Using fallback data.", e)
            return Lookup.degraded(FALLBACK_SOIL, f"soil lookup failed: {e!r}")
