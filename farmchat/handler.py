"""
Per-request orchestration: profile -> coordinates -> soil & weather -> advice.

Enrichment stages degrade to fixed defaults; only a missing profile or a
failed advisor call ends the request early.
"""
import logging
from farmchat.schema import ChatResponse
from farmchat.profiles import ProfileLookup
from farmchat.engine.geocode import GeoResolver
from farmchat.engine.enricher import EnvironmentEnricher
from farmchat.engine.advisor import AdvisorClient

logger = logging.getLogger(__name__)

class AdviceRequestHandler:
    def __init__(
        self,
        profiles: ProfileLookup,
        geo: GeoResolver,
        enricher: EnvironmentEnricher,
        advisor: AdvisorClient,
    ):
        self.profiles = profiles
        self.geo = geo
        self.enricher = enricher
        self.advisor = advisor

    async def handle(self, email: str, question: str) -> ChatResponse:
        # raises FarmerNotFound before any outbound call
        farmer = await self.profiles.lookup(email)

        coords = await self.geo.resolve(farmer.city, farmer.state)
        soil, weather = await self.enricher.enrich(coords.value)

        degraded = [
            name for name, res in (("geocode", coords), ("soil", soil), ("weather", weather))
            if res.fallback
        ]
        if degraded:
            logger.info("Advice uses fallback data for: %s", ", ".join(degraded))

        answer = await self.advisor.advise(farmer, soil.value, weather.value, question)
        return ChatResponse(answer=answer, soil=soil.value, weather=weather.value)
