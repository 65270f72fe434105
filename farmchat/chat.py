import logging
from typing import AsyncIterator
import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from farmchat.config import Settings, settings
from farmchat.db import db
from farmchat.schema import ChatRequest, ChatResponse, ErrorResponse
from farmchat.profiles import FarmerNotFound, ProfileLookup
from farmchat.handler import AdviceRequestHandler
from farmchat.engine.geocode import GeoResolver
from farmchat.engine.soil import SoilLookup
from farmchat.engine.weather import WeatherLookup
from farmchat.engine.enricher import EnvironmentEnricher
from farmchat.engine.advisor import AdvisorClient

logger = logging.getLogger(__name__)

router = APIRouter()

def get_settings() -> Settings:
    return settings

def get_advisor(cfg: Settings = Depends(get_settings)) -> AdvisorClient:
    # the chat model itself is built lazily on the first advise() call
    return AdvisorClient(cfg)

async def get_handler(
    cfg: Settings = Depends(get_settings),
    advisor: AdvisorClient = Depends(get_advisor),
) -> AsyncIterator[AdviceRequestHandler]:
    # one HTTP client per request, closed once the response is built
    async with httpx.AsyncClient(timeout=cfg.http_timeout_s) as client:
        yield AdviceRequestHandler(
            profiles=ProfileLookup(db.farmers),
            geo=GeoResolver(cfg, client),
            enricher=EnvironmentEnricher(SoilLookup(cfg, client), WeatherLookup(cfg, client)),
            advisor=advisor,
        )

@router.post(
    "/",
    response_model=ChatResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(body: ChatRequest, handler: AdviceRequestHandler = Depends(get_handler)):
    try:
        return await handler.handle(body.email, body.question)
    except FarmerNotFound:
        return JSONResponse(status_code=404, content={"error": "Farmer not found"})
    except Exception:
        logger.exception("Chat endpoint failed")
        return JSONResponse(status_code=500, content={"error": "Failed to get AI response"})
