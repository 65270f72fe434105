from typing import Any, Optional
from langchain_openai import ChatOpenAI
from langchain_core.prompts import ChatPromptTemplate
from farmchat.config import Settings
from farmchat.schema import FarmerProfile, SoilSample, WeatherSnapshot

class AdvisorError(RuntimeError):
    """The language model gave no usable answer."""

_PROMPT = ChatPromptTemplate.from_messages([
    ("system",
     "You are an AI assistant for a farmer.\n"
     "Farmer is located in {city}, {state}, growing {crop}.\n"
     "Current weather: Temperature {temp}°C, {description}, Humidity {humidity}%.\n"
     "Soil data: Soil type {soil_type}, pH {ph}, Organic Carbon {organic_carbon}.\n"
     "Answer in English and give practical farming advice based on location, "
     "soil, weather, and crop type."),
    ("user", "{question}"),
])

def build_llm(settings: Settings) -> ChatOpenAI:
    return ChatOpenAI(
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        api_key=settings.groq_api_key,
        base_url=settings.llm_base_url,
        timeout=settings.llm_timeout_s,
        max_retries=0,                               # failures surface to the caller
    )

class AdvisorClient:
    def __init__(self, settings: Settings, llm: Optional[Any] = None):
        self.settings = settings
        self._llm = llm

    @property
    def llm(self):
        # built on first use so a misconfigured client fails inside advise()
        if self._llm is None:
            self._llm = build_llm(self.settings)
        return self._llm

    def messages(
        self,
        profile: FarmerProfile,
        soil: SoilSample,
        weather: WeatherSnapshot,
        question: str,
    ):
        return _PROMPT.format_messages(
            city=profile.city,
            state=profile.state,
            crop=profile.crop,
            temp=weather.temp,
            description=weather.description,
            humidity=weather.humidity,
            soil_type=soil.soilType,
            ph=soil.pH,
            organic_carbon=soil.organicCarbon,
            question=question,
        )

    async def advise(
        self,
        profile: FarmerProfile,
        soil: SoilSample,
        weather: WeatherSnapshot,
        question: str,
    ) -> str:
        msg = self.messages(profile, soil, weather, question)
        resp = await self.llm.ainvoke(msg)
        content = getattr(resp, "content", "") or ""
        if not isinstance(content, str) or not content.strip():
            raise AdvisorError("language model returned no completion")
        return content
