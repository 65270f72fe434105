# farmchat/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    # Mongo
    mongodb_uri: str = os.getenv("MONGODB_URI", "")
    mongodb_db: str = os.getenv("MONGODB_DB", "farmchat")
    farmers_collection: str = os.getenv("FARMERS_COLLECTION", "farmers")

    # Enrichment APIs
    opencage_key: str = os.getenv("OPENCAGE_KEY", "")
    openweather_key: str = os.getenv("OPENWEATHER_KEY", "")
    geocode_url: str = os.getenv("GEOCODE_URL", "https://api.opencagedata.com/geocode/v1/json")
    soil_url: str = os.getenv("SOIL_URL", "https://rest.soilgrids.org/query")
    weather_url: str = os.getenv("WEATHER_URL", "https://api.openweathermap.org/data/2.5/weather")
    http_timeout_s: float = float(os.getenv("HTTP_TIMEOUT_S", "10"))

    # LLM (any OpenAI-compatible endpoint, Groq by default)
    groq_api_key: str = os.getenv("GROQ_API_KEY", "")
    llm_base_url: str = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
    llm_model: str = os.getenv("LLM_MODEL", "llama-3.1-8b-instant")
    llm_temperature: float = float(os.getenv("LLM_TEMPERATURE", "0.2"))
    llm_timeout_s: float = float(os.getenv("LLM_TIMEOUT_S", "30"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
