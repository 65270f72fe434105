from pydantic import BaseModel, Field
from typing import Any, Dict, Literal, Union

UNKNOWN = "Unknown"

# ints stay ints so prompts echo upstream values as sent
Number = Union[int, float]

# numeric reading, or the "Unknown" sentinel when the upstream omitted it
Reading = Union[int, float, Literal["Unknown"]]

class FarmerProfile(BaseModel):
    email: str
    city: str = ""
    state: str = ""
    crop: str = ""

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "FarmerProfile":
        return cls(
            email=doc.get("email", ""),
            city=doc.get("city") or "",
            state=doc.get("state") or "",
            crop=doc.get("crop") or "",
        )

class Coordinates(BaseModel):
    lat: Number
    lng: Number

class SoilSample(BaseModel):
    soilType: str
    pH: Reading
    organicCarbon: Reading

class WeatherSnapshot(BaseModel):
    temp: Number
    humidity: Number
    description: str

class ChatRequest(BaseModel):
    email: str = Field(..., description="Email of a registered farmer")
    question: str

class ChatResponse(BaseModel):
    answer: str
    soil: SoilSample
    weather: WeatherSnapshot

class ErrorResponse(BaseModel):
    error: str
