"""Pydantic models for Natal Chart API request/response validation."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response base: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Request Models
class NatalChartRequest(BaseModel):
    """Request model for natal chart calculation."""

    year: int = Field(..., strict=True, description="Birth year", examples=[1990])
    month: int = Field(..., strict=True, description="Birth month (1-12)", examples=[6])
    day: int = Field(..., strict=True, description="Birth day of month", examples=[15])
    hour: int = Field(..., strict=True, description="Hour of birth (0-23), local civil time", examples=[14])
    minute: int = Field(..., strict=True, description="Minute of birth (0-59)", examples=[30])
    second: int = Field(default=0, strict=True, description="Second of birth (0-59)")
    timezone: str = Field(
        ...,
        strict=True,
        min_length=1,
        description="IANA timezone name (e.g., 'America/New_York')"
    )
    lat: float = Field(..., strict=True, description="Latitude in decimal degrees (-90 to 90)")
    lon: float = Field(..., strict=True, description="Longitude in decimal degrees (-180 to 180)")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{
                "year": 1990,
                "month": 6,
                "day": 15,
                "hour": 14,
                "minute": 30,
                "timezone": "America/New_York",
                "lat": 40.7128,
                "lon": -74.0060
            }]
        }
    )


# Response Models
class ZodiacPositionResponse(CamelModel):
    """Position of a planet or the ascendant."""
    longitude: float
    sign: str
    sign_index: int
    degree_inside_sign: float


class HouseCuspResponse(CamelModel):
    """House cusp information."""
    house: int
    longitude: float
    sign: str
    sign_index: int
    degree_inside_sign: float


class AspectResponse(CamelModel):
    """Aspect between two planets."""
    body1: str
    body2: str
    angle: float
    type: str
    orb: float


class InterpretationResponse(CamelModel):
    core_personality: List[str]
    career: List[str]
    relationships: List[str]
    strengths: List[str]
    challenges: List[str]


class ChartResponse(CamelModel):
    """Complete natal chart."""
    utc: str
    planets: Dict[str, ZodiacPositionResponse]
    ascendant: ZodiacPositionResponse
    houses: List[HouseCuspResponse]
    planet_houses: Dict[str, int]
    aspects: List[AspectResponse]
    house_system: str
    interpretations: InterpretationResponse


class NatalChartResponse(BaseModel):
    chart: ChartResponse


class PersonalitySummaryResponse(BaseModel):
    """Top traits with the raw score of every trait considered."""
    traits: List[str]
    scores: Dict[str, float]


class ReadingResponse(CamelModel):
    point: str
    sign: str
    house: int
    position: str
    house_name: str
    text: str


class ReadingsResponse(BaseModel):
    readings: List[ReadingResponse]


class ErrorResponse(BaseModel):
    """Error body returned for every failure."""
    error: str


class AspectDefinitionResponse(CamelModel):
    """Aspect definition from the aspect table."""
    name: str
    symbol: str
    angle: float
    orb: float
    hard: bool


class ConfigAspectsResponse(BaseModel):
    aspects: List[AspectDefinitionResponse]


class ConfigHouseSystemsResponse(CamelModel):
    house_systems: List[str]
    default: Optional[str] = None
