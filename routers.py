"""API routers for the Natal Chart API."""

import random

import structlog
from fastapi import APIRouter

from chart import Chart, ChartConfig
from ephemeris import SwissEphemeris
from exceptions import (
    ChartCalculationError,
    InvalidCoordinatesError,
    InvalidDateTimeError,
)
from models import (
    AspectDefinitionResponse,
    ConfigAspectsResponse,
    ConfigHouseSystemsResponse,
    ErrorResponse,
    NatalChartRequest,
    NatalChartResponse,
    PersonalitySummaryResponse,
    ReadingsResponse,
)
from natal import HOUSE_SYSTEMS, NatalChart
from personality import summarize_personality
from readings import chart_readings
from settings import get_settings

router = APIRouter()
logger = structlog.get_logger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing fields, invalid date/timezone or coordinates"},
    500: {"model": ErrorResponse, "description": "Chart calculation failed"},
}


# Helper Functions
def _build_chart(request: NatalChartRequest) -> Chart:
    """Convert request model to a finished Chart."""
    settings = get_settings()
    try:
        chart = NatalChart(
            year=request.year,
            month=request.month,
            day=request.day,
            hour=request.hour,
            minute=request.minute,
            second=request.second,
            timezone=request.timezone,
            latitude=request.lat,
            longitude=request.lon,
            ephemeris=SwissEphemeris(settings.EPHEMERIS_PATH),
            house_system=settings.HOUSE_SYSTEM,
        ).generate_full_chart()
    except (InvalidCoordinatesError, InvalidDateTimeError):
        raise
    except Exception as e:
        raise ChartCalculationError(f"Chart calculation failed: {str(e)}") from e

    logger.info(
        "chart_computed",
        utc=chart.utc,
        ascendant=chart.ascendant.sign,
        aspects=len(chart.aspects),
    )
    return chart


# Configuration Endpoints
@router.get(
    "/config/house-systems",
    response_model=ConfigHouseSystemsResponse,
    summary="List Available House Systems",
)
async def get_house_systems():
    """List all available house systems."""
    return ConfigHouseSystemsResponse(
        house_systems=list(HOUSE_SYSTEMS.keys()),
        default=get_settings().HOUSE_SYSTEM,
    )


@router.get(
    "/config/aspects",
    response_model=ConfigAspectsResponse,
    summary="List Aspect Definitions",
    description="Aspect table in the order aspects are tried, with the shared orb.",
)
async def get_aspects():
    """List aspect definitions."""
    return ConfigAspectsResponse(
        aspects=[
            AspectDefinitionResponse(
                name=asp.name,
                symbol=asp.symbol,
                angle=asp.angle,
                orb=ChartConfig.MAX_ORB,
                hard=asp.hard,
            )
            for asp in ChartConfig.ASPECTS
        ]
    )


# Natal Chart Endpoints
@router.post(
    "/natal",
    response_model=NatalChartResponse,
    summary="Calculate Natal Chart",
    description="""
    Calculate a complete natal chart including:
    - Sun and planet positions in signs and whole-sign houses
    - Ascendant and the twelve house cusps
    - Aspects between planets
    - Rule-based interpretation text
    """,
    responses=ERROR_RESPONSES,
)
async def calculate_natal_chart(request: NatalChartRequest):
    """Calculate a single natal chart."""
    chart = _build_chart(request)
    return NatalChartResponse(chart=chart.to_dict())


@router.post(
    "/natal/summary",
    response_model=PersonalitySummaryResponse,
    summary="Personality Summary",
    description="Three headline traits scored from the chart's key placements.",
    responses=ERROR_RESPONSES,
)
async def personality_summary(request: NatalChartRequest):
    """Score traits for a chart and return the top three."""
    chart = _build_chart(request)
    seed = get_settings().TRAIT_SEED
    rng = random.Random(seed) if seed is not None else None
    summary = summarize_personality(chart, rng=rng)
    return PersonalitySummaryResponse(traits=list(summary.traits), scores=summary.scores)


@router.post(
    "/natal/readings",
    response_model=ReadingsResponse,
    summary="Planet Readings",
    description="Long-form reading for the ascendant and each planet by sign and house.",
    responses=ERROR_RESPONSES,
)
async def planet_readings(request: NatalChartRequest):
    """Readings for every chart point."""
    chart = _build_chart(request)
    return ReadingsResponse(readings=chart_readings(chart))
