"""
Natal Chart Calculator

Turns a civil birth time and location into a finished Chart:
planet positions from the ephemeris, the ascendant from a horizon to
ecliptic rotation, whole-sign houses, aspects, and interpretations.
"""

import math
from types import MappingProxyType
from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from chart import (
    Aspect,
    AspectDefinition,
    Chart,
    ChartConfig,
    HouseCusp,
    PlanetPosition,
    ZodiacPosition,
    angular_distance,
    zodiac_from_longitude,
)
from ephemeris import SwissEphemeris, to_utc
from exceptions import InvalidCoordinatesError
from interpretation import interpret_chart

logger = structlog.get_logger(__name__)

Vector = Tuple[float, float, float]


def vector_from_horizon(altitude: float, azimuth: float) -> Vector:
    """Unit vector in the horizon frame (x north, y west, z zenith); azimuth clockwise from north."""
    alt = math.radians(altitude)
    az = math.radians(azimuth)
    return (
        math.cos(alt) * math.cos(az),
        -math.cos(alt) * math.sin(az),
        math.sin(alt),
    )


def rotate_vector(rotation: Sequence[Sequence[float]], vec: Vector) -> Vector:
    return tuple(sum(row[j] * vec[j] for j in range(3)) for row in rotation)


def sphere_longitude(vec: Vector) -> float:
    """Spherical longitude of a vector, in degrees [0, 360)."""
    return math.degrees(math.atan2(vec[1], vec[0])) % 360


def calculate_ascendant(ephemeris, jd: float, latitude: float, longitude: float) -> ZodiacPosition:
    """Zodiac position of the due-east horizon point for the observer at this instant."""
    east = vector_from_horizon(altitude=0.0, azimuth=90.0)
    rotation = ephemeris.horizon_to_ecliptic_rotation(jd, latitude, longitude)
    return zodiac_from_longitude(sphere_longitude(rotate_vector(rotation, east)))


class WholeSignHouses:
    """Whole-sign houses: each house is one full sign, starting from the ascendant's sign."""

    name = 'whole-sign'

    def cusps(self, ascendant: ZodiacPosition) -> Tuple[HouseCusp, ...]:
        cusps = []
        for house in range(1, 13):
            sign_index = (ascendant.sign_index + house - 1) % 12
            cusps.append(HouseCusp(
                house=house,
                longitude=float(sign_index * 30),
                sign=ChartConfig.SIGN_NAMES[sign_index],
                sign_index=sign_index,
                degree_inside_sign=0.0,
            ))
        return tuple(cusps)

    def house_of(self, position: ZodiacPosition, ascendant: ZodiacPosition) -> int:
        return (position.sign_index - ascendant.sign_index) % 12 + 1

    def assign(self, planets: Dict[str, PlanetPosition], ascendant: ZodiacPosition) -> Dict[str, int]:
        return {name: self.house_of(pos, ascendant) for name, pos in planets.items()}


HOUSE_SYSTEMS = {
    WholeSignHouses.name: WholeSignHouses,
}


def find_aspect(angle: float) -> Optional[Tuple[AspectDefinition, float]]:
    """First aspect in table order whose exact angle is within orb, with that orb."""
    for aspect_def in ChartConfig.ASPECTS:
        orb = abs(angle - aspect_def.angle)
        if orb <= ChartConfig.MAX_ORB:
            return aspect_def, orb
    return None


def detect_aspects(planets: Dict[str, PlanetPosition]) -> List[Aspect]:
    """Scan every unordered pair of planets in enumeration order."""
    aspects = []
    names = list(planets.keys())
    for i, name1 in enumerate(names):
        for name2 in names[i + 1:]:
            angle = angular_distance(planets[name1].longitude, planets[name2].longitude)
            match = find_aspect(angle)
            if match is None:
                continue
            aspect_def, orb = match
            aspects.append(Aspect(
                body1=name1,
                body2=name2,
                angle=angle,
                type=aspect_def.name,
                orb=orb,
            ))
    return aspects


class NatalChart:
    """Validate birth data and assemble a complete chart."""

    def __init__(self,
                 year: int,
                 month: int,
                 day: int,
                 hour: int,
                 minute: int,
                 second: int = 0,
                 timezone: str = 'UTC',
                 latitude: float = 0.0,
                 longitude: float = 0.0,
                 ephemeris=None,
                 house_system: str = 'whole-sign'):

        if not -90 <= latitude <= 90:
            raise InvalidCoordinatesError("Latitude must be between -90 and 90")
        if not -180 <= longitude <= 180:
            raise InvalidCoordinatesError("Longitude must be between -180 and 180")
        if house_system not in HOUSE_SYSTEMS:
            raise ValueError(f"Unknown house system: {house_system}")

        self.latitude = latitude
        self.longitude = longitude
        self.house_system = HOUSE_SYSTEMS[house_system]()
        self.ephemeris = ephemeris if ephemeris is not None else SwissEphemeris()

        # Fails before any astronomy when the civil time does not resolve
        self.birth_date_utc = to_utc(year, month, day, hour, minute, second, timezone)
        self.julian_day = self.ephemeris.julian_day(self.birth_date_utc)

    def calculate_planets(self) -> Dict[str, PlanetPosition]:
        planets = {}
        for name in ChartConfig.BODY_ORDER:
            if name == 'sun':
                lon = self.ephemeris.sun_ecliptic_longitude(self.julian_day)
            else:
                lon = self.ephemeris.ecliptic_longitude(name, self.julian_day)
            planets[name] = zodiac_from_longitude(lon)
        return planets

    def calculate_ascendant(self) -> ZodiacPosition:
        return calculate_ascendant(self.ephemeris, self.julian_day, self.latitude, self.longitude)

    def generate_full_chart(self) -> Chart:
        planets = self.calculate_planets()
        ascendant = self.calculate_ascendant()

        houses = self.house_system.cusps(ascendant)
        planet_houses = self.house_system.assign(planets, ascendant)
        aspects = detect_aspects(planets)
        interpretations = interpret_chart(planets, ascendant, houses, planet_houses, aspects)

        chart = Chart(
            utc=self.birth_date_utc.isoformat(),
            planets=MappingProxyType(planets),
            ascendant=ascendant,
            houses=houses,
            planet_houses=MappingProxyType(planet_houses),
            aspects=tuple(aspects),
            house_system=self.house_system.name,
            interpretations=interpretations,
        )
        logger.debug(
            "chart_assembled",
            utc=chart.utc,
            ascendant=ascendant.sign,
            aspects=len(chart.aspects),
        )
        return chart
