"""
Chart value objects and zodiac arithmetic.

Everything here is pure: positions are mapped to signs, angular
separations are measured, and the immutable records that make up a
finished chart are defined.
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class AspectDefinition:
    """Definition of an astrological aspect."""
    angle: float
    name: str
    symbol: str
    hard: bool = False


class ChartConfig:
    """Shared configuration for chart calculations."""

    SIGNS = [
        {'name': 'Aries', 'symbol': '♈', 'ruler': 'mars'},
        {'name': 'Taurus', 'symbol': '♉', 'ruler': 'venus'},
        {'name': 'Gemini', 'symbol': '♊', 'ruler': 'mercury'},
        {'name': 'Cancer', 'symbol': '♋', 'ruler': 'moon'},
        {'name': 'Leo', 'symbol': '♌', 'ruler': 'sun'},
        {'name': 'Virgo', 'symbol': '♍', 'ruler': 'mercury'},
        {'name': 'Libra', 'symbol': '♎', 'ruler': 'venus'},
        {'name': 'Scorpio', 'symbol': '♏', 'ruler': 'mars'},
        {'name': 'Sagittarius', 'symbol': '♐', 'ruler': 'jupiter'},
        {'name': 'Capricorn', 'symbol': '♑', 'ruler': 'saturn'},
        {'name': 'Aquarius', 'symbol': '♒', 'ruler': 'uranus'},
        {'name': 'Pisces', 'symbol': '♓', 'ruler': 'neptune'},
    ]
    SIGN_NAMES = tuple(s['name'] for s in SIGNS)

    # Enumeration order of chart bodies: the nine ephemeris bodies, then the Sun.
    # Aspect discovery and the serialized planets mapping follow this order.
    BODY_ORDER = (
        'moon', 'mercury', 'venus', 'mars', 'jupiter',
        'saturn', 'uranus', 'neptune', 'pluto', 'sun',
    )
    PERSONAL_PLANETS = ('sun', 'moon', 'mercury', 'venus', 'mars')

    MAX_ORB = 6.0
    # Tried in this order; the first aspect within orb wins
    ASPECTS = (
        AspectDefinition(0, 'Conjunction', '☌'),
        AspectDefinition(60, 'Sextile', '⚹'),
        AspectDefinition(90, 'Square', '□', hard=True),
        AspectDefinition(120, 'Trine', '△'),
        AspectDefinition(150, 'Quincunx', '⚻'),
        AspectDefinition(180, 'Opposition', '☍', hard=True),
    )
    HARD_ASPECTS = frozenset(a.name for a in ASPECTS if a.hard)

    HOUSE_NAMES = {
        1: 'first', 2: 'second', 3: 'third', 4: 'fourth', 5: 'fifth', 6: 'sixth',
        7: 'seventh', 8: 'eighth', 9: 'ninth', 10: 'tenth', 11: 'eleventh', 12: 'twelfth',
    }


@dataclass(frozen=True)
class ZodiacPosition:
    longitude: float
    sign: str
    sign_index: int
    degree_inside_sign: float


PlanetPosition = ZodiacPosition


@dataclass(frozen=True)
class HouseCusp:
    house: int
    longitude: float
    sign: str
    sign_index: int
    degree_inside_sign: float


@dataclass(frozen=True)
class Aspect:
    body1: str
    body2: str
    angle: float
    type: str
    orb: float

    def involves(self, body: str) -> bool:
        return body in (self.body1, self.body2)

    def other(self, body: str) -> str:
        """The body on the other side of the aspect from `body`."""
        return self.body2 if self.body1 == body else self.body1


@dataclass(frozen=True)
class ChartInterpretation:
    core_personality: Tuple[str, ...] = ()
    career: Tuple[str, ...] = ()
    relationships: Tuple[str, ...] = ()
    strengths: Tuple[str, ...] = ()
    challenges: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Chart:
    """A fully assembled natal chart. Built once, never mutated."""
    utc: str
    planets: Mapping[str, PlanetPosition]
    ascendant: ZodiacPosition
    houses: Tuple[HouseCusp, ...]
    planet_houses: Mapping[str, int]
    aspects: Tuple[Aspect, ...]
    house_system: str
    interpretations: ChartInterpretation

    def to_dict(self) -> Dict:
        return {
            'utc': self.utc,
            'planets': {name: asdict(pos) for name, pos in self.planets.items()},
            'ascendant': asdict(self.ascendant),
            'houses': [asdict(cusp) for cusp in self.houses],
            'planet_houses': dict(self.planet_houses),
            'aspects': [asdict(aspect) for aspect in self.aspects],
            'house_system': self.house_system,
            'interpretations': {
                key: list(value) for key, value in asdict(self.interpretations).items()
            },
        }


def normalize_degrees(deg: float) -> float:
    """Normalize degrees to 0-360 range."""
    normalized = deg % 360
    # tiny negative inputs round up to exactly 360.0
    if normalized >= 360:
        normalized = 0.0
    return normalized


def angular_distance(pos1: float, pos2: float) -> float:
    """
    Calculate the shortest angular distance between two positions.
    Always returns a positive value 0-180.
    """
    diff = abs(normalize_degrees(pos1) - normalize_degrees(pos2))
    return min(diff, 360 - diff)


def zodiac_from_longitude(longitude: float) -> ZodiacPosition:
    """Map an ecliptic longitude (any real value) onto sign and degree-in-sign."""
    normalized = normalize_degrees(longitude)
    sign_index = int(math.floor(normalized / 30))
    return ZodiacPosition(
        longitude=normalized,
        sign=ChartConfig.SIGN_NAMES[sign_index],
        sign_index=sign_index,
        degree_inside_sign=normalized - sign_index * 30,
    )


def sign_ruler(sign: str) -> Optional[str]:
    for sign_data in ChartConfig.SIGNS:
        if sign_data['name'] == sign:
            return sign_data['ruler']
    return None


def format_degrees(degrees: float) -> str:
    """Format decimal degrees as D°M'S" with whole seconds."""
    deg = int(math.floor(degrees))
    minutes_decimal = (degrees - deg) * 60
    minutes = int(math.floor(minutes_decimal))
    seconds = int(round((minutes_decimal - minutes) * 60))
    if seconds == 60:
        seconds = 0
        minutes += 1
    if minutes == 60:
        minutes = 0
        deg += 1
    return f"{deg}°{minutes}'{seconds}\""
