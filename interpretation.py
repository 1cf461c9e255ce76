"""
Rule-based chart interpretation.

Sentences are composed from fixed phrase tables keyed by planet, sign,
house and aspect type. The rules run in a fixed order and every category
is capped; when a category overflows, the sentences built first survive.
"""

from types import MappingProxyType
from typing import Dict, List, Optional, Sequence

from chart import (
    Aspect,
    ChartConfig,
    ChartInterpretation,
    HouseCusp,
    PlanetPosition,
    ZodiacPosition,
    sign_ruler,
)

PLANET_MEANINGS = MappingProxyType({
    'sun': "identity, confidence, purpose",
    'moon': "emotions, habits, mind",
    'mercury': "communication, thinking, learning",
    'venus': "love, beauty, values",
    'mars': "action, conflict, drive",
    'jupiter': "expansion, growth, wisdom",
    'saturn': "structure, limits, discipline",
    'uranus': "innovation, freedom, change",
    'neptune': "dreams, intuition, illusion",
    'pluto': "transformation, power, depth",
})

SIGN_MEANINGS = MappingProxyType({
    'Aries': "bold, fast, direct",
    'Taurus': "stable, sensual, persistent",
    'Gemini': "curious, adaptable, communicative",
    'Cancer': "emotional, protective, nurturing",
    'Leo': "creative, proud, expressive",
    'Virgo': "analytical, practical, service-oriented",
    'Libra': "harmonious, diplomatic, balanced",
    'Scorpio': "intense, transformative, secretive",
    'Sagittarius': "adventurous, philosophical, expansive",
    'Capricorn': "ambitious, disciplined, traditional",
    'Aquarius': "independent, innovative, humanitarian",
    'Pisces': "intuitive, compassionate, dreamy",
})

HOUSE_MEANINGS = MappingProxyType({
    1: "self, body, personality",
    2: "resources, values, possessions",
    3: "communication, learning, siblings",
    4: "home, family, roots",
    5: "creativity, romance, children",
    6: "work, health, service",
    7: "partnerships, relationships, others",
    8: "transformation, shared resources, depth",
    9: "philosophy, travel, higher learning",
    10: "career, reputation, public image",
    11: "friends, groups, aspirations",
    12: "subconscious, secrets, spirituality",
})

ASPECT_MODIFIERS = MappingProxyType({
    'Conjunction': "amplifies and intensifies",
    'Sextile': "flows smoothly and harmoniously",
    'Square': "creates tension and challenges",
    'Trine': "flows easily and naturally",
    'Quincunx': "requires adjustment and adaptation",
    'Opposition': "creates push-pull dynamics",
})

CAREER_OCCUPANTS = MappingProxyType({
    'sun': "The Sun in your tenth house puts your identity on public display; you need to distinguish yourself through goals, success, and responsibility.",
    'moon': "The Moon in your tenth house ties your emotional security to your reputation and public role.",
    'mercury': "Mercury in your tenth house favors work built on communication, analysis, and ideas.",
    'venus': "Venus in your tenth house brings charm and diplomacy to your professional life.",
    'mars': "Mars in your tenth house drives you to compete and lead in your chosen field.",
})

RELATIONSHIP_OCCUPANTS = MappingProxyType({
    'moon': "The Moon in your seventh house means you look for emotional security through close partnership.",
    'venus': "Venus in your seventh house draws affection and harmony into your partnerships.",
})

CATEGORY_LIMITS = MappingProxyType({
    'core_personality': 6,
    'career': 5,
    'relationships': 5,
    'strengths': 5,
    'challenges': 5,
})

STRENGTH_HOUSES = frozenset({5, 9, 11})
CHALLENGE_HOUSES = frozenset({6, 8, 12})
ANGULAR_HOUSES = frozenset({1, 4, 7, 10})


class InterpretationBuilder:
    """Collects sentences per category and caps each one in insertion order."""

    def __init__(self):
        self._sentences: Dict[str, List[str]] = {key: [] for key in CATEGORY_LIMITS}

    def add(self, category: str, sentence: str) -> None:
        self._sentences[category].append(sentence)

    def build(self) -> ChartInterpretation:
        return ChartInterpretation(**{
            key: tuple(sentences[:CATEGORY_LIMITS[key]])
            for key, sentences in self._sentences.items()
        })


def _label(planet: str) -> str:
    return planet.capitalize()


def _house_name(house: int) -> str:
    return ChartConfig.HOUSE_NAMES[house]


def placement_sentence(planet: str, position: PlanetPosition, house: int) -> str:
    """Planet + sign + house sentence."""
    return (
        f"Your {_label(planet)}, which governs your {PLANET_MEANINGS[planet]}, is in "
        f"{position.sign} ({SIGN_MEANINGS[position.sign]}) and works through your "
        f"{_house_name(house)} house of {HOUSE_MEANINGS[house]}."
    )


def aspect_clause(aspect: Aspect, planet: str) -> str:
    return (
        f" Its {aspect.type.lower()} with {_label(aspect.other(planet))} "
        f"{ASPECT_MODIFIERS[aspect.type]} this expression."
    )


def priority_aspect(aspects: Sequence[Aspect], planet: str, asc_ruler: Optional[str]) -> Optional[Aspect]:
    """
    The aspect that colors a luminary's sentence: the first one (in list
    order) to the Sun, Moon or ascendant ruler, else the first one at all.
    """
    preferred = {'sun', 'moon', asc_ruler} - {planet, None}
    involving = [a for a in aspects if a.involves(planet)]
    for aspect in involving:
        if aspect.other(planet) in preferred:
            return aspect
    return involving[0] if involving else None


def _route_luminary(house: int) -> str:
    if house == 10:
        return 'career'
    if house == 7:
        return 'relationships'
    return 'core_personality'


def _cusp(houses: Sequence[HouseCusp], number: int) -> HouseCusp:
    for cusp in houses:
        if cusp.house == number:
            return cusp
    raise ValueError(f"House {number} missing from cusps")


def _ruler_flow_sentence(domain: str, cusp: HouseCusp, planets, planet_houses) -> Optional[str]:
    ruler = sign_ruler(cusp.sign)
    if ruler not in planets:
        return None
    ruler_sign = planets[ruler].sign
    ruler_house = planet_houses[ruler]
    return (
        f"Your {domain} house falls in {cusp.sign} and is ruled by {_label(ruler)}, so its energy "
        f"flows toward your {_house_name(ruler_house)} house of {HOUSE_MEANINGS[ruler_house]}, "
        f"expressed through {ruler_sign} qualities ({SIGN_MEANINGS[ruler_sign]})."
    )


def _occupant_sentence(template: str, position: PlanetPosition) -> str:
    return f"{template} In {position.sign} this comes across as {SIGN_MEANINGS[position.sign]}."


def _polarity(aspect: Aspect) -> str:
    return 'challenges' if aspect.type in ChartConfig.HARD_ASPECTS else 'strengths'


def interpret_chart(planets: Dict[str, PlanetPosition],
                    ascendant: ZodiacPosition,
                    houses: Sequence[HouseCusp],
                    planet_houses: Dict[str, int],
                    aspects: Sequence[Aspect]) -> ChartInterpretation:
    """Turn chart positions into categorized sentences."""
    out = InterpretationBuilder()
    asc_ruler = sign_ruler(ascendant.sign)

    # Ascendant ruler, one level of chaining only
    if asc_ruler in planets:
        ruler_pos = planets[asc_ruler]
        ruler_house = planet_houses[asc_ruler]
        out.add('core_personality', (
            f"With {ascendant.sign} rising you meet the world as {SIGN_MEANINGS[ascendant.sign]}; "
            f"your chart ruler {_label(asc_ruler)} in {ruler_pos.sign} ({SIGN_MEANINGS[ruler_pos.sign]}) "
            f"directs that energy toward your {_house_name(ruler_house)} house of "
            f"{HOUSE_MEANINGS[ruler_house]}."
        ))

    for luminary in ('sun', 'moon'):
        if luminary not in planets:
            continue
        house = planet_houses[luminary]
        sentence = placement_sentence(luminary, planets[luminary], house)
        aspect = priority_aspect(aspects, luminary, asc_ruler)
        if aspect is not None:
            sentence += aspect_clause(aspect, luminary)
        out.add(_route_luminary(house), sentence)

    career = _ruler_flow_sentence('career', _cusp(houses, 10), planets, planet_houses)
    if career:
        out.add('career', career)
    for planet in ChartConfig.PERSONAL_PLANETS:
        if planet_houses.get(planet) == 10:
            out.add('career', _occupant_sentence(CAREER_OCCUPANTS[planet], planets[planet]))

    relationships = _ruler_flow_sentence('relationship', _cusp(houses, 7), planets, planet_houses)
    if relationships:
        out.add('relationships', relationships)
    for planet in ChartConfig.PERSONAL_PLANETS:
        if planet in RELATIONSHIP_OCCUPANTS and planet_houses.get(planet) == 7:
            out.add('relationships', _occupant_sentence(RELATIONSHIP_OCCUPANTS[planet], planets[planet]))

    for planet in ('mercury', 'venus', 'mars'):
        house = planet_houses.get(planet)
        if house is None or house in ANGULAR_HOUSES:
            continue
        if house in STRENGTH_HOUSES:
            out.add('strengths', placement_sentence(planet, planets[planet], house))
        elif house in CHALLENGE_HOUSES:
            out.add('challenges', placement_sentence(planet, planets[planet], house))

    sun_moon = next((a for a in aspects if {a.body1, a.body2} == {'sun', 'moon'}), None)
    if sun_moon is not None:
        out.add(_polarity(sun_moon), (
            f"Your Sun and Moon form a {sun_moon.type.lower()}, which "
            f"{ASPECT_MODIFIERS[sun_moon.type]} between what you want and what you need."
        ))

    if asc_ruler in planets:
        for aspect in aspects:
            if not aspect.involves(asc_ruler) or {aspect.body1, aspect.body2} == {'sun', 'moon'}:
                continue
            other = aspect.other(asc_ruler)
            if other not in ('sun', 'moon'):
                continue
            out.add(_polarity(aspect), (
                f"Your chart ruler {_label(asc_ruler)} forms a {aspect.type.lower()} with your "
                f"{_label(other)}, which {ASPECT_MODIFIERS[aspect.type]} how your outward style "
                f"and inner self work together."
            ))
            break

    return out.build()
