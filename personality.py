"""
Three-word personality summary for onboarding.

Weighted trait scoring over a fixed vocabulary. Scores accumulate in an
insertion-ordered dict and are sorted with a stable sort, so ties keep the
order in which traits were first scored.
"""

import random
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set, Tuple

from chart import Chart
from interpretation import SIGN_MEANINGS

SIGN_TRAITS = {
    'Aries': 'Bold',
    'Taurus': 'Grounded',
    'Gemini': 'Curious',
    'Cancer': 'Nurturing',
    'Leo': 'Creative',
    'Virgo': 'Analytical',
    'Libra': 'Harmonious',
    'Scorpio': 'Intense',
    'Sagittarius': 'Adventurous',
    'Capricorn': 'Ambitious',
    'Aquarius': 'Independent',
    'Pisces': 'Intuitive',
}

HOUSE_TRAITS = {
    1: 'Bold',
    2: 'Grounded',
    3: 'Curious',
    4: 'Nurturing',
    5: 'Creative',
    6: 'Analytical',
    7: 'Harmonious',
    8: 'Intense',
    9: 'Adventurous',
    10: 'Ambitious',
    11: 'Independent',
    12: 'Intuitive',
}

TRAIT_KEYWORDS = {
    'Bold': ('bold', 'direct'),
    'Grounded': ('stable', 'persistent'),
    'Curious': ('curious', 'adaptable'),
    'Nurturing': ('nurturing', 'protective'),
    'Creative': ('creative', 'expressive'),
    'Analytical': ('analytical', 'practical'),
    'Harmonious': ('harmonious', 'diplomatic'),
    'Intense': ('intense', 'transformative'),
    'Adventurous': ('adventurous', 'philosophical'),
    'Ambitious': ('ambitious', 'disciplined'),
    'Independent': ('independent', 'innovative'),
    'Intuitive': ('intuitive', 'compassionate'),
}

# (point, basis, weight) in scoring order
CONTRIBUTIONS = (
    ('sun', 'sign', 4.0),
    ('sun', 'house', 2.0),
    ('moon', 'sign', 3.5),
    ('moon', 'house', 2.0),
    ('ascendant', 'sign', 3.0),
    ('mars', 'sign', 1.5),
    ('venus', 'sign', 1.5),
    ('mercury', 'sign', 1.0),
)
ASPECT_BONUS = 1.5
KEYWORD_BONUS = 1.0

HARMONIOUS_ASPECTS = frozenset({'Trine', 'Sextile'})
TENSE_ASPECTS = frozenset({'Square', 'Opposition'})

FALLBACK_TRAITS = ('Thoughtful', 'Resourceful', 'Warm', 'Perceptive', 'Steady', 'Open-minded')

SUMMARY_SIZE = 3


@dataclass(frozen=True)
class PersonalitySummary:
    traits: Tuple[str, ...]
    scores: Dict[str, float] = field(default_factory=dict)


def _quoted_sign_words(blurb: str) -> Set[str]:
    """Words of every sign phrase a sentence quotes; template wording is ignored."""
    words: Set[str] = set()
    for phrase in SIGN_MEANINGS.values():
        if phrase in blurb:
            words.update(re.findall(r"[\w-]+", phrase.lower()))
    return words


def _score_keywords(scores: Dict[str, float], blurbs: Iterable[str]) -> None:
    for blurb in blurbs:
        words = _quoted_sign_words(blurb)
        for trait, keywords in TRAIT_KEYWORDS.items():
            for keyword in keywords:
                if keyword in words:
                    scores[trait] = scores.get(trait, 0.0) + KEYWORD_BONUS


def score_traits(chart: Chart) -> Dict[str, float]:
    scores: Dict[str, float] = {}

    def add(trait: str, weight: float) -> None:
        scores[trait] = scores.get(trait, 0.0) + weight

    for point, basis, weight in CONTRIBUTIONS:
        if basis == 'house':
            add(HOUSE_TRAITS[chart.planet_houses[point]], weight)
        elif point == 'ascendant':
            add(SIGN_TRAITS[chart.ascendant.sign], weight)
        else:
            add(SIGN_TRAITS[chart.planets[point].sign], weight)

    harmonious = sum(1 for a in chart.aspects if a.type in HARMONIOUS_ASPECTS)
    tense = sum(1 for a in chart.aspects if a.type in TENSE_ASPECTS)
    if harmonious > 2:
        add('Easygoing', ASPECT_BONUS)
    if tense > 2:
        add('Resilient', ASPECT_BONUS)

    interp = chart.interpretations
    _score_keywords(scores, interp.strengths + interp.core_personality)
    return scores


def summarize_personality(chart: Chart, rng: Optional[random.Random] = None) -> PersonalitySummary:
    """Top three traits for a chart, backfilled from FALLBACK_TRAITS when short."""
    scores = score_traits(chart)
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    traits = [trait for trait, _ in ranked[:SUMMARY_SIZE]]

    if len(traits) < SUMMARY_SIZE:
        rng = rng or random.Random()
        pool = [t for t in FALLBACK_TRAITS if t not in traits]
        traits.extend(rng.sample(pool, SUMMARY_SIZE - len(traits)))

    return PersonalitySummary(traits=tuple(traits), scores=scores)
