import math
import os
import sys

import pytest

# Put the project root on sys.path so the top-level modules import from tests/
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


class FakeEphemeris:
    """Ephemeris returning fixed longitudes and an ascendant at a chosen longitude."""

    def __init__(self, longitudes, ascendant):
        self.longitudes = dict(longitudes)
        self.ascendant = ascendant
        self.calls = []

    def julian_day(self, dt):
        return 2451545.0

    def ecliptic_longitude(self, body, jd):
        self.calls.append(body)
        return self.longitudes[body]

    def sun_ecliptic_longitude(self, jd):
        self.calls.append('sun')
        return self.longitudes['sun']

    def horizon_to_ecliptic_rotation(self, jd, latitude, longitude):
        # z-rotation taking the due-east horizon vector (0, -1, 0) to the ascendant longitude
        theta = math.radians(self.ascendant - 270)
        c, s = math.cos(theta), math.sin(theta)
        return ((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0))


# Leo rising at 125°. Sun 10° Aries (house 9), Moon 12° Cancer (house 12).
SAMPLE_LONGITUDES = {
    'moon': 102.0,
    'mercury': 20.0,
    'venus': 335.0,
    'mars': 250.0,
    'jupiter': 140.0,
    'saturn': 283.0,
    'uranus': 300.0,
    'neptune': 45.0,
    'pluto': 215.0,
    'sun': 10.0,
}
SAMPLE_ASCENDANT = 125.0


@pytest.fixture
def fake_ephemeris_factory():
    return FakeEphemeris


@pytest.fixture
def sample_ephemeris():
    return FakeEphemeris(SAMPLE_LONGITUDES, SAMPLE_ASCENDANT)


@pytest.fixture
def sample_chart(sample_ephemeris):
    from natal import NatalChart

    return NatalChart(
        year=1990, month=6, day=15, hour=14, minute=30,
        timezone='America/New_York',
        latitude=40.7128, longitude=-74.0060,
        ephemeris=sample_ephemeris,
    ).generate_full_chart()
