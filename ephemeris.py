"""
Swiss Ephemeris adapter and civil-time conversion.

The chart core only needs three things from an ephemeris: geocentric
ecliptic longitudes, the Sun's ecliptic longitude, and a rotation matrix
from the observer's horizon frame to the ecliptic frame of date. Anything
providing those methods can stand in for SwissEphemeris.
"""

import math
import os
from datetime import datetime
from typing import Optional, Tuple

import pytz
import swisseph as swe

from exceptions import InvalidDateTimeError

Matrix = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]


BODY_IDS = {
    'sun': swe.SUN,
    'moon': swe.MOON,
    'mercury': swe.MERCURY,
    'venus': swe.VENUS,
    'mars': swe.MARS,
    'jupiter': swe.JUPITER,
    'saturn': swe.SATURN,
    'uranus': swe.URANUS,
    'neptune': swe.NEPTUNE,
    'pluto': swe.PLUTO,
}


def to_utc(year: int, month: int, day: int, hour: int, minute: int,
           second: int, zone: str) -> datetime:
    """
    Convert local civil time in an IANA zone to an aware UTC datetime.

    Raises InvalidDateTimeError for impossible field values, unknown zones,
    and wall-clock times skipped by a DST transition. Ambiguous wall-clock
    times resolve to standard time.
    """
    try:
        tz = pytz.timezone(zone)
    except pytz.exceptions.UnknownTimeZoneError:
        raise InvalidDateTimeError(f"Unknown timezone: {zone}")

    try:
        naive = datetime(year, month, day, hour, minute, second)
    except (ValueError, OverflowError) as e:
        raise InvalidDateTimeError(f"Invalid date: {e}")

    try:
        local_dt = tz.localize(naive, is_dst=None)
    except pytz.exceptions.AmbiguousTimeError:
        local_dt = tz.localize(naive, is_dst=False)
    except pytz.exceptions.NonExistentTimeError:
        raise InvalidDateTimeError(f"{naive.isoformat()} does not exist in {zone}")
    return local_dt.astimezone(pytz.UTC)


class SwissEphemeris:
    """Ephemeris backed by pyswisseph, Moshier mode unless data files are found."""

    def __init__(self, ephemeris_path: Optional[str] = None):
        self._use_moshier = True
        if ephemeris_path and os.path.isdir(ephemeris_path):
            if any(f.endswith('.se1') for f in os.listdir(ephemeris_path)):
                swe.set_ephe_path(ephemeris_path)
                self._use_moshier = False

    def _get_calc_flags(self) -> int:
        return swe.FLG_MOSEPH if self._use_moshier else swe.FLG_SWIEPH

    def julian_day(self, dt: datetime) -> float:
        hour_decimal = dt.hour + dt.minute / 60.0 + dt.second / 3600.0 + dt.microsecond / 3600000000.0
        return swe.julday(dt.year, dt.month, dt.day, hour_decimal)

    def ecliptic_longitude(self, body: str, jd: float) -> float:
        """Geocentric tropical ecliptic longitude of a body, in degrees."""
        if body not in BODY_IDS:
            raise ValueError(f"Unknown body: {body}")
        result, _ = swe.calc_ut(jd, BODY_IDS[body], self._get_calc_flags())
        return result[0]

    def sun_ecliptic_longitude(self, jd: float) -> float:
        return self.ecliptic_longitude('sun', jd)

    def horizon_to_ecliptic_rotation(self, jd: float, latitude: float, longitude: float) -> Matrix:
        """
        Rotation matrix taking a horizon-frame vector (x north, y west,
        z zenith) to the ecliptic frame of date for an observer at zero
        elevation.
        """
        nutation, _ = swe.calc_ut(jd, swe.ECL_NUT, self._get_calc_flags())
        eps = math.radians(nutation[0])
        lst = math.radians((swe.sidtime(jd) * 15.0 + longitude) % 360)
        phi = math.radians(latitude)

        sin_l, cos_l = math.sin(lst), math.cos(lst)
        sin_p, cos_p = math.sin(phi), math.cos(phi)
        sin_e, cos_e = math.sin(eps), math.cos(eps)

        # horizon -> equator of date
        equatorial = (
            (-cos_l * sin_p, sin_l, cos_l * cos_p),
            (-sin_l * sin_p, -cos_l, sin_l * cos_p),
            (cos_p, 0.0, sin_p),
        )
        # equator -> ecliptic, rotation about the equinox axis by obliquity
        ecliptic = (
            (1.0, 0.0, 0.0),
            (0.0, cos_e, sin_e),
            (0.0, -sin_e, cos_e),
        )
        return tuple(
            tuple(sum(ecliptic[i][k] * equatorial[k][j] for k in range(3)) for j in range(3))
            for i in range(3)
        )
