"""Ascendant, whole-sign houses, aspect detection and chart assembly."""

import dataclasses

import pytest

from chart import ChartConfig, zodiac_from_longitude
from exceptions import InvalidCoordinatesError, InvalidDateTimeError
from natal import (
    HOUSE_SYSTEMS,
    NatalChart,
    WholeSignHouses,
    calculate_ascendant,
    detect_aspects,
    find_aspect,
    rotate_vector,
    sphere_longitude,
    vector_from_horizon,
)


class TestAscendant:

    def test_east_vector_in_horizon_frame(self):
        x, y, z = vector_from_horizon(altitude=0.0, azimuth=90.0)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(-1.0)
        assert z == pytest.approx(0.0)

    def test_identity_rotation_puts_east_at_270(self):
        identity = ((1, 0, 0), (0, 1, 0), (0, 0, 1))
        east = vector_from_horizon(0.0, 90.0)
        assert sphere_longitude(rotate_vector(identity, east)) == pytest.approx(270.0)

    def test_ascendant_maps_rotated_vector_through_zodiac(self, fake_ephemeris_factory):
        eph = fake_ephemeris_factory({}, ascendant=125.0)
        asc = calculate_ascendant(eph, 2451545.0, 51.5, -0.1)
        assert asc.sign == 'Leo'
        assert asc.sign_index == 4
        assert asc.degree_inside_sign == pytest.approx(5.0)


class TestWholeSignHouses:

    def test_registered(self):
        assert HOUSE_SYSTEMS['whole-sign'] is WholeSignHouses

    @pytest.mark.parametrize("asc_longitude", [0.0, 47.3, 125.0, 211.9, 359.5])
    def test_cusps_follow_signs_from_ascendant(self, asc_longitude):
        asc = zodiac_from_longitude(asc_longitude)
        cusps = WholeSignHouses().cusps(asc)
        assert [c.house for c in cusps] == list(range(1, 13))
        for i, cusp in enumerate(cusps):
            assert cusp.sign_index == (asc.sign_index + i) % 12
            assert cusp.degree_inside_sign == 0
            assert cusp.longitude == cusp.sign_index * 30
            assert cusp.sign == ChartConfig.SIGN_NAMES[cusp.sign_index]

    def test_leo_rising_puts_taurus_on_tenth(self):
        cusps = WholeSignHouses().cusps(zodiac_from_longitude(125.0))
        assert cusps[0].sign == 'Leo'
        assert cusps[9].sign == 'Taurus'
        assert cusps[9].sign_index == 1

    def test_planet_in_ascendant_sign_is_first_house(self):
        houses = WholeSignHouses()
        asc = zodiac_from_longitude(125.0)
        assert houses.house_of(zodiac_from_longitude(121.0), asc) == 1
        assert houses.house_of(zodiac_from_longitude(149.9), asc) == 1

    def test_house_is_sign_offset(self):
        houses = WholeSignHouses()
        asc = zodiac_from_longitude(125.0)
        seen = {houses.house_of(zodiac_from_longitude(i * 30 + 15), asc) for i in range(12)}
        assert seen == set(range(1, 13))
        # sign before the ascendant wraps round to the twelfth
        assert houses.house_of(zodiac_from_longitude(100.0), asc) == 12

    def test_assign_covers_all_planets(self):
        planets = {
            'sun': zodiac_from_longitude(10.0),
            'moon': zodiac_from_longitude(102.0),
        }
        assigned = WholeSignHouses().assign(planets, zodiac_from_longitude(125.0))
        assert assigned == {'sun': 9, 'moon': 12}


class TestAspects:

    def test_square_with_orb_five(self):
        aspect_def, orb = find_aspect(85.0)
        assert aspect_def.name == 'Square'
        assert orb == pytest.approx(5.0)

    def test_no_aspect_outside_orb(self):
        assert find_aspect(30.0) is None
        assert find_aspect(106.5) is None

    def test_orb_boundary_is_inclusive(self):
        aspect_def, orb = find_aspect(126.0)
        assert aspect_def.name == 'Trine'
        assert orb == pytest.approx(6.0)

    @pytest.mark.parametrize("angle,expected", [
        (0, 'Conjunction'), (58, 'Sextile'), (93, 'Square'),
        (117, 'Trine'), (152, 'Quincunx'), (176, 'Opposition'),
    ])
    def test_table(self, angle, expected):
        assert find_aspect(angle)[0].name == expected

    def test_pair_detection(self):
        planets = {
            'mars': zodiac_from_longitude(10.0),
            'venus': zodiac_from_longitude(95.0),
        }
        aspects = detect_aspects(planets)
        assert len(aspects) == 1
        aspect = aspects[0]
        assert (aspect.body1, aspect.body2) == ('mars', 'venus')
        assert aspect.type == 'Square'
        assert aspect.angle == pytest.approx(85.0)
        assert aspect.orb == pytest.approx(5.0)

    def test_order_follows_enumeration_not_alphabet(self):
        planets = {
            'moon': zodiac_from_longitude(100.0),
            'sun': zodiac_from_longitude(100.0),
            'mars': zodiac_from_longitude(220.0),
        }
        aspects = detect_aspects(planets)
        assert [(a.body1, a.body2, a.type) for a in aspects] == [
            ('moon', 'sun', 'Conjunction'),
            ('moon', 'mars', 'Trine'),
            ('sun', 'mars', 'Trine'),
        ]

    def test_one_aspect_per_pair(self, sample_chart):
        pairs = [frozenset((a.body1, a.body2)) for a in sample_chart.aspects]
        assert len(pairs) == len(set(pairs))
        for aspect in sample_chart.aspects:
            assert aspect.orb <= 6
            assert 0 <= aspect.angle <= 180


class TestNatalChart:

    def test_sample_chart(self, sample_chart):
        assert sample_chart.ascendant.sign == 'Leo'
        assert list(sample_chart.planets.keys()) == list(ChartConfig.BODY_ORDER)
        assert sample_chart.house_system == 'whole-sign'
        assert len(sample_chart.houses) == 12
        assert sample_chart.planet_houses['sun'] == 9
        assert sample_chart.planet_houses['moon'] == 12
        assert sample_chart.planet_houses['jupiter'] == 1
        assert sample_chart.planet_houses['neptune'] == 10
        assert sample_chart.utc == '1990-06-15T18:30:00+00:00'

    def test_sample_aspects_in_discovery_order(self, sample_chart):
        found = [(a.body1, a.body2, a.type) for a in sample_chart.aspects]
        assert found[:4] == [
            ('moon', 'mars', 'Quincunx'),
            ('moon', 'saturn', 'Opposition'),
            ('moon', 'neptune', 'Sextile'),
            ('moon', 'sun', 'Square'),
        ]
        assert found[-1] == ('pluto', 'sun', 'Quincunx')
        assert len(found) == 14

    def test_chart_is_immutable(self, sample_chart):
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_chart.house_system = 'placidus'
        with pytest.raises(TypeError):
            sample_chart.planet_houses['sun'] = 1

    def test_to_dict_shape(self, sample_chart):
        data = sample_chart.to_dict()
        assert set(data) == {
            'utc', 'planets', 'ascendant', 'houses', 'planet_houses',
            'aspects', 'house_system', 'interpretations',
        }
        assert [h['house'] for h in data['houses']] == list(range(1, 13))
        assert data['planets']['sun'] == {
            'longitude': 10.0, 'sign': 'Aries', 'sign_index': 0, 'degree_inside_sign': 10.0,
        }
        assert isinstance(data['interpretations']['core_personality'], list)

    def test_invalid_date_fails_before_astronomy(self, sample_ephemeris):
        with pytest.raises(InvalidDateTimeError):
            NatalChart(year=1990, month=13, day=1, hour=0, minute=0,
                       timezone='UTC', ephemeris=sample_ephemeris)
        assert sample_ephemeris.calls == []

    def test_unknown_timezone(self, sample_ephemeris):
        with pytest.raises(InvalidDateTimeError):
            NatalChart(year=1990, month=1, day=1, hour=0, minute=0,
                       timezone='Mars/Olympus_Mons', ephemeris=sample_ephemeris)

    @pytest.mark.parametrize("lat,lon", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181)])
    def test_coordinates_out_of_range(self, sample_ephemeris, lat, lon):
        with pytest.raises(InvalidCoordinatesError):
            NatalChart(year=1990, month=1, day=1, hour=0, minute=0, timezone='UTC',
                       latitude=lat, longitude=lon, ephemeris=sample_ephemeris)

    def test_unknown_house_system(self, sample_ephemeris):
        with pytest.raises(ValueError):
            NatalChart(year=1990, month=1, day=1, hour=0, minute=0, timezone='UTC',
                       ephemeris=sample_ephemeris, house_system='placidus')

    def test_sun_is_requested_through_sun_longitude(self, sample_chart, sample_ephemeris):
        assert sample_ephemeris.calls[-1] == 'sun'
        assert sample_ephemeris.calls[:9] == list(ChartConfig.BODY_ORDER[:9])

    def test_east_point_at_ecliptic_pole_still_yields_ascendant(self, fake_ephemeris_factory, sample_ephemeris):
        # a rotation sending the east vector onto the ecliptic pole has no defined
        # longitude; atan2 resolves it to 0 rather than failing
        class PolarEphemeris(fake_ephemeris_factory):
            def horizon_to_ecliptic_rotation(self, jd, latitude, longitude):
                return ((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, -1.0, 0.0))

        chart = NatalChart(
            year=1990, month=6, day=15, hour=14, minute=30,
            ephemeris=PolarEphemeris(sample_ephemeris.longitudes, 0.0),
        ).generate_full_chart()
        assert chart.ascendant.sign == 'Aries'
        assert chart.houses[0].sign == 'Aries'
