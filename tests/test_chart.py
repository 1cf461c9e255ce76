"""Zodiac mapping and angular arithmetic."""

import pytest

from chart import (
    ChartConfig,
    angular_distance,
    format_degrees,
    normalize_degrees,
    sign_ruler,
    zodiac_from_longitude,
)


@pytest.mark.parametrize("longitude", [-725.5, -360.0, -30.0, -0.25, 0.0, 29.999, 30.0, 359.9, 360.0, 405.0, 1234.5])
def test_zodiac_position_is_in_range_and_reconstructs(longitude):
    pos = zodiac_from_longitude(longitude)
    assert 0 <= pos.sign_index <= 11
    assert 0 <= pos.degree_inside_sign < 30
    assert 0 <= pos.longitude < 360
    assert pos.sign_index * 30 + pos.degree_inside_sign == pytest.approx(longitude % 360)
    assert pos.sign == ChartConfig.SIGN_NAMES[pos.sign_index]


def test_negative_longitude_wraps_to_pisces():
    pos = zodiac_from_longitude(-10)
    assert pos.sign == 'Pisces'
    assert pos.sign_index == 11
    assert pos.degree_inside_sign == pytest.approx(20)


def test_sign_boundaries():
    assert zodiac_from_longitude(0).sign == 'Aries'
    assert zodiac_from_longitude(30).sign == 'Taurus'
    assert zodiac_from_longitude(125).sign == 'Leo'
    assert zodiac_from_longitude(359.99).sign == 'Pisces'


def test_tiny_negative_longitude_stays_in_range():
    pos = zodiac_from_longitude(-1e-15)
    assert pos.sign_index in (0, 11)
    assert normalize_degrees(-1e-15) < 360


def test_angular_distance_is_symmetric_and_bounded():
    pairs = [(10, 95), (350, 10), (0, 180), (270, 45), (-20, 200)]
    for a, b in pairs:
        d = angular_distance(a, b)
        assert d == pytest.approx(angular_distance(b, a))
        assert 0 <= d <= 180


def test_angular_distance_wraps_through_zero():
    assert angular_distance(350, 10) == pytest.approx(20)
    assert angular_distance(10, 95) == pytest.approx(85)


def test_sign_rulers_use_modern_outer_planets():
    assert sign_ruler('Leo') == 'sun'
    assert sign_ruler('Aquarius') == 'uranus'
    assert sign_ruler('Pisces') == 'neptune'
    assert sign_ruler('Scorpio') == 'mars'
    assert sign_ruler('Nowhere') is None


def test_sign_table_carries_name_symbol_and_ruler_only():
    for sign in ChartConfig.SIGNS:
        assert set(sign) == {'name', 'symbol', 'ruler'}


def test_format_degrees():
    assert format_degrees(14.66) == "14°39'36\""
    assert format_degrees(0) == "0°0'0\""
    assert format_degrees(29.99999) == "30°0'0\""
