from readings import HOUSE_READINGS, SIGN_READINGS, chart_readings, planet_reading


def test_every_point_has_a_reading_for_every_sign():
    for point, by_sign in SIGN_READINGS.items():
        assert len(by_sign) == 12, point


def test_default_house_text():
    text = planet_reading('moon', 'Cancer', 4)
    assert text.startswith(SIGN_READINGS['moon']['Cancer'])
    assert text.endswith(HOUSE_READINGS['default'][4])


def test_planet_specific_house_override():
    assert planet_reading('venus', 'Libra', 9).endswith(HOUSE_READINGS['venus'][9])
    # venus has no override for the first house
    assert planet_reading('venus', 'Libra', 1).endswith(HOUSE_READINGS['default'][1])


def test_sun_in_tenth_house():
    text = planet_reading('sun', 'Leo', 10)
    assert text.endswith("Being in the tenth house means a need to distinguish yourself "
                         "through goals, success, and responsibility.")


def test_chart_readings(sample_chart):
    readings = chart_readings(sample_chart)
    assert [r['point'] for r in readings][:3] == ['sun', 'ascendant', 'moon']
    assert len(readings) == 11
    asc = readings[1]
    assert asc['sign'] == 'Leo'
    assert asc['house'] == 1
    assert asc['house_name'] == 'FIRST HOUSE'
    assert asc['position'] == "5°0'0\" Leo"
    sun = readings[0]
    assert sun['position'] == "10°0'0\" Aries"
    assert sun['house'] == 9
