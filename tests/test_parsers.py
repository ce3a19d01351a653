import logging

import pytest
from pytest import approx

from geodistance import Coordinate
from geodistance.ellipsoids import AIRY, WGS84
from geodistance.exceptions import CoordinateFormatError
from geodistance.parsers import *
from tests.functions import assert_coordinates_equal


def test_parse_coordinate_decimal():
    c = parse_coordinate('40.4477, -79.9488')
    assert c == Coordinate(40.4477, -79.9488)
    assert c.ellipsoid is WGS84

    assert parse_coordinate('  -33.8688 ,151.2093  ') == Coordinate(-33.8688, 151.2093)
    assert parse_coordinate('+3,.5') == Coordinate(3., .5)
    assert parse_coordinate('90, -180') == Coordinate(90., -180.)
    assert parse_coordinate('1e-05, 0') == Coordinate(0.00001, 0.)

    assert parse_coordinate('1, 2', AIRY).ellipsoid is AIRY
    assert parse_coordinate('1, 2', 'AIRY').ellipsoid is AIRY


def test_parse_coordinate_dms():
    expected = parse_coordinate('40.446195, -79.948862')

    assert_coordinates_equal(parse_coordinate('40° 26.7717, -79° 56.93172'), expected, abs_tol=1e-6)
    assert_coordinates_equal(parse_coordinate('40°26.7717N, 079° 56.93172W'), expected, abs_tol=1e-6)
    assert_coordinates_equal(parse_coordinate('N 40 26.7717, W 79 56.93172'), expected, abs_tol=1e-6)
    assert_coordinates_equal(parse_coordinate("40 26' 46.302\", -79 56' 55.9032\""), expected, abs_tol=1e-6)
    assert_coordinates_equal(parse_coordinate('40°26′46.302″N, 79°56′55.9032″W'), expected, abs_tol=1e-6)

    c = parse_coordinate('30°16′57″N, 029°48′32″W')
    assert c.latitude == approx(30 + 16 / 60 + 57 / 3600, abs=1e-12)
    assert c.longitude == approx(-(29 + 48 / 60 + 32 / 3600), abs=1e-12)

    c = parse_coordinate("30°16'57''S, 029°48'32''E")
    assert c.latitude == approx(-(30 + 16 / 60 + 57 / 3600), abs=1e-12)
    assert c.longitude == approx(29 + 48 / 60 + 32 / 3600, abs=1e-12)

    # Lower case hemisphere letters, decimal degrees with a letter
    c = parse_coordinate('12.5s, 45.25e')
    assert c.to_float() == (-12.5, 45.25)

    # Degrees only, with and without a marker
    assert parse_coordinate('40°, 79º W').to_float() == (40., -79.)


def test_parse_coordinate_hemisphere_overrides_sign(caplog, monkeypatch):
    monkeypatch.setattr('geodistance.utils.logging._WARNINGS', set())

    with caplog.at_level(logging.WARNING, logger='geodistance'):
        c = parse_coordinate('-40 26 46 N, 79 56 56 E')

    assert c.latitude > 0
    assert c.longitude > 0
    assert 'hemisphere letter was used' in caplog.text

    # Agreeing sign and letter
    assert parse_coordinate('-40 S, -79 W').to_float() == (-40., -79.)


def test_parse_coordinate_separator_errors():
    for text in ('40.4477 -79.9488', '40.4477; -79.9488', '1, 2, 3', '1,,2', ''):
        with pytest.raises(CoordinateFormatError) as exc:
            parse_coordinate(text)
        assert exc.value.text == text

    for text in (',2', '1,', ' , '):
        with pytest.raises(CoordinateFormatError):
            parse_coordinate(text)


def test_parse_coordinate_format_errors():
    with pytest.raises(CoordinateFormatError) as exc:
        parse_coordinate('forty, -79.9488')
    assert exc.value.text == 'forty'

    with pytest.raises(CoordinateFormatError) as exc:
        parse_coordinate('40.4477, -79.9488x')
    assert exc.value.text == '-79.9488x'

    bad_components = [
        '40.5 30',          # fractional degrees followed by minutes
        '40 30.5 10',       # fractional minutes followed by seconds
        '40 60',            # minutes out of range
        '40 30 60',         # seconds out of range
        'N 40 N',           # two hemisphere letters
        '40 30 20 10',      # too many fields
        '--40',
        '4O',
    ]
    for component in bad_components:
        with pytest.raises(CoordinateFormatError) as exc:
            parse_coordinate(f'{component}, 0')
        assert exc.value.text == component


def test_parse_coordinate_hemisphere_axis():
    with pytest.raises(CoordinateFormatError) as exc:
        parse_coordinate('40 E, 79 W')
    assert exc.value.text == '40 E'

    with pytest.raises(CoordinateFormatError) as exc:
        parse_coordinate('40 N, 79 S')
    assert exc.value.text == '79 S'


def test_parse_coordinate_range_errors():
    with pytest.raises(CoordinateFormatError) as exc:
        parse_coordinate('90.0001, 0')
    assert exc.value.text == '90.0001'

    with pytest.raises(CoordinateFormatError) as exc:
        parse_coordinate('0, 181')
    assert exc.value.text == '181'

    with pytest.raises(CoordinateFormatError) as exc:
        parse_coordinate('91° 0′ 1″ S, 0')
    assert exc.value.text == '91° 0′ 1″ S'

    with pytest.raises(CoordinateFormatError):
        parse_coordinate('0, 180° 0′ 0.1″ W')

    with pytest.raises(CoordinateFormatError):
        parse_coordinate('nan, 0')


def test_parse_degrees():
    assert parse_degrees('40° 26.7717', 'latitude') == approx(40.446195, abs=1e-12)
    assert parse_degrees(' 079° 56.93172W ', 'longitude') == approx(-79.948862, abs=1e-12)
    assert parse_degrees('0', 'longitude') == 0.

    with pytest.raises(CoordinateFormatError):
        parse_degrees('   ', 'latitude')


def test_decimal_string_round_trip():
    coords = [
        Coordinate(40.446195, -79.948862),
        Coordinate(-89.99999999, 179.99999999),
        Coordinate(1e-10, -1e-10),
        Coordinate(1 / 3, 2 / 3),
    ]
    for c in coords:
        parsed = parse_coordinate(c.to_decimal_string())
        assert parsed.latitude == approx(c.latitude, abs=1e-9)
        assert parsed.longitude == approx(c.longitude, abs=1e-9)
