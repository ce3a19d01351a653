import pytest

from geodistance import Coordinate
from geodistance.ellipsoids import AIRY, WGS84, custom
from geodistance.exceptions import (
    CoordinateFormatError, InvalidParameterError, UnknownEllipsoidError
)
from tests.functions import assert_coordinates_equal


def test_coordinate_init():
    c = Coordinate(1., 0.)
    assert c.latitude == 1.
    assert c.longitude == 0.
    assert c.ellipsoid is WGS84

    c = Coordinate('1.0', '0.0')
    assert c.latitude == 1.
    assert c.longitude == 0.

    # Bounds are inclusive
    assert Coordinate(90, 180).to_float() == (90., 180.)
    assert Coordinate(-90, -180).to_float() == (-90., -180.)

    c = Coordinate(1., 0., AIRY)
    assert c.ellipsoid is AIRY

    c = Coordinate(1., 0., 'AIRY')
    assert c.ellipsoid is AIRY

    with pytest.raises(UnknownEllipsoidError):
        Coordinate(1., 0., 'MADE_UP')


def test_coordinate_out_of_range():
    with pytest.raises(CoordinateFormatError) as exc:
        Coordinate(90.0001, 0.)
    assert exc.value.text == '90.0001'
    assert 'Latitude' in str(exc.value)

    with pytest.raises(CoordinateFormatError) as exc:
        Coordinate(0., -180.5)
    assert exc.value.text == '-180.5'
    assert 'Longitude' in str(exc.value)

    with pytest.raises(CoordinateFormatError):
        Coordinate(float('nan'), 0.)

    with pytest.raises(CoordinateFormatError):
        Coordinate(0., float('inf'))

    with pytest.raises(CoordinateFormatError) as exc:
        Coordinate('north', 0.)
    assert exc.value.text == 'north'

    with pytest.raises(CoordinateFormatError):
        Coordinate(None, 0.)  # type: ignore


def test_coordinate_from_decimal():
    assert Coordinate.from_decimal(40.446195, -79.948862) == Coordinate(40.446195, -79.948862)
    assert Coordinate.from_decimal(1., 2., AIRY).ellipsoid is AIRY

    with pytest.raises(CoordinateFormatError):
        Coordinate.from_decimal(-91., 0.)


def test_coordinate_immutable():
    c = Coordinate(1., 0.)
    with pytest.raises(AttributeError):
        c.latitude = 5.  # type: ignore

    with pytest.raises(AttributeError):
        c.ellipsoid = AIRY  # type: ignore


def test_coordinate_invalid_ellipsoid():
    for ellipsoid in (5, 298.257223563, object()):
        with pytest.raises(InvalidParameterError):
            Coordinate(1., 2., ellipsoid)  # type: ignore

    with pytest.raises(InvalidParameterError):
        Coordinate(1., 2.).with_ellipsoid(5)  # type: ignore


def test_coordinate_with_ellipsoid():
    c = Coordinate(1., 2.)
    airy = c.with_ellipsoid(AIRY)
    assert airy.ellipsoid is AIRY
    assert airy.to_float() == (1., 2.)
    assert c.ellipsoid is WGS84

    assert c.with_ellipsoid('AIRY') == airy


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.),
        Coordinate(1., 1., AIRY),
    ]
    assert len(set(coords)) == 3
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(1., 1.) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != Coordinate(0., 0., AIRY)
    assert Coordinate(0., 0.) != Coordinate(0., 0., custom(6378137.0, 298.257223563))
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(1., 0.)) == '<Coordinate(1.0, 0.0, WGS84)>'


def test_coordinate_to_float():
    assert Coordinate(1., 0.).to_float() == (1.0, 0.0)


def test_coordinate_radians():
    assert Coordinate(90., -180.).radians == (pytest.approx(1.5707963), pytest.approx(-3.1415927))


def test_coordinate_to_dms():
    assert Coordinate(51.509865, -0.118092).to_dms() == ((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W'))
    assert Coordinate(-33.5, 151.25).to_dms() == ((33, 30, 0., 'S'), (151, 15, 0., 'E'))

    # Seconds never round up to 60
    assert Coordinate(10.9999999, 0.).to_dms(precision=0)[0] == (11, 0, 0., 'N')


def test_coordinate_from_dms():
    assert Coordinate.from_dms((0, 0, 0.0, 'N'), (0, 0, 0.0, 'E')) == Coordinate(0., 0.)
    assert_coordinates_equal(
        Coordinate.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')),
        Coordinate(51.509865, -0.118092),
    )
    assert Coordinate.from_dms((1, 0, 0, 'N'), (1, 0, 0, 'E'), AIRY).ellipsoid is AIRY


def test_coordinate_to_dms_string():
    c = Coordinate(40.446195, -79.948862)
    assert c.to_dms_string() == '40°26′46″N, 79°56′56″W'
    assert c.to_dms_string(precision=1) == '40°26′46.3″N, 79°56′55.9″W'


def test_coordinate_to_decimal_string():
    assert Coordinate(40.446195, -79.948862).to_decimal_string() == '40.446195, -79.948862'
    assert Coordinate(-0.00001, 0.).to_decimal_string() == '-1e-05, 0.0'


def test_coordinate_from_string():
    assert Coordinate.from_string('40.446195, -79.948862') == Coordinate(40.446195, -79.948862)
    assert Coordinate.from_string('1, 2', 'AIRY').ellipsoid is AIRY
