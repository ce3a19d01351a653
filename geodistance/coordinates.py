"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

import math
from typing import Optional, Tuple, Union
from typing_extensions import Self

from geodistance._const import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from geodistance.ellipsoids import Ellipsoid, get_ellipsoid
from geodistance.exceptions import CoordinateFormatError
from geodistance.utils.functions import round_half_up

_BOUNDS = {
    'latitude': (MIN_LATITUDE, MAX_LATITUDE),
    'longitude': (MIN_LONGITUDE, MAX_LONGITUDE),
}


def validate_degrees(value: float, axis: str, text: str) -> float:
    """
    Ensures a latitude or longitude (decimal degrees) is within its bounds.

    Args:
        value:
            The value, in decimal degrees

        axis:
            Either 'latitude' or 'longitude'

        text:
            The input the value came from, echoed back in the error

    Returns:
        The value, unchanged
    """
    low, high = _BOUNDS[axis]
    if not low <= value <= high:
        raise CoordinateFormatError(
            f'{axis.capitalize()} must be within [{low:g}, {high:g}]',
            text
        )
    return value


def _to_float(value: Union[float, int, str], axis: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise CoordinateFormatError(f'{axis.capitalize()} is not a number', str(value)) from None


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair),
    bound to the ellipsoid it is expressed on.

    Coordinates are immutable; use .with_ellipsoid() to re-bind one.

    Args:
        latitude:
            Latitude in decimal degrees, within [-90, 90]

        longitude:
            Longitude in decimal degrees, within [-180, 180]

        ellipsoid: (Default WGS84)
            An Ellipsoid, or the name of a registered one
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
        ellipsoid: Optional[Union[Ellipsoid, str]] = None,
    ):
        lat, lon = _to_float(latitude, 'latitude'), _to_float(longitude, 'longitude')
        validate_degrees(lat, 'latitude', str(latitude))
        validate_degrees(lon, 'longitude', str(longitude))

        self._latitude = lat
        self._longitude = lon
        self._ellipsoid = get_ellipsoid(ellipsoid)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.ellipsoid))

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude}, {self.ellipsoid.name})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @classmethod
    def from_decimal(
        cls,
        latitude: float,
        longitude: float,
        ellipsoid: Optional[Union[Ellipsoid, str]] = None
    ):
        """Creates a Coordinate from a latitude, longitude pair in decimal degrees"""
        return cls(latitude, longitude, ellipsoid)

    @classmethod
    def from_dms(
        cls,
        lat: Tuple[int, int, float, str],
        lon: Tuple[int, int, float, str],
        ellipsoid: Optional[Union[Ellipsoid, str]] = None
    ):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lat, lon) pair.

        The hemisphere value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str))

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3].upper() in ('S', 'W') else 1
            return mult * (abs(dms[0]) + (dms[1] / 60) + (dms[2] / 3600))

        return cls(convert(lat), convert(lon), ellipsoid)

    @classmethod
    def from_string(cls, text: str, ellipsoid: Optional[Union[Ellipsoid, str]] = None):
        """
        Creates a Coordinate from a "latitude, longitude" string. See
        geodistance.parsers.parse_coordinate for the accepted formats.
        """
        from geodistance.parsers import parse_coordinate  # pylint: disable=import-outside-toplevel
        return parse_coordinate(text, ellipsoid)

    def with_ellipsoid(self, ellipsoid: Union[Ellipsoid, str]) -> Self:
        """Returns a copy of this coordinate bound to a different ellipsoid"""
        return type(self)(self.latitude, self.longitude, ellipsoid)

    def to_dms(
        self,
        precision: int = 5
    ) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the latitude and longitude to tuples of
        degrees, minutes, seconds, hemisphere

        Args:
            precision: (Default 5)
                The decimal precision to round the seconds to

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), (...))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            # Round the total first so seconds never come out as 60
            total = round_half_up(abs(dd) * 3600, precision)
            minutes, seconds = divmod(total, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round(seconds, precision)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_dms_string(self, precision: int = 0) -> str:
        """
        Formats the coordinate as degrees, minutes, seconds with hemisphere
        letters, e.g. '40°26′46″N, 79°56′56″W'

        Args:
            precision: (Default 0)
                Number of decimals kept on the seconds

        Returns:
            str
        """
        def fmt(dms: Tuple[int, int, float, str]) -> str:
            return f'{dms[0]}°{dms[1]}′{dms[2]:.{precision}f}″{dms[3]}'

        lat, lon = self.to_dms(precision)
        return f'{fmt(lat)}, {fmt(lon)}'

    def to_decimal_string(self) -> str:
        """
        Formats the coordinate as 'latitude, longitude' in decimal degrees,
        without loss of precision
        """
        return f'{self.latitude!r}, {self.longitude!r}'

    def to_float(self) -> Tuple[float, float]:
        """Returns the coordinate as a (latitude, longitude) tuple"""
        return self.latitude, self.longitude

    @property
    def radians(self) -> Tuple[float, float]:
        """The coordinate as a (latitude, longitude) tuple, in radians"""
        return math.radians(self.latitude), math.radians(self.longitude)
