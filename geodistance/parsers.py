"""Module for parsing textual coordinates into Coordinates"""

__all__ = ['parse_coordinate', 'parse_degrees']

import re
from typing import Optional, Union

from geodistance.coordinates import Coordinate, validate_degrees
from geodistance.ellipsoids import Ellipsoid
from geodistance.exceptions import CoordinateFormatError
from geodistance.utils.logging import warn_once


# A plain signed decimal, e.g. '-79.948862', '+3', '.5' or '1e-05'
_NUMBER_STR = r'(?:\d+(?:\.\d*)?|\.\d+)'
_RE_DECIMAL = re.compile(r'^[-+]?' + _NUMBER_STR + r'(?:[eE][-+]?\d+)?$')

_DEGREE_MARK = r'[°º˚]'
_MINUTE_MARK = r"[′']"
_SECOND_MARK = r'(?:″|"|\'\'|′′)'


def _field(name: str, mark: str) -> str:
    """A number followed by its marker, whitespace, a hemisphere letter or the end"""
    return (
        rf'(?P<{name}>{_NUMBER_STR})'
        rf'(?:\s*{mark}\s*|\s+|$|(?=[NSEW]$))'
    )


# Degrees with optional minutes and seconds, e.g. '40° 26.7717', '30°16′57″N',
# 'N 40 26 46' or '-79 56 55.9'
_RE_SEXAGESIMAL = re.compile(
    r'^(?P<prefix>[NSEW])?\s*(?P<sign>[-+])?\s*'
    + _field('degrees', _DEGREE_MARK)
    + '(?:' + _field('minutes', _MINUTE_MARK) + ')?'
    + '(?:' + _field('seconds', _SECOND_MARK) + ')?'
    + r'(?P<suffix>[NSEW])?$',
    flags=re.IGNORECASE
)

_HEMISPHERES = {
    'latitude': ('N', 'S'),
    'longitude': ('E', 'W'),
}


def _sexagesimal_to_decimal(match: 're.Match', axis: str, component: str) -> float:
    prefix, suffix = match.group('prefix'), match.group('suffix')
    if prefix and suffix:
        raise CoordinateFormatError('More than one hemisphere letter', component)

    hemisphere = (prefix or suffix or '').upper()
    if hemisphere and hemisphere not in _HEMISPHERES[axis]:
        raise CoordinateFormatError(
            f"Hemisphere '{hemisphere}' is not valid for a {axis}",
            component
        )

    fields = [
        match.group(name) for name in ('degrees', 'minutes', 'seconds')
        if match.group(name) is not None
    ]
    if any('.' in field for field in fields[:-1]):
        raise CoordinateFormatError('Only the last field may be fractional', component)

    degrees = float(match.group('degrees'))
    minutes = float(match.group('minutes') or 0)
    seconds = float(match.group('seconds') or 0)
    if minutes >= 60 or seconds >= 60:
        raise CoordinateFormatError('Minutes and seconds must be less than 60', component)

    magnitude = degrees + minutes / 60 + seconds / 3600

    sign = match.group('sign')
    if hemisphere:
        negative = hemisphere in ('S', 'W')
        if sign and (sign == '-') != negative:
            warn_once(
                'sign-vs-hemisphere',
                '%r carries both a sign and a contradicting hemisphere letter; '
                'the hemisphere letter was used.',
                component
            )
    else:
        negative = sign == '-'

    return -magnitude if negative else magnitude


def parse_degrees(text: str, axis: str) -> float:
    """
    Parses a single latitude or longitude into decimal degrees.

    Formats are tried in order:
        1. Signed decimal degrees, e.g. '40.4477' or '-79.948862'
        2. Signed degrees, minutes and seconds with optional markers,
           e.g. '40° 26.7717' or '-79 56 55.9'
        3. Degrees, minutes and seconds with a leading or trailing hemisphere
           letter, e.g. '30°16′57″N' or 'W 079° 56.93172'

    A hemisphere letter takes precedence over the numeric sign. Only the last
    field may be fractional.

    Args:
        text:
            The latitude or longitude text

        axis:
            Either 'latitude' or 'longitude'

    Returns:
        float, in decimal degrees
    """
    component = text.strip()
    if not component:
        raise CoordinateFormatError(f'Missing {axis}', text)

    if _RE_DECIMAL.match(component):
        value = float(component)
    else:
        match = _RE_SEXAGESIMAL.match(component)
        if match is None:
            raise CoordinateFormatError(f'Unrecognized {axis} format', component)
        value = _sexagesimal_to_decimal(match, axis, component)

    return validate_degrees(value, axis, component)


def parse_coordinate(
    text: str,
    ellipsoid: Optional[Union[Ellipsoid, str]] = None
) -> Coordinate:
    """
    Parses a "latitude, longitude" string into a Coordinate.

    Exactly one comma must separate the latitude from the longitude; each side
    is parsed by parse_degrees().

    Args:
        text:
            The coordinate text, e.g. '40° 26.7717, -79° 56.93172'

        ellipsoid: (Default WGS84)
            The ellipsoid the coordinate is bound to, or its registry name

    Returns:
        Coordinate
    """
    parts = text.split(',')
    if len(parts) != 2:
        raise CoordinateFormatError(
            'Expected exactly one comma between latitude and longitude',
            text
        )

    latitude = parse_degrees(parts[0], 'latitude')
    longitude = parse_degrees(parts[1], 'longitude')
    return Coordinate(latitude, longitude, ellipsoid)
