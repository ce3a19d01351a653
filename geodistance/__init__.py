from geodistance._version import __version__  # noqa: F401
from geodistance.utils.logging import LOGGER
from geodistance.conversion import Unit, convert, convert_to_meters
from geodistance.coordinates import Coordinate
from geodistance.distance import (
    DistanceReport, distance, flat_distance, great_circle_distance,
    haversine_distance, measure_all, vincenty_distance
)
from geodistance.ellipsoids import Ellipsoid, WGS84, custom, list_names, resolve
from geodistance.exceptions import (
    CoordinateFormatError, GeodistanceError, InvalidParameterError,
    UnknownEllipsoidError, UnsupportedUnitError, VincentyConvergenceError
)
from geodistance.parsers import parse_coordinate


__all__ = [
    'Coordinate',
    'CoordinateFormatError',
    'DistanceReport',
    'Ellipsoid',
    'GeodistanceError',
    'InvalidParameterError',
    'LOGGER',
    'Unit',
    'UnknownEllipsoidError',
    'UnsupportedUnitError',
    'VincentyConvergenceError',
    'WGS84',
    'convert',
    'convert_to_meters',
    'custom',
    'distance',
    'flat_distance',
    'great_circle_distance',
    'haversine_distance',
    'list_names',
    'measure_all',
    'parse_coordinate',
    'resolve',
    'vincenty_distance',
]
