# geodistance/distance.py
"""
Distance calculations between two Coordinates.

Every algorithm takes an origin and a destination Coordinate and returns meters.
The origin's ellipsoid is always the one used; a destination bound to a
different ellipsoid is measured as if it were on the origin's.
"""

__all__ = [
    'ALGORITHMS', 'DistanceReport', 'distance', 'flat_distance',
    'great_circle_distance', 'haversine_distance', 'measure_all',
    'vincenty_distance',
]

import math
from types import MappingProxyType
from typing import Callable, NamedTuple, Optional, Union

from geodistance._const import (
    DEFAULT_ALGORITHM, VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE
)
from geodistance.conversion import Unit, convert
from geodistance.coordinates import Coordinate
from geodistance.ellipsoids import Ellipsoid, get_ellipsoid
from geodistance.exceptions import VincentyConvergenceError
from geodistance.parsers import parse_coordinate
from geodistance.utils.functions import wrap_longitude_delta
from geodistance.utils.logging import warn_once


def _resolve_ellipsoid(origin: Coordinate, destination: Coordinate) -> Ellipsoid:
    """Returns the ellipsoid to measure on, which is always the origin's"""
    if not origin.ellipsoid.is_equivalent(destination.ellipsoid):
        warn_once(
            'mixed-ellipsoids',
            "Coordinates are bound to different ellipsoids (%s, %s); distances are "
            "measured on the origin's ellipsoid.",
            origin.ellipsoid.name, destination.ellipsoid.name
        )
    return origin.ellipsoid


def _is_same_point(origin: Coordinate, destination: Coordinate) -> bool:
    return (
        origin.latitude == destination.latitude and
        wrap_longitude_delta(destination.longitude - origin.longitude) == 0
    )


# -------------------------------------------------------------------------
# Spherical approximations
# -------------------------------------------------------------------------

def flat_distance(origin: Coordinate, destination: Coordinate) -> float:
    """
    Calculate distance using an equirectangular projection, treating the
    latitude/longitude deltas as cartesian. Fast, but only accurate over
    short distances.

    The longitude delta is wrapped into [-180, 180], so for pairs straddling
    the antimeridian the result differs from the plain equirectangular formula.
    """
    ellipsoid = _resolve_ellipsoid(origin, destination)

    mean_lat = math.radians((origin.latitude + destination.latitude) / 2)
    x = wrap_longitude_delta(destination.longitude - origin.longitude) * math.cos(mean_lat)
    y = destination.latitude - origin.latitude

    return math.hypot(x, y) * ellipsoid.mean_radius * math.pi / 180


def haversine_distance(origin: Coordinate, destination: Coordinate) -> float:
    """Calculate distance using the Haversine formula, on a sphere of the ellipsoid's mean radius."""
    ellipsoid = _resolve_ellipsoid(origin, destination)

    lat1, lon1 = origin.radians
    lat2, lon2 = destination.radians

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    a = min(a, 1.0)  # rounding can overshoot for antipodal points
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return ellipsoid.mean_radius * c


def great_circle_distance(origin: Coordinate, destination: Coordinate) -> float:
    """
    Calculate distance using the spherical law of cosines, on a sphere of
    the ellipsoid's semi-major axis.

    acos loses precision for very close points: pairs less than about 1e-8
    degrees apart can come out as 0.0. Use haversine_distance for those.
    """
    ellipsoid = _resolve_ellipsoid(origin, destination)
    if _is_same_point(origin, destination):
        return 0.0

    lat1, lon1 = origin.radians
    lat2, lon2 = destination.radians

    cos_angle = (math.sin(lat1) * math.sin(lat2) +
                 math.cos(lat1) * math.cos(lat2) * math.cos(lon2 - lon1))

    return ellipsoid.a * math.acos(max(-1.0, min(1.0, cos_angle)))


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def vincenty_distance(origin: Coordinate, destination: Coordinate) -> float:
    """
    Calculate distance using Vincenty's inverse formula on the origin's ellipsoid.

    Raises:
        VincentyConvergenceError:
            If lambda fails to converge within VINCENTY_MAX_ITERATIONS, which
            happens for nearly antipodal points. No fallback is attempted.
    """
    ellipsoid = _resolve_ellipsoid(origin, destination)
    if _is_same_point(origin, destination):
        return 0.0

    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.flattening

    lat1, _ = origin.radians
    lat2, _ = destination.radians

    # Reduced latitudes
    U1 = math.atan((1 - f) * math.tan(lat1))
    U2 = math.atan((1 - f) * math.tan(lat2))
    L = math.radians(wrap_longitude_delta(destination.longitude - origin.longitude))
    Lambda = L

    sinU1, cosU1 = math.sin(U1), math.cos(U1)
    sinU2, cosU2 = math.sin(U2), math.cos(U2)

    for _ in range(VINCENTY_MAX_ITERATIONS):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return 0.0  # Coincident points

        # eq. 15, 16
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            cos2SigmaM = 0  # Equatorial line

        # eq. 10
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) < VINCENTY_TOLERANCE:
            break
    else:
        raise VincentyConvergenceError(VINCENTY_MAX_ITERATIONS)

    uSq = cosSqAlpha * (a ** 2 - b ** 2) / (b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )

    return b * A * (sigma - deltaSigma)


# -------------------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------------------

ALGORITHMS = MappingProxyType({
    'flat': flat_distance,
    'great_circle': great_circle_distance,
    'haversine': haversine_distance,
    'vincenty': vincenty_distance,
})


def distance(
    origin: Coordinate,
    destination: Coordinate,
    algorithm: str = DEFAULT_ALGORITHM,
    unit: Union[Unit, str] = Unit.METERS,
) -> float:
    """
    Calculate the distance between two coordinates with the named algorithm.

    Args:
        origin:
            The start point Coordinate

        destination:
            The finish point Coordinate

        algorithm: (Default 'vincenty')
            One of 'flat', 'great_circle', 'haversine' or 'vincenty'

        unit: (Default meters)
            The unit to report the distance in

    Returns:
        float
    """
    func: Optional[Callable[[Coordinate, Coordinate], float]] = ALGORITHMS.get(algorithm)
    if func is None:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(ALGORITHMS)}")

    unit = Unit.parse(unit)
    return convert(func(origin, destination), unit)


class DistanceReport(NamedTuple):
    """The distance between two points by each algorithm, in a single unit"""
    flat: float
    haversine: float
    vincenty: float
    unit: Unit


def _as_coordinate(
    value: Union[Coordinate, str],
    ellipsoid: Optional[Ellipsoid]
) -> Coordinate:
    if isinstance(value, Coordinate):
        return value if ellipsoid is None else value.with_ellipsoid(ellipsoid)

    return parse_coordinate(value, ellipsoid)


def measure_all(
    origin: Union[Coordinate, str],
    destination: Union[Coordinate, str],
    ellipsoid: Optional[Union[Ellipsoid, str]] = None,
    unit: Union[Unit, str] = Unit.METERS,
) -> DistanceReport:
    """
    Measures the distance between two points with the flat, haversine and
    Vincenty algorithms.

    Args:
        origin:
            The start point, as a Coordinate or a "latitude, longitude" string

        destination:
            The finish point, as a Coordinate or a "latitude, longitude" string

        ellipsoid: (Default None)
            An Ellipsoid or registered ellipsoid name both points are bound to.
            If None, strings are parsed onto WGS84 and Coordinates keep their own.

        unit: (Default meters)
            The unit to report the distances in

    Returns:
        DistanceReport
    """
    if ellipsoid is not None:
        ellipsoid = get_ellipsoid(ellipsoid)
    unit = Unit.parse(unit)

    origin = _as_coordinate(origin, ellipsoid)
    destination = _as_coordinate(destination, ellipsoid)

    return DistanceReport(
        flat=convert(flat_distance(origin, destination), unit),
        haversine=convert(haversine_distance(origin, destination), unit),
        vincenty=convert(vincenty_distance(origin, destination), unit),
        unit=unit,
    )
