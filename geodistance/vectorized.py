"""
Array versions of the spherical distance calculations, for measuring many
pairs of points at once. Inputs are broadcast against each other following
numpy's rules.
"""

__all__ = ['flat_distances', 'haversine_distances']

from typing import Optional, Tuple, Union

import numpy as np

from geodistance._const import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from geodistance.coordinates import validate_degrees
from geodistance.ellipsoids import Ellipsoid, get_ellipsoid


def _prepare(
    lats1, lons1, lats2, lons2
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Broadcasts the inputs to float arrays and checks their bounds"""
    arrays = np.broadcast_arrays(
        *(np.asarray(x, dtype=float) for x in (lats1, lons1, lats2, lons2))
    )
    bounds = (
        ('latitude', MIN_LATITUDE, MAX_LATITUDE),
        ('longitude', MIN_LONGITUDE, MAX_LONGITUDE),
    ) * 2
    for values, (axis, low, high) in zip(arrays, bounds):
        # NaN fails both comparisons
        invalid = ~((values >= low) & (values <= high))
        if invalid.any():
            bad = float(values[invalid][0])
            validate_degrees(bad, axis, str(bad))

    return arrays[0], arrays[1], arrays[2], arrays[3]


def flat_distances(
    lats1, lons1, lats2, lons2,
    ellipsoid: Optional[Union[Ellipsoid, str]] = None,
) -> np.ndarray:
    """
    Equirectangular distance between each pair of points.

    Args:
        lats1, lons1:
            Origin latitudes and longitudes, in decimal degrees

        lats2, lons2:
            Destination latitudes and longitudes, in decimal degrees

        ellipsoid: (Default WGS84)
            The ellipsoid whose mean radius is used

    Returns:
        np.ndarray of distances in meters
    """
    lat1, lon1, lat2, lon2 = _prepare(lats1, lons1, lats2, lons2)
    radius = get_ellipsoid(ellipsoid).mean_radius

    d_lon = (lon2 - lon1 + 180) % 360 - 180
    x = d_lon * np.cos(np.radians((lat1 + lat2) / 2))
    y = lat2 - lat1

    return np.hypot(x, y) * radius * np.pi / 180


def haversine_distances(
    lats1, lons1, lats2, lons2,
    ellipsoid: Optional[Union[Ellipsoid, str]] = None,
) -> np.ndarray:
    """
    Haversine distance between each pair of points, on a sphere of the
    ellipsoid's mean radius.

    Args:
        lats1, lons1:
            Origin latitudes and longitudes, in decimal degrees

        lats2, lons2:
            Destination latitudes and longitudes, in decimal degrees

        ellipsoid: (Default WGS84)
            The ellipsoid whose mean radius is used

    Returns:
        np.ndarray of distances in meters
    """
    lat1, lon1, lat2, lon2 = (
        np.radians(x) for x in _prepare(lats1, lons1, lats2, lons2)
    )
    radius = get_ellipsoid(ellipsoid).mean_radius

    a = (np.sin((lat2 - lat1) / 2) ** 2 +
         np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2)
    a = np.clip(a, 0.0, 1.0)

    return radius * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
