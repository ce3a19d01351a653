"""
Reference ellipsoids and the registry used to look them up by name
"""

__all__ = [
    'Ellipsoid', 'custom', 'get_ellipsoid', 'list_names', 'resolve',
    'AIRY', 'CLARKE_1880', 'EVEREST', 'GRS_1980', 'WGS84',
]

import math
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from geodistance._const import DEFAULT_ELLIPSOID
from geodistance.exceptions import InvalidParameterError, UnknownEllipsoidError


class Ellipsoid:
    """
    An oblate ellipsoid modelling the shape of the earth, defined by its
    semi-major axis (meters) and inverse flattening.

    Args:
        name:
            Identifier of the ellipsoid, e.g. 'WGS84'

        a:
            The semi-major (equatorial) axis, in meters

        inverse_flattening:
            The reciprocal of the flattening, e.g. 298.257223563
    """

    def __init__(self, name: str, a: float, inverse_flattening: float):
        try:
            a, inverse_flattening = float(a), float(inverse_flattening)
        except (TypeError, ValueError):
            raise InvalidParameterError(
                f'Ellipsoid parameters must be numbers, got a={a!r}, '
                f'inverse_flattening={inverse_flattening!r}'
            ) from None

        if not math.isfinite(a) or a <= 0:
            raise InvalidParameterError(
                f'Semi-major axis must be a positive number of meters, got {a}'
            )
        if not math.isfinite(inverse_flattening) or inverse_flattening <= 0:
            raise InvalidParameterError(
                f'Inverse flattening must be a positive number, got {inverse_flattening}'
            )

        self._name = name
        self._a = a
        self._inverse_flattening = inverse_flattening
        self._flattening = 1 / inverse_flattening
        self._b = a * (1 - self._flattening)
        self._mean_radius = (2 * a + self._b) / 3

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.name == other.name and
            self.a == other.a and
            self.inverse_flattening == other.inverse_flattening
        )

    def __hash__(self):
        return hash((self.name, self.a, self.inverse_flattening))

    def __repr__(self):
        return f'<Ellipsoid {self.name} (a={self.a}, 1/f={self.inverse_flattening})>'

    @property
    def name(self) -> str:
        return self._name

    @property
    def a(self) -> float:
        """The semi-major axis, in meters"""
        return self._a

    @property
    def inverse_flattening(self) -> float:
        return self._inverse_flattening

    @property
    def flattening(self) -> float:
        """(a - b) / a"""
        return self._flattening

    @property
    def b(self) -> float:
        """The semi-minor (polar) axis, in meters"""
        return self._b

    @property
    def mean_radius(self) -> float:
        """The arithmetic mean radius (2a + b) / 3, in meters"""
        return self._mean_radius

    def is_equivalent(self, other: 'Ellipsoid') -> bool:
        """Whether two ellipsoids share the same parameters, regardless of name"""
        return self.a == other.a and self.inverse_flattening == other.inverse_flattening


def custom(a: float, inverse_flattening: float, name: str = 'CUSTOM') -> Ellipsoid:
    """
    Creates an ad hoc ellipsoid which is not part of the registry.

    Args:
        a:
            The semi-major axis, in meters. Must be positive.

        inverse_flattening:
            The inverse flattening. Must be positive.

        name: (Default 'CUSTOM')
            A name for the ellipsoid

    Returns:
        Ellipsoid
    """
    return Ellipsoid(name, a, inverse_flattening)


def _build_registry(*ellipsoids: Ellipsoid) -> Mapping[str, Ellipsoid]:
    table: Dict[str, Ellipsoid] = {}
    for ellipsoid in ellipsoids:
        table[ellipsoid.name] = ellipsoid
    return MappingProxyType(table)


AIRY = Ellipsoid('AIRY', 6377563.396, 299.3249646)
CLARKE_1880 = Ellipsoid('CLARKE_1880', 6378249.145, 293.465)
EVEREST = Ellipsoid('EVEREST', 6377276.345, 300.8017)
GRS_1980 = Ellipsoid('GRS_1980', 6378137.0, 298.257222101)
WGS84 = Ellipsoid('WGS84', 6378137.0, 298.257223563)

# Read-only after import
_REGISTRY = _build_registry(
    AIRY,
    Ellipsoid('AUSTRALIAN_NATIONAL', 6378160.0, 298.25),
    Ellipsoid('BESSEL_1841', 6377397.155, 299.1528128),
    Ellipsoid('BESSEL_1841_NAMBIA', 6377483.865, 299.1528128),
    Ellipsoid('CLARKE_1866', 6378206.4, 294.9786982),
    CLARKE_1880,
    EVEREST,
    Ellipsoid('FISCHER_1960_MERCURY', 6378166.0, 298.3),
    Ellipsoid('FISCHER_1968', 6378150.0, 298.3),
    Ellipsoid('GRS_1967', 6378160.0, 298.247167427),
    GRS_1980,
    Ellipsoid('HELMERT_1906', 6378200.0, 298.3),
    Ellipsoid('HOUGH', 6378270.0, 297.0),
    Ellipsoid('INTERNATIONAL', 6378388.0, 297.0),
    Ellipsoid('KRASSOVSKY', 6378245.0, 298.3),
    Ellipsoid('MODIFIED_AIRY', 6377340.189, 299.3249646),
    Ellipsoid('MODIFIED_EVEREST', 6377304.063, 300.8017),
    Ellipsoid('MODIFIED_FISCHER_1960', 6378155.0, 298.3),
    Ellipsoid('SOUTH_AMERICAN_1969', 6378160.0, 298.25),
    Ellipsoid('WGS60', 6378165.0, 298.3),
    Ellipsoid('WGS66', 6378145.0, 298.25),
    Ellipsoid('WGS72', 6378135.0, 298.26),
    WGS84,
)


def list_names() -> List[str]:
    """Returns the names of all registered ellipsoids, in a stable order"""
    return list(_REGISTRY)


def resolve(name: str) -> Ellipsoid:
    """
    Looks up a registered ellipsoid by name. Lookup is case-sensitive.

    Args:
        name:
            The ellipsoid name, e.g. 'WGS84'

    Returns:
        Ellipsoid
    """
    try:
        return _REGISTRY[name]
    except (KeyError, TypeError):
        raise UnknownEllipsoidError(name, _REGISTRY) from None


def get_ellipsoid(ellipsoid: Optional[Union[Ellipsoid, str]] = None) -> Ellipsoid:
    """
    Returns the Ellipsoid a caller asked for: the default ellipsoid for None,
    the registered ellipsoid for a name, or the Ellipsoid itself.
    """
    if ellipsoid is None:
        return resolve(DEFAULT_ELLIPSOID)
    if isinstance(ellipsoid, str):
        return resolve(ellipsoid)
    if not isinstance(ellipsoid, Ellipsoid):
        raise InvalidParameterError(
            f'Expected an Ellipsoid or a registered ellipsoid name, got {ellipsoid!r}'
        )
    return ellipsoid
