"""
Exceptions raised by geodistance
"""

__all__ = [
    'CoordinateFormatError', 'GeodistanceError', 'InvalidParameterError',
    'UnknownEllipsoidError', 'UnsupportedUnitError', 'VincentyConvergenceError',
]

from typing import Iterable


class GeodistanceError(Exception):
    """Base class for every error raised by geodistance"""


class UnknownEllipsoidError(GeodistanceError, ValueError):
    """The requested ellipsoid name is not registered"""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Unknown ellipsoid '{name}'. Options: {', '.join(self.available)}"
        )


class InvalidParameterError(GeodistanceError, ValueError):
    """Ellipsoid parameters are outside of their domain"""


class CoordinateFormatError(GeodistanceError, ValueError):
    """
    A coordinate could not be parsed, or falls outside of the valid
    latitude/longitude range. The offending input is kept on `.text`.
    """

    def __init__(self, message: str, text: str):
        self.text = text
        super().__init__(f'{message}: {text!r}')


class UnsupportedUnitError(GeodistanceError, ValueError):
    """The requested distance unit is not recognized"""

    def __init__(self, unit):
        self.unit = unit
        super().__init__(f"Unsupported unit '{unit}'")


class VincentyConvergenceError(GeodistanceError, ArithmeticError):
    """
    Vincenty's inverse formula failed to converge, which happens for nearly
    antipodal points. Callers may fall back to the haversine distance.
    """

    def __init__(self, iterations: int):
        self.iterations = iterations
        super().__init__(
            f'Vincenty formula failed to converge after {iterations} iterations '
            '(points may be nearly antipodal)'
        )
