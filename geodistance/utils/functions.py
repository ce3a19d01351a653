"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'wrap_longitude_delta']


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def wrap_longitude_delta(delta: float) -> float:
    """
    Wraps a difference of longitudes (degrees) into [-180, 180], so that
    pairs straddling the antimeridian are measured the short way round.

    Args:
        delta:
            A longitude difference in degrees, in [-360, 360]

    Returns:
        float
    """
    if delta > 180:
        return delta - 360
    if delta < -180:
        return delta + 360
    return delta
