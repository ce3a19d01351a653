"""
Module for unit conversions
"""
__all__ = ['Unit', 'convert', 'convert_to_meters']

from enum import Enum
from typing import Dict, Union

from geodistance.exceptions import UnsupportedUnitError


class Unit(str, Enum):
    """Linear units a distance can be reported in"""
    METERS = 'm'
    KILOMETERS = 'km'
    MILES = 'mi'
    FEET = 'ft'
    NAUTICAL_MILES = 'nmi'

    @classmethod
    def parse(cls, unit: Union['Unit', str]) -> 'Unit':
        """
        Resolves a unit from a Unit, its abbreviation ('km') or its name
        ('kilometers'). Case-insensitive.
        """
        if isinstance(unit, Unit):
            return unit

        if isinstance(unit, str) and unit.strip().lower() in _ALIASES:
            return _ALIASES[unit.strip().lower()]

        raise UnsupportedUnitError(unit)


_ALIASES: Dict[str, Unit] = {
    **{unit.value: unit for unit in Unit},
    **{unit.name.lower(): unit for unit in Unit},
    'meter': Unit.METERS,
    'kilometer': Unit.KILOMETERS,
    'mile': Unit.MILES,
    'foot': Unit.FEET,
    'nm': Unit.NAUTICAL_MILES,
    'nautical_mile': Unit.NAUTICAL_MILES,
}

# 1 m = 3.28084 ft
_METERS_PER_UNIT: Dict[Unit, float] = {
    Unit.METERS: 1.0,
    Unit.KILOMETERS: 1000.0,
    Unit.MILES: 1609.344,
    Unit.FEET: 1 / 3.28084,
    Unit.NAUTICAL_MILES: 1852.0,
}


def convert(meters: float, unit: Union[Unit, str]) -> float:
    """
    Converts a distance in meters to another unit. No rounding is applied.

    Args:
        meters (float): The distance, in meters.
        unit (Unit or str): The target unit (meter = 'm', kilometer = 'km',
        mile = 'mi', feet = 'ft', nautical mile = 'nmi').

    Returns:
        float: The distance in the target unit.
    """
    return meters / _METERS_PER_UNIT[Unit.parse(unit)]


def convert_to_meters(distance: float, unit: Union[Unit, str]) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (Unit or str): The unit of distance (kilometer = 'km', mile = 'mi',
        feet = 'ft', nautical mile = 'nmi').

    Returns:
        float: The distance in meters.
    """
    return distance * _METERS_PER_UNIT[Unit.parse(unit)]
