"""
Package logger. geodistance only logs when it silently resolves an
ambiguous input; errors are raised, never logged.
"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geodistance')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

# Keys of the situations already reported
_WARNINGS: Set[str] = set()


def warn_once(key: str, message: str, *args) -> bool:
    """
    Logs a warning the first time a given situation is encountered.

    Args:
        key:
            Identifies the situation, e.g. 'mixed-ellipsoids'. Only the first
            warning per key is logged, whatever its arguments.

        message:
            The warning, %-formatted lazily with args

    Returns:
        bool, whether the warning was logged
    """
    if key in _WARNINGS:
        return False

    _WARNINGS.add(key)
    LOGGER.warning(message + ' (this warning will not repeat)', *args)
    return True
