"""Package logger for polystructures"""

__all__ = ['LOGGER', 'clear_warnings', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('polystructures')
LOGGER.setLevel(logging.WARNING)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_handler)

# Messages already emitted through warn_once
_WARNINGS: Set[str] = set()


def warn_once(warning: str):
    """Logs a warning, unless the identical message was logged before"""
    if warning in _WARNINGS:
        return

    _WARNINGS.add(warning)
    LOGGER.warning(warning)


def clear_warnings():
    """Forgets every message logged by warn_once, so it may be logged again"""
    _WARNINGS.clear()
