"""Module for miscellaneous multi-use functions"""

__all__ = ['unique_by_identity']

from typing import Iterable, List, TypeVar

_T = TypeVar('_T')


def unique_by_identity(items: Iterable[_T]) -> List[_T]:
    """
    Removes repeated object references from an iterable while preserving order.

    Geometry vertices compare equal by position, so two distinct vertices at the
    same location would collapse under a set or an `in` check. This compares
    object identity instead.

    Args:
        items:
            Any iterable of objects

    Returns:
        List of the first occurrence of every distinct object
    """
    seen = set()
    out = []
    for item in items:
        if id(item) in seen:
            continue
        seen.add(id(item))
        out.append(item)

    return out
