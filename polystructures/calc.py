""" Geometric calculations on raw WKT geometry (nested point lists) """

__all__ = [
    'bounds', 'center_from_bounds', 'normalize_degrees', 'ring_area',
    'rotate', 'rotate_wkt', 'rotate_wkt_points', 'surface_area',
    'translate', 'translate_wkt',
]

import math
from typing import Tuple, Union

import numpy as np

from polystructures._const import EMPTY_MULTIPOLYGON
from polystructures._geometry import rotation_matrix, signed_area, to_array
from polystructures.typing import MultiPolygonPoints, RingPoints
from polystructures.utils.logging import LOGGER
from polystructures.vectors import Vector2
from polystructures import wkt


def normalize_degrees(degrees: float) -> float:
    """
    Wraps an angle into the range [0, 360).

    Args:
        degrees: (float)
            Any angle in degrees

    Returns:
        float
    """
    return float(degrees % 360)


def rotate(
    geometry: MultiPolygonPoints,
    degrees: float,
    origin: Union[Vector2, Tuple[float, float], None] = None,
) -> MultiPolygonPoints:
    """
    Rotates every point of a geometry around an origin. Positive angles
    rotate counter-clockwise.

    Args:
        geometry:
            A list of polygons, each a list of rings, each a list of points

        degrees: (float)
            The rotation angle

        origin: (Vector2) (Default (0, 0))
            The point to rotate around

    Returns:
        A new, rotated geometry
    """
    radians = math.radians(normalize_degrees(degrees))
    if radians == 0:
        return [[list(ring) for ring in polygon] for polygon in geometry]

    pivot = np.array(tuple(origin) if origin is not None else (0.0, 0.0), dtype=float)
    matrix = rotation_matrix(radians)

    rotated = []
    for polygon in geometry:
        rings = []
        for ring in polygon:
            arr = (to_array(ring) - pivot) @ matrix.T + pivot
            rings.append([Vector2(x, y) for x, y in arr])
        rotated.append(rings)

    return rotated


def translate(
    geometry: MultiPolygonPoints,
    offset: Union[Vector2, Tuple[float, float]],
) -> MultiPolygonPoints:
    """
    Moves every point of a geometry by an offset. A zero offset returns
    the geometry itself.

    Args:
        geometry:
            A list of polygons, each a list of rings, each a list of points

        offset: (Vector2)
            The offset to add to every point

    Returns:
        A new, translated geometry
    """
    offset = Vector2(*offset)
    if offset.is_zero:
        return geometry

    return [
        [[Vector2(*point) + offset for point in ring] for ring in polygon]
        for polygon in geometry
    ]


def ring_area(ring: RingPoints) -> float:
    """
    Signed area of a ring via the shoelace formula. Counter-clockwise rings
    are positive. Points are used exactly as given.
    """
    return signed_area(ring)


def surface_area(geometry: MultiPolygonPoints) -> float:
    """
    Total area of a geometry. The first ring of each polygon contributes its
    signed area and every following ring (hole) subtracts its absolute area.

    Args:
        geometry:
            A list of polygons, each a list of rings, each a list of points

    Returns:
        float
    """
    total = 0.0
    for polygon in geometry:
        for index, ring in enumerate(polygon):
            area = ring_area(ring)
            total += area if index == 0 else -abs(area)

    return abs(total)


def bounds(geometry: MultiPolygonPoints) -> Tuple[Vector2, Vector2]:
    """
    The axis-aligned bounds of every point in a geometry.

    Args:
        geometry:
            A list of polygons, each a list of rings, each a list of points

    Returns:
        (min, max) as Vector2s. Both are zero when the geometry has no points.
    """
    points = [point for polygon in geometry for ring in polygon for point in ring]
    if not points:
        LOGGER.warning('Cannot calculate bounds of a geometry without points')
        return Vector2.zero(), Vector2.zero()

    arr = to_array(points)
    return Vector2(*arr.min(axis=0)), Vector2(*arr.max(axis=0))


def center_from_bounds(
    minimum: Union[Vector2, Tuple[float, float]],
    maximum: Union[Vector2, Tuple[float, float]],
) -> Vector2:
    """The midpoint between a minimum and a maximum bound"""
    return (Vector2(*minimum) + Vector2(*maximum)) / 2


def rotate_wkt_points(
    wkt_str: str,
    degrees: float,
    origin: Union[Vector2, Tuple[float, float], None] = None,
) -> MultiPolygonPoints:
    """Parses a WKT string and rotates its points, see `rotate`"""
    return rotate(wkt.parse_wkt(wkt_str), degrees, origin)


def rotate_wkt(
    wkt_str: str,
    degrees: float,
    origin: Union[Vector2, Tuple[float, float], None] = None,
    empty_default: str = EMPTY_MULTIPOLYGON,
) -> str:
    """
    Parses a WKT string, rotates its points and serializes it back.

    Args:
        wkt_str: (str)
            A POLYGON or MULTIPOLYGON WKT string

        degrees: (float)
            The rotation angle, counter-clockwise

        origin: (Vector2) (Default (0, 0))
            The point to rotate around

        empty_default: (str) (Default 'MULTIPOLYGON EMPTY')
            Returned when the result cannot be serialized

    Returns:
        str
    """
    rotated = rotate_wkt_points(wkt_str, degrees, origin)
    return wkt.to_wkt(rotated, empty_default=empty_default)


def translate_wkt(wkt_str: str, offset: Union[Vector2, Tuple[float, float]]) -> str:
    """
    Parses a WKT string, translates its points and serializes it back. A
    zero offset returns the string unchanged.
    """
    offset = Vector2(*offset)
    if offset.is_zero:
        return wkt_str

    return wkt.to_wkt(translate(wkt.parse_wkt(wkt_str), offset))
