"""
Internal module defining geometric functions used by polystructures
"""
import math
from typing import List, Sequence

import numpy as np

from polystructures.vectors import Vector2


def rotate_point(point: Vector2, radians: float, pivot: Vector2) -> Vector2:
    """
    Rotates a point around a pivot.

    Args:
        point: (Vector2)
            The point to rotate

        radians: (float)
            The rotation angle in radians. Positive values rotate
            counter-clockwise.

        pivot: (Vector2)
            The point to rotate around

    Returns:
        Vector2
    """
    cos, sin = math.cos(radians), math.sin(radians)
    dx, dy = point.x - pivot.x, point.y - pivot.y
    return Vector2(
        pivot.x + dx * cos - dy * sin,
        pivot.y + dx * sin + dy * cos,
    )


def rotation_matrix(radians: float) -> np.ndarray:
    """The standard 2D counter-clockwise rotation matrix"""
    cos, sin = np.cos(radians), np.sin(radians)
    return np.array([[cos, -sin], [sin, cos]])


def to_array(points: Sequence[Vector2]) -> np.ndarray:
    """Converts a sequence of points into an (n, 2) array"""
    return np.array([tuple(point) for point in points], dtype=float).reshape(-1, 2)


def signed_area(points: Sequence[Vector2]) -> float:
    """
    Signed area of a ring using the shoelace formula. Counter-clockwise
    rings are positive, clockwise rings negative.

    The ring is treated as implicitly closed: the last point connects
    back to the first.
    """
    if len(points) < 3:
        return 0.0

    arr = to_array(points)
    x, y = arr[:, 0], arr[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2


def distinct_points(points: Sequence[Vector2]) -> List[Vector2]:
    """
    Collapses consecutive duplicate points and drops a trailing point that
    restates the first.

    Args:
        points:
            A sequence of points

    Returns:
        List of points
    """
    distinct: List[Vector2] = []
    for point in points:
        if not distinct or distinct[-1] != point:
            distinct.append(point)

    if len(distinct) > 1 and distinct[0] == distinct[-1]:
        distinct.pop()

    return distinct


def polygon_centroid(points: Sequence[Vector2]) -> Vector2:
    """
    Area-weighted centroid of a simple polygon given its ring points.
    Returns the zero vector for fewer than 3 points or zero area.
    """
    if len(points) < 3:
        return Vector2.zero()

    arr = to_array(points)
    x, y = arr[:, 0], arr[:, 1]
    x_next, y_next = np.roll(x, -1), np.roll(y, -1)
    cross = x * y_next - x_next * y

    area = cross.sum() / 2
    if area == 0:
        return Vector2.zero()

    return Vector2(
        float(((x + x_next) * cross).sum() / (6 * area)),
        float(((y + y_next) * cross).sum() / (6 * area)),
    )
