"""
Representation of points and axis-aligned rectangles on a cartesian plane
"""

__all__ = ['Rect', 'Vector2']

import math
from typing import Iterable, Iterator, Tuple, Union

import numpy as np


class Vector2:
    """
    An immutable 2D vector, used both for point positions and for offsets.

    Compares equal to any other Vector2 or 2-tuple with the same components,
    which lets raw WKT geometry be written as plain tuples.
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x: Union[float, int, str] = 0.0, y: Union[float, int, str] = 0.0):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __eq__(self, other):
        if isinstance(other, Vector2):
            return self._x == other._x and self._y == other._y

        if isinstance(other, tuple) and len(other) == 2:
            return self._x == other[0] and self._y == other[1]

        return NotImplemented

    def __hash__(self):
        return hash((self._x, self._y))

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y

    def __repr__(self):
        return f'<Vector2({self._x}, {self._y})>'

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self._x + other[0], self._y + other[1])

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self._x - other[0], self._y - other[1])

    def __mul__(self, scalar: float) -> 'Vector2':
        return Vector2(self._x * scalar, self._y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector2':
        return Vector2(self._x / scalar, self._y / scalar)

    def __neg__(self) -> 'Vector2':
        return Vector2(-self._x, -self._y)

    def __getitem__(self, index: int) -> float:
        return (self._x, self._y)[index]

    def __len__(self) -> int:
        return 2

    @classmethod
    def zero(cls) -> 'Vector2':
        return cls(0.0, 0.0)

    @property
    def is_zero(self) -> bool:
        return self._x == 0.0 and self._y == 0.0

    @property
    def magnitude(self) -> float:
        return math.hypot(self._x, self._y)

    def distance_to(self, other: 'Vector2') -> float:
        return math.hypot(other[0] - self._x, other[1] - self._y)

    def to_float(self) -> Tuple[float, float]:
        """Converts the vector to an (x, y) tuple of floats"""
        return self._x, self._y


class Rect:
    """
    An axis-aligned bounding box (AABB), stored as its minimum and maximum corners.

    Args:
        x_min: (float)
            The smallest x value covered by the rectangle

        y_min: (float)
            The smallest y value covered by the rectangle

        x_max: (float)
            The largest x value covered by the rectangle

        y_max: (float)
            The largest y value covered by the rectangle
    """

    __slots__ = ('x_min', 'y_min', 'x_max', 'y_max')

    def __init__(self, x_min: float = 0.0, y_min: float = 0.0, x_max: float = 0.0, y_max: float = 0.0):
        self.x_min = float(x_min)
        self.y_min = float(y_min)
        self.x_max = float(x_max)
        self.y_max = float(y_max)

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return False

        return (
            self.x_min == other.x_min and
            self.y_min == other.y_min and
            self.x_max == other.x_max and
            self.y_max == other.y_max
        )

    def __hash__(self):
        return hash((self.x_min, self.y_min, self.x_max, self.y_max))

    def __repr__(self):
        return f'<Rect({self.x_min}, {self.y_min}) -> ({self.x_max}, {self.y_max})>'

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def min(self) -> Vector2:
        return Vector2(self.x_min, self.y_min)

    @property
    def max(self) -> Vector2:
        return Vector2(self.x_max, self.y_max)

    @property
    def center(self) -> Vector2:
        return Vector2((self.x_min + self.x_max) / 2, (self.y_min + self.y_max) / 2)

    @classmethod
    def from_points(cls, points: Iterable[Vector2]) -> 'Rect':
        """
        Creates the smallest Rect containing every point. An empty iterable
        produces a zero-sized Rect at the origin.
        """
        arr = np.array([tuple(point) for point in points], dtype=float).reshape(-1, 2)
        if not len(arr):
            return cls()

        x_min, y_min = arr.min(axis=0)
        x_max, y_max = arr.max(axis=0)
        return cls(x_min, y_min, x_max, y_max)

    @classmethod
    def combine(cls, rects: Iterable['Rect']) -> 'Rect':
        """
        Calculates the union of a collection of Rects, i.e. the smallest Rect
        that contains all of them. An empty collection produces a zero-sized
        Rect at the origin.

        Args:
            rects:
                An iterable of Rects

        Returns:
            Rect
        """
        rects = list(rects)
        if not rects:
            return cls()

        return cls(
            min(rect.x_min for rect in rects),
            min(rect.y_min for rect in rects),
            max(rect.x_max for rect in rects),
            max(rect.y_max for rect in rects),
        )
