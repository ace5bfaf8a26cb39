"""
Single geometry structures: vertices, lines, rings and polygons
"""

__all__ = ['GeometryLine', 'GeometryVertex', 'Polygon', 'Ring']

from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from polystructures._base import Geometry, GeometryType, Lineal, Space, Surface
from polystructures._const import EMPTY_MULTIPOLYGON
from polystructures._geometry import distinct_points, polygon_centroid, rotate_point, signed_area
from polystructures.typing import PolygonPoints, RingPoints
from polystructures.utils.functions import unique_by_identity
from polystructures.utils.logging import warn_once
from polystructures.utils.observable import ObservableList
from polystructures.vectors import Rect, Vector2
from polystructures import wkt


class GeometryVertex(Geometry):
    """
    A single point in the geometry graph. Vertices may be shared by
    several lines.

    Args:
        position: (Vector2) (Default (0, 0))
            The location of the vertex
    """

    geometry_type = GeometryType.VERTEX

    def __init__(self, position: Union[Vector2, Tuple[float, float], None] = None):
        super().__init__()
        self._position = Vector2(*position) if position is not None else Vector2.zero()

    def __eq__(self, other):
        if not isinstance(other, GeometryVertex):
            return False

        return self._position == other._position

    def __hash__(self):
        return hash(self._position)

    def __repr__(self):
        return f'<GeometryVertex at {self._position.to_float()}>'

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value: Union[Vector2, Tuple[float, float]]):
        value = Vector2(*value)
        if value == self._position:
            return

        self._position = value
        self.mark_dirty()

    rotate_point = staticmethod(rotate_point)

    def children(self) -> List[Geometry]:
        return []

    def all_vertices(self) -> List['GeometryVertex']:
        return [self]

    def copy(self, memo: Optional[Dict[int, Geometry]] = None) -> 'GeometryVertex':
        memo = {} if memo is None else memo
        if id(self) not in memo:
            memo[id(self)] = GeometryVertex(self._position)

        return memo[id(self)]  # type: ignore

    def rotate_around_pivot_rad(self, radians: float, pivot: Vector2):
        self.position = rotate_point(self._position, radians, Vector2(*pivot))

    def translate(self, vector: Union[Vector2, Tuple[float, float]], space: Space = Space.LOCAL):
        """
        Moves the vertex. In LOCAL space the vector is added to the position,
        in WORLD space the position is set to the vector.
        """
        space = Space(space)
        vector = Vector2(*vector)
        if space is Space.WORLD:
            self.position = vector
            return

        if vector.is_zero:
            return

        self.position = self._position + vector


class GeometryLine(Lineal):
    """
    A straight segment between two vertices.

    Args:
        start: (GeometryVertex, optional)
            The first endpoint. A new vertex at the origin is created if omitted.

        end: (GeometryVertex, optional)
            The second endpoint. A new vertex at the origin is created if omitted.
    """

    geometry_type = GeometryType.LINE

    def __init__(
        self,
        start: Optional[GeometryVertex] = None,
        end: Optional[GeometryVertex] = None,
    ):
        super().__init__()
        self._start = self._check_vertex(start if start is not None else GeometryVertex())
        self._end = self._check_vertex(end if end is not None else GeometryVertex())
        self._start.add_parent(self)
        self._end.add_parent(self)

    def __eq__(self, other):
        if not isinstance(other, GeometryLine):
            return False

        return (
            self._start.position == other._start.position
            and self._end.position == other._end.position
        )

    def __hash__(self):
        return hash((self._start.position, self._end.position))

    def __repr__(self):
        return (
            f'<GeometryLine {self._start.position.to_float()} '
            f'-> {self._end.position.to_float()}>'
        )

    @staticmethod
    def _check_vertex(vertex) -> GeometryVertex:
        if not isinstance(vertex, GeometryVertex):
            raise TypeError(f'Expected GeometryVertex, got {type(vertex).__name__}')
        return vertex

    def _swap_vertex(self, old: GeometryVertex, new: GeometryVertex):
        if old is not self._start and old is not self._end:
            old.remove_parent(self)
        new.add_parent(self)

    @property
    def start(self) -> GeometryVertex:
        return self._start

    @start.setter
    def start(self, vertex: GeometryVertex):
        self._check_vertex(vertex)
        if vertex is self._start:
            return

        old, self._start = self._start, vertex
        self._swap_vertex(old, vertex)
        self._notify_property_changed('start')

    @property
    def end(self) -> GeometryVertex:
        return self._end

    @end.setter
    def end(self, vertex: GeometryVertex):
        self._check_vertex(vertex)
        if vertex is self._end:
            return

        old, self._end = self._end, vertex
        self._swap_vertex(old, vertex)
        self._notify_property_changed('end')

    @property
    def is_empty(self) -> bool:
        """A line is empty when both endpoints share a position"""
        return self._start.position == self._end.position

    @property
    def length(self) -> float:
        return self._start.position.distance_to(self._end.position)

    def is_valid(self) -> bool:
        return not self.is_empty

    def children(self) -> List[Geometry]:
        return unique_by_identity([self._start, self._end])

    def all_vertices(self) -> List[GeometryVertex]:
        return [self._start, self._end]

    def calculate_aabb(self) -> Rect:
        return Rect.from_points([self._start.position, self._end.position])

    def calculate_center(self) -> Vector2:
        return (self._start.position + self._end.position) / 2

    def calculate_centroid(self) -> Vector2:
        return self.calculate_center()

    def copy(self, memo: Optional[Dict[int, Geometry]] = None) -> 'GeometryLine':
        memo = {} if memo is None else memo
        if id(self) not in memo:
            memo[id(self)] = GeometryLine(self._start.copy(memo), self._end.copy(memo))

        return memo[id(self)]  # type: ignore


class Ring(Lineal):
    """
    An ordered chain of lines. The ring is closed when the last line ends on
    the very vertex the first line starts from.

    Args:
        lines: (Iterable[GeometryLine], optional)
            The lines of the ring, in order
    """

    geometry_type = GeometryType.RING

    def __init__(self, lines: Optional[Iterable[GeometryLine]] = None):
        super().__init__()
        self._lines: ObservableList[GeometryLine] = ObservableList(
            lines,
            item_type=GeometryLine,
            on_added=self._on_line_added,
            on_removed=self._on_line_removed,
            on_changed=self.mark_dirty,
        )
        for line in self._lines:
            line.add_parent(self)

    def __repr__(self):
        return f'<Ring of {len(self._lines)} lines>'

    def _on_line_added(self, line: GeometryLine):
        line.add_parent(self)

    def _on_line_removed(self, line: GeometryLine):
        if not self._lines.contains_instance(line):
            line.remove_parent(self)

    @property
    def lines(self) -> ObservableList[GeometryLine]:
        return self._lines

    @lines.setter
    def lines(self, lines: Iterable[GeometryLine]):
        self._lines[:] = lines

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def length(self) -> float:
        return sum(line.length for line in self._lines)

    def is_closed(self) -> bool:
        return len(self._lines) > 2 and self._lines[0].start is self._lines[-1].end

    def is_open(self) -> bool:
        return not self.is_closed()

    def is_valid(self) -> bool:
        return not self.is_empty and self.is_closed()

    def children(self) -> List[Geometry]:
        return unique_by_identity(self._lines)

    def all_vertices(self) -> List[GeometryVertex]:
        """
        The vertices of the ring in line order. Vertices visited more than
        once are listed once per visit, except the vertex closing a closed
        ring, which is only listed at the start.
        """
        if not self._lines:
            return []

        vertices = [self._lines[0].start]
        vertices.extend(line.end for line in self._lines)
        if self.is_closed():
            vertices.pop()

        return vertices

    def signed_area(self) -> float:
        """
        Signed area of the ring via the shoelace formula, ignoring repeated
        points. Positive for counter-clockwise rings.
        """
        return signed_area(distinct_points(self.to_points()))

    def to_points(self) -> RingPoints:
        return [vertex.position for vertex in self.all_vertices()]

    def calculate_aabb(self) -> Rect:
        return Rect.combine(line.aabb for line in self._lines)

    def calculate_center(self) -> Vector2:
        if not self._lines:
            return Vector2.zero()

        points = np.array([
            tuple(vertex.position)
            for line in self._lines
            for vertex in (line.start, line.end)
        ])
        return Vector2(*points.mean(axis=0))

    def calculate_centroid(self) -> Vector2:
        weights = np.array([line.length for line in self._lines])
        total = weights.sum()
        if not total:
            return Vector2.zero()

        midpoints = np.array([tuple(line.centroid) for line in self._lines])
        return Vector2(*(midpoints * weights[:, None]).sum(axis=0) / total)

    def copy(self, memo: Optional[Dict[int, Geometry]] = None) -> 'Ring':
        memo = {} if memo is None else memo
        if id(self) not in memo:
            memo[id(self)] = Ring(line.copy(memo) for line in self._lines)

        return memo[id(self)]  # type: ignore

    def dispose(self):
        super().dispose()
        self._lines.on_added = None
        self._lines.on_removed = None

    @classmethod
    def from_points(cls, points: Sequence[Union[Vector2, Tuple[float, float]]]) -> 'Ring':
        """
        Builds a closed ring connecting each point to the next. If the last
        point restates the first, the ring closes onto the first vertex
        instead of creating a duplicate.

        Args:
            points:
                A sequence of positions

        Returns:
            Ring
        """
        if not points:
            return cls()

        vertices = [GeometryVertex(point) for point in points]
        if len(vertices) > 1 and vertices[-1].position == vertices[0].position:
            vertices[-1] = vertices[0]
        else:
            vertices.append(vertices[0])

        return cls(
            GeometryLine(vertices[i], vertices[i + 1])
            for i in range(len(vertices) - 1)
        )


class Polygon(Surface):
    """
    A surface bounded by an exterior ring, optionally with holes.

    Args:
        exterior_ring: (Ring, optional)
            The outer boundary. An empty ring is created if omitted.

        interior_rings: (Iterable[Ring], optional)
            The holes of the polygon
    """

    geometry_type = GeometryType.POLYGON

    def __init__(
        self,
        exterior_ring: Optional[Ring] = None,
        interior_rings: Optional[Iterable[Ring]] = None,
    ):
        super().__init__()
        self._exterior_ring = self._check_ring(
            exterior_ring if exterior_ring is not None else Ring()
        )
        self._exterior_ring.add_parent(self)

        self._interior_rings: ObservableList[Ring] = ObservableList(
            interior_rings,
            item_type=Ring,
            on_added=self._on_ring_added,
            on_removed=self._on_ring_removed,
            on_changed=self.mark_dirty,
        )
        for ring in self._interior_rings:
            ring.add_parent(self)

    def __repr__(self):
        return (
            f'<Polygon of {len(self._exterior_ring.lines)} lines '
            f'and {len(self._interior_rings)} holes>'
        )

    @staticmethod
    def _check_ring(ring) -> Ring:
        if not isinstance(ring, Ring):
            raise TypeError(f'Expected Ring, got {type(ring).__name__}')
        return ring

    def _owns(self, ring: Ring) -> bool:
        return ring is self._exterior_ring or self._interior_rings.contains_instance(ring)

    def _on_ring_added(self, ring: Ring):
        ring.add_parent(self)

    def _on_ring_removed(self, ring: Ring):
        if not self._owns(ring):
            ring.remove_parent(self)

    @property
    def exterior_ring(self) -> Ring:
        return self._exterior_ring

    @exterior_ring.setter
    def exterior_ring(self, ring: Ring):
        self.set_exterior_ring(ring)

    def set_exterior_ring(self, ring: Ring):
        """
        Replaces the outer boundary of the polygon.

        Args:
            ring: (Ring)
                The new exterior ring

        Returns:
            None
        """
        self._check_ring(ring)
        if ring is self._exterior_ring:
            return

        old, self._exterior_ring = self._exterior_ring, ring
        if not self._owns(old):
            old.remove_parent(self)
        ring.add_parent(self)
        self._notify_property_changed('exterior_ring')

    @property
    def interior_rings(self) -> ObservableList[Ring]:
        return self._interior_rings

    @interior_rings.setter
    def interior_rings(self, rings: Iterable[Ring]):
        self._interior_rings[:] = rings

    @property
    def rings(self) -> List[Ring]:
        """The exterior ring followed by every hole"""
        return [self._exterior_ring, *self._interior_rings]

    @property
    def is_empty(self) -> bool:
        return self._exterior_ring.is_empty

    def is_valid(self) -> bool:
        """
        Whether every ring of the polygon is closed and made of at least
        three lines. Self-intersections are not detected.
        """
        return all(
            ring.is_closed() and len(ring.lines) >= 3
            for ring in self.rings
        )

    def children(self) -> List[Geometry]:
        return unique_by_identity(self.rings)

    def all_vertices(self) -> List[GeometryVertex]:
        return unique_by_identity(
            vertex for ring in self.rings for vertex in ring.all_vertices()
        )

    def calculate_aabb(self) -> Rect:
        return Rect.combine(ring.aabb for ring in self.rings if not ring.is_empty)

    def calculate_center(self) -> Vector2:
        return self._exterior_ring.center

    def calculate_centroid(self) -> Vector2:
        lines = self._exterior_ring.lines
        if len(lines) < 3:
            return Vector2.zero()

        return polygon_centroid([line.start.position for line in lines])

    def calculate_surface_area(self) -> float:
        area = abs(self._exterior_ring.signed_area())
        for ring in self._interior_rings:
            area -= abs(ring.signed_area())

        return area

    def copy(self, memo: Optional[Dict[int, Geometry]] = None) -> 'Polygon':
        memo = {} if memo is None else memo
        if id(self) not in memo:
            memo[id(self)] = Polygon(
                self._exterior_ring.copy(memo),
                [ring.copy(memo) for ring in self._interior_rings],
            )

        return memo[id(self)]  # type: ignore

    def dispose(self):
        super().dispose()
        self._interior_rings.on_added = None
        self._interior_rings.on_removed = None

    @classmethod
    def from_points(cls, points: PolygonPoints) -> 'Polygon':
        """
        Builds a polygon from nested point lists, as produced by
        `polystructures.wkt.parse_wkt`. The first ring is the exterior,
        every following ring is a hole.
        """
        rings = []
        for ring_points in points:
            if len(ring_points) < 3:
                warn_once(
                    'Polygon ring with fewer than 3 points is not a valid ring '
                    '(this warning will not repeat)'
                )
            rings.append(Ring.from_points(ring_points))

        if not rings:
            return cls()

        return cls(rings[0], rings[1:])

    @classmethod
    def from_wkt(cls, wkt_str: str) -> 'Polygon':
        """Create a Polygon from a WKT string"""
        if wkt.is_empty_wkt(wkt_str):
            return cls()

        if not wkt.is_polygon_wkt(wkt_str):
            raise ValueError(f'Invalid WKT Polygon: {wkt_str}')

        geometry = wkt.parse_wkt(wkt_str)
        return cls.from_points(geometry[0] if geometry else [])

    def to_points(self) -> PolygonPoints:
        if self.is_empty:
            return []

        return [ring.to_points() for ring in self.rings]

    def to_wkt(self, force_multi: bool = False, empty_default: str = EMPTY_MULTIPOLYGON) -> str:
        """
        Serializes the polygon into a WKT string.

        Args:
            force_multi: (bool) (Default False)
                Always write a MULTIPOLYGON, even for a polygon without holes

            empty_default: (str) (Default 'MULTIPOLYGON EMPTY')
                The string returned when the polygon cannot be serialized

        Returns:
            str
        """
        points = self.to_points()
        return wkt.to_wkt(
            [points] if points else [],
            force_multi=force_multi,
            empty_default=empty_default,
        )
