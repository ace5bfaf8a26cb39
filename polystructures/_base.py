"""
Base class declarations for polystructures
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
import math
from typing import Callable, Dict, List, Optional, Tuple, Union, TYPE_CHECKING

from typing_extensions import Self

from polystructures.utils.functions import unique_by_identity
from polystructures.vectors import Rect, Vector2

if TYPE_CHECKING:  # pragma: no cover
    from polystructures.structures import GeometryVertex

RecalculatedCallback = Callable[['Geometry'], None]
PropertyChangedCallback = Callable[['Geometry', str], None]


class Space(Enum):
    """
    The frame of reference for a translation.

    LOCAL moves a geometry by an offset. WORLD moves it onto a target position.
    """
    LOCAL = 'local'
    WORLD = 'world'


class GeometryType(Enum):
    VERTEX = 'vertex'
    LINE = 'line'
    RING = 'ring'
    POLYGON = 'polygon'
    MULTIPOLYGON = 'multipolygon'


class Geometry(ABC):
    """
    A node in the geometry graph.

    Every node starts dirty. Derived values are computed lazily by
    `recalculate()`, which always recomputes the node and every child
    below it. Changes never recompute anything, they only mark the
    changed node dirty and every node above it through the parent links.
    """

    geometry_type: GeometryType

    def __init__(self):
        self._dirty = True
        self._parents: Dict[int, Geometry] = {}
        self._recalculated_callbacks: List[RecalculatedCallback] = []
        self._property_changed_callbacks: List[PropertyChangedCallback] = []

    @property
    def is_dirty(self) -> bool:
        """Whether derived values must be recalculated before being read"""
        return self._dirty

    @is_dirty.setter
    def is_dirty(self, value: bool):
        if value:
            self.mark_dirty()
        else:
            self._dirty = False

    @property
    def is_clean(self) -> bool:
        return not self._dirty

    @property
    def parents(self) -> Tuple[Geometry, ...]:
        """The nodes which directly reference this one"""
        return tuple(self._parents.values())

    def add_parent(self, parent: Geometry):
        self._parents[id(parent)] = parent

    def remove_parent(self, parent: Geometry):
        self._parents.pop(id(parent), None)

    def mark_dirty(self):
        """
        Flags this node and, transitively, every parent as needing
        recalculation. Nodes which are already dirty stop the propagation.
        """
        if self._dirty:
            return

        self._dirty = True
        for parent in list(self._parents.values()):
            parent.mark_dirty()

    def recalculate(self):
        """Recomputes the derived values of every child and then this node"""
        for child in self.children():
            child.recalculate()

        self._calculate()
        self._dirty = False

        for callback in list(self._recalculated_callbacks):
            callback(self)

    def _ensure_clean(self):
        if self._dirty:
            self.recalculate()

    def _calculate(self):
        """Computes and stores this node's own derived values"""

    def subscribe_recalculated(self, callback: RecalculatedCallback):
        """
        Registers a callback invoked with this node after every recalculation.

        Args:
            callback:
                A callable accepting the recalculated geometry
        """
        self._recalculated_callbacks.append(callback)

    def unsubscribe_recalculated(self, callback: RecalculatedCallback):
        self._recalculated_callbacks.remove(callback)

    def subscribe_property_changed(self, callback: PropertyChangedCallback):
        """
        Registers a callback invoked when one of this node's reference
        properties (e.g. a line's start vertex) is replaced.

        Args:
            callback:
                A callable accepting the geometry and the property name
        """
        self._property_changed_callbacks.append(callback)

    def unsubscribe_property_changed(self, callback: PropertyChangedCallback):
        self._property_changed_callbacks.remove(callback)

    def _notify_property_changed(self, name: str):
        self.mark_dirty()
        for callback in list(self._property_changed_callbacks):
            callback(self, name)

    @abstractmethod
    def children(self) -> List[Geometry]:
        """The distinct geometries directly owned by this node"""

    @abstractmethod
    def all_vertices(self) -> List[GeometryVertex]:
        """Every distinct vertex reachable from this node"""

    @abstractmethod
    def copy(self, memo: Optional[Dict[int, Geometry]] = None) -> Self:
        """
        Produces a deep, dirty copy of this node which shares no objects
        with it. Vertices shared inside the copied subtree stay shared.

        Args:
            memo: (dict, optional)
                Copies already made, keyed by the id of the copied node
        """

    @abstractmethod
    def rotate_around_pivot_rad(self, radians: float, pivot: Vector2):
        """
        Rotates the geometry around a pivot point.

        Args:
            radians: (float)
                The rotation angle. Positive values rotate counter-clockwise.

            pivot: (Vector2)
                The point to rotate around
        """

    def rotate_around_pivot(self, degrees: float, pivot: Vector2):
        """
        Rotates the geometry around a pivot point.

        Args:
            degrees: (float)
                The rotation angle. Positive values rotate clockwise.

            pivot: (Vector2)
                The point to rotate around
        """
        self.rotate_around_pivot_rad(-math.radians(degrees), pivot)

    @abstractmethod
    def translate(self, vector: Union[Vector2, Tuple[float, float]], space: Space = Space.LOCAL):
        """
        Moves the geometry.

        Args:
            vector: (Vector2)
                An offset when space is LOCAL, a target position when space is WORLD

            space: (Space) (Default LOCAL)
                The frame of reference for vector
        """

    def dispose(self):
        """Detaches this node from the parent sets of its children"""
        for child in self.children():
            child.remove_parent(self)


class Lineal(Geometry, ABC):
    """A geometry with a bounding box, a center and a centroid"""

    def __init__(self):
        super().__init__()
        self._aabb = Rect()
        self._center = Vector2.zero()
        self._centroid = Vector2.zero()

    @property
    def aabb(self) -> Rect:
        self._ensure_clean()
        return self._aabb

    @property
    def center(self) -> Vector2:
        self._ensure_clean()
        return self._center

    @property
    def centroid(self) -> Vector2:
        self._ensure_clean()
        return self._centroid

    def _calculate(self):
        self._aabb = self.calculate_aabb()
        self._center = self.calculate_center()
        self._centroid = self.calculate_centroid()

    @abstractmethod
    def calculate_aabb(self) -> Rect:
        """Computes the axis-aligned bounding box from the children"""

    @abstractmethod
    def calculate_center(self) -> Vector2:
        """Computes the center from the children"""

    @abstractmethod
    def calculate_centroid(self) -> Vector2:
        """Computes the centroid from the children"""

    def rotate_around_center(self, degrees: float):
        self.rotate_around_pivot(degrees, self.center)

    def rotate_around_centroid(self, degrees: float):
        self.rotate_around_pivot(degrees, self.centroid)

    def rotate_around_pivot_rad(self, radians: float, pivot: Vector2):
        for vertex in unique_by_identity(self.all_vertices()):
            vertex.rotate_around_pivot_rad(radians, pivot)

    def translate(self, vector: Union[Vector2, Tuple[float, float]], space: Space = Space.LOCAL):
        space = Space(space)
        vector = Vector2(*vector)
        offset = vector - self.center if space is Space.WORLD else vector
        if offset.is_zero:
            return

        for vertex in unique_by_identity(self.all_vertices()):
            vertex.translate(offset, Space.LOCAL)


class Surface(Lineal, ABC):
    """A closed geometry which additionally has a surface area"""

    def __init__(self):
        super().__init__()
        self._surface_area = 0.0

    @property
    def surface_area(self) -> float:
        self._ensure_clean()
        return self._surface_area

    def _calculate(self):
        super()._calculate()
        self._surface_area = self.calculate_surface_area()

    @abstractmethod
    def calculate_surface_area(self) -> float:
        """Computes the surface area from the children"""
