"""
Multi-geometry structures
"""

__all__ = ['MultiPolygon']

from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from polystructures._base import Geometry, GeometryType, Space, Surface
from polystructures._const import EMPTY_MULTIPOLYGON
from polystructures.structures import GeometryVertex, Polygon
from polystructures.typing import MultiPolygonPoints
from polystructures.utils.functions import unique_by_identity
from polystructures.utils.observable import ObservableList
from polystructures.vectors import Rect, Vector2
from polystructures import wkt


class MultiPolygon(Surface):
    """
    An ordered collection of polygons treated as a single surface.

    Args:
        polygons: (Iterable[Polygon], optional)
            The member polygons
    """

    geometry_type = GeometryType.MULTIPOLYGON

    def __init__(self, polygons: Optional[Iterable[Polygon]] = None):
        super().__init__()
        self._polygons: ObservableList[Polygon] = ObservableList(
            polygons,
            item_type=Polygon,
            on_added=self._on_polygon_added,
            on_removed=self._on_polygon_removed,
            on_changed=self.mark_dirty,
        )
        for polygon in self._polygons:
            polygon.add_parent(self)

    def __repr__(self):
        return f'<MultiPolygon of {len(self._polygons)} polygons>'

    def _on_polygon_added(self, polygon: Polygon):
        polygon.add_parent(self)

    def _on_polygon_removed(self, polygon: Polygon):
        if not self._polygons.contains_instance(polygon):
            polygon.remove_parent(self)

    @property
    def polygons(self) -> ObservableList[Polygon]:
        return self._polygons

    @polygons.setter
    def polygons(self, polygons: Iterable[Polygon]):
        self._polygons[:] = polygons

    def add_polygon(self, polygon: Polygon):
        self._polygons.append(polygon)

    @property
    def is_empty(self) -> bool:
        return not self._polygons

    def is_valid(self) -> bool:
        return not self.is_empty and all(polygon.is_valid() for polygon in self._polygons)

    def children(self) -> List[Geometry]:
        return unique_by_identity(self._polygons)

    def all_vertices(self) -> List[GeometryVertex]:
        return unique_by_identity(
            vertex for polygon in self._polygons for vertex in polygon.all_vertices()
        )

    def calculate_aabb(self) -> Rect:
        return Rect.combine(
            polygon.aabb for polygon in self._polygons if not polygon.is_empty
        )

    def calculate_center(self) -> Vector2:
        if not self._polygons:
            return Vector2.zero()

        centers = np.array([tuple(polygon.center) for polygon in self._polygons])
        return Vector2(*centers.mean(axis=0))

    def calculate_centroid(self) -> Vector2:
        """
        Area-weighted mean of the member centroids. Members without area
        are ignored, and a multipolygon without any area has a zero centroid.
        """
        weighted = [
            (polygon.centroid, polygon.surface_area)
            for polygon in self._polygons
            if polygon.surface_area > 0
        ]
        if not weighted:
            return Vector2.zero()

        centroids = np.array([tuple(centroid) for centroid, _ in weighted])
        areas = np.array([area for _, area in weighted])
        return Vector2(*(centroids * areas[:, None]).sum(axis=0) / areas.sum())

    def calculate_surface_area(self) -> float:
        return sum(polygon.surface_area for polygon in self._polygons)

    def translate(self, vector: Union[Vector2, Tuple[float, float]], space: Space = Space.LOCAL):
        """
        Moves the multipolygon. In WORLD space every vertex moves by the same
        offset, placing the multipolygon's center on the vector. In LOCAL
        space each member polygon is translated in turn.
        """
        space = Space(space)
        if space is Space.WORLD:
            super().translate(vector, space)
            return

        for polygon in self._polygons:
            polygon.translate(vector, Space.LOCAL)

    def copy(self, memo: Optional[Dict[int, Geometry]] = None) -> 'MultiPolygon':
        memo = {} if memo is None else memo
        if id(self) not in memo:
            memo[id(self)] = MultiPolygon(polygon.copy(memo) for polygon in self._polygons)

        return memo[id(self)]  # type: ignore

    def dispose(self):
        super().dispose()
        self._polygons.on_added = None
        self._polygons.on_removed = None

    @classmethod
    def from_points(cls, points: MultiPolygonPoints) -> 'MultiPolygon':
        return cls(Polygon.from_points(polygon) for polygon in points)

    @classmethod
    def from_wkt(cls, wkt_str: str) -> 'MultiPolygon':
        """
        Create a MultiPolygon from a WKT string. A single POLYGON is accepted
        and becomes the only member.
        """
        if wkt.is_empty_wkt(wkt_str):
            return cls()

        if wkt.is_multipolygon_wkt(wkt_str):
            fragments = wkt.split_multipolygon(wkt_str)
        elif wkt.is_polygon_wkt(wkt_str):
            fragments = [wkt_str]
        else:
            raise ValueError(f'Invalid WKT MultiPolygon: {wkt_str}')

        return cls(Polygon.from_wkt(fragment) for fragment in fragments)

    def to_points(self) -> MultiPolygonPoints:
        return [polygon.to_points() for polygon in self._polygons]

    def to_wkt(self, force_multi: bool = False, empty_default: str = EMPTY_MULTIPOLYGON) -> str:
        """
        Serializes the multipolygon into a WKT string. A multipolygon holding a
        single polygon without holes is written as a POLYGON unless
        force_multi is set.

        Args:
            force_multi: (bool) (Default False)
                Always write a MULTIPOLYGON

            empty_default: (str) (Default 'MULTIPOLYGON EMPTY')
                The string returned when the multipolygon cannot be serialized

        Returns:
            str
        """
        return wkt.to_wkt(self.to_points(), force_multi=force_multi, empty_default=empty_default)
