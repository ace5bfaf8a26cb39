"""Module for polystructures type hinting"""

__all__ = [
    'LinealShape', 'MultiPolygonPoints', 'PolygonPoints',
    'RingPoints', 'SurfaceShape',
]

from typing import List

from polystructures._base import Lineal, Surface
from polystructures.vectors import Vector2

# Raw WKT geometry, as produced by polystructures.wkt.parse_wkt
RingPoints = List[Vector2]
PolygonPoints = List[RingPoints]  # ring 0 is the exterior, the rest are holes
MultiPolygonPoints = List[PolygonPoints]

# Any shape with a bounding box, center and centroid, e.g. GeometryLine
LinealShape = Lineal

# Any shape that also has a surface area, e.g. Polygon
SurfaceShape = Surface
