from polystructures._version import __version__  # noqa: F401
from polystructures.utils.logging import LOGGER
from polystructures.vectors import Rect, Vector2
from polystructures._base import GeometryType, Space
from polystructures import wkt
from polystructures.wkt import parse_wkt, to_wkt
from polystructures.structures import GeometryLine, GeometryVertex, Polygon, Ring
from polystructures.multistructures import MultiPolygon
from polystructures.parsers import parse_geometry

__all__ = [
    'GeometryLine',
    'GeometryType',
    'GeometryVertex',
    'MultiPolygon',
    'Polygon',
    'Rect',
    'Ring',
    'Space',
    'Vector2',
    'LOGGER',
    'parse_geometry',
    'parse_wkt',
    'to_wkt',
]
