from polystructures.multistructures import MultiPolygon
from polystructures.structures import GeometryLine, Polygon, Ring
from polystructures.typing import *


def test_shape_aliases():
    assert isinstance(GeometryLine(), LinealShape)
    assert isinstance(Ring(), LinealShape)
    assert isinstance(Polygon(), SurfaceShape)
    assert isinstance(MultiPolygon(), SurfaceShape)
    assert not isinstance(Ring(), SurfaceShape)
