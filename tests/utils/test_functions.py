from polystructures.structures import GeometryVertex
from polystructures.utils.functions import *


def test_unique_by_identity():
    a, b = GeometryVertex((0., 0.)), GeometryVertex((0., 0.))
    assert a == b

    result = unique_by_identity([a, b, a, b])
    assert len(result) == 2
    assert result[0] is a
    assert result[1] is b

    assert unique_by_identity(iter([1, 2])) == [1, 2]
    assert unique_by_identity([]) == []
