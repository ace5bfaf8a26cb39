from pytest import approx

from polystructures.vectors import Vector2


def assert_points_equal(points1, points2, abs_tol: float = 1e-9):
    """Asserts two sequences of points match within a tolerance"""
    assert len(points1) == len(points2)
    for point1, point2 in zip(points1, points2):
        assert tuple(point1) == approx(tuple(point2), abs=abs_tol)


def square_points(x: float = 0., y: float = 0., size: float = 10., closed: bool = True):
    """Counter-clockwise square with its lower-left corner at (x, y)"""
    points = [
        Vector2(x, y), Vector2(x + size, y),
        Vector2(x + size, y + size), Vector2(x, y + size),
    ]
    if closed:
        points.append(Vector2(x, y))
    return points
