import pytest
from pytest import approx

from polystructures.calc import *
from polystructures.vectors import Vector2
from polystructures.wkt import parse_wkt

from tests import assert_points_equal, square_points


@pytest.fixture
def square():
    return [[square_points()]]


@pytest.mark.parametrize('degrees, expected', [
    (0, 0),
    (90, 90),
    (360, 0),
    (-360, 0),
    (-180, 180),
    (-5, 355),
    (370, 10),
    (900, 180),
    (359.5, 359.5),
])
def test_normalize_degrees(degrees, expected):
    assert normalize_degrees(degrees) == expected


@pytest.mark.parametrize('degrees', [0, 360, -360, 720])
def test_rotate_identity(square, degrees):
    result = rotate(square, degrees)
    assert result == square
    assert result is not square


def test_rotate(square):
    result = rotate([[[Vector2(1., 0.)]]], 90)
    assert_points_equal(result[0][0], [Vector2(0., 1.)])

    result = rotate([[[Vector2(2., 1.)]]], 90, Vector2(1., 1.))
    assert_points_equal(result[0][0], [Vector2(1., 2.)])

    result = rotate(square, 180, (5., 5.))
    assert_points_equal(
        result[0][0],
        [Vector2(10., 10.), Vector2(0., 10.), Vector2(0., 0.), Vector2(10., 0.), Vector2(10., 10.)]
    )

    # Input is left untouched
    assert square[0][0][0] == Vector2(0., 0.)


def test_rotate_reversible(square):
    result = rotate(rotate(square, 33.3, (2., 7.)), -33.3, (2., 7.))
    assert_points_equal(result[0][0], square[0][0])


def test_translate(square):
    assert translate(square, Vector2.zero()) is square
    assert translate(square, (0., 0.)) is square

    result = translate(square, Vector2(5., -5.))
    assert result[0][0] == [(5., -5.), (15., -5.), (15., 5.), (5., 5.), (5., -5.)]

    # Reversible
    assert translate(result, Vector2(-5., 5.)) == square


def test_translate_tuples():
    result = translate([[[(0., 0.), (1., 0.), (1., 1.)]]], (2., 3.))
    assert result == [[[(2., 3.), (3., 3.), (3., 4.)]]]
    assert isinstance(result[0][0][0], Vector2)


def test_ring_area():
    assert ring_area(square_points()) == 100.
    assert ring_area(square_points()[::-1]) == -100.
    assert ring_area([]) == 0.


@pytest.mark.parametrize('wkt_str, expected', [
    ('POLYGON((200000 500000, 200000 510000, 210000 510000, 210000 500000, 200000 500000))', 100_000_000),
    ('POLYGON((220000 500000, 220000 505000, 225000 505000, 225000 500000, 220000 500000))', 25_000_000),
    ('POLYGON((230000 500000, 230000 510000, 250000 510000, 250000 500000, 230000 500000))', 200_000_000),
    ('POLYGON((245000 500000, 245000 515000, 246000 515000, 246000 500000, 245000 500000))', 15_000_000),
    (
        'POLYGON((240000 500000, 242000 500000, 242000 502000, 240000 502000, 240000 500000), '
        '(240500 500500, 240500 501500, 241500 501500, 241500 500500, 240500 500500))',
        3_000_000
    ),
    (
        'MULTIPOLYGON(((0 0, 10 0, 10 10, 0 10, 0 0)), ((20 0, 25 0, 25 5, 20 5, 20 0)))',
        125
    ),
])
def test_surface_area(wkt_str, expected):
    assert surface_area(parse_wkt(wkt_str)) == approx(expected)


def test_surface_area_empty():
    assert surface_area([]) == 0.


def test_bounds(square):
    assert bounds(square) == (Vector2(0., 0.), Vector2(10., 10.))

    geometry = parse_wkt('MULTIPOLYGON (((-5 1, 0 0, 0 3, -5 1)), ((10 -2, 12 0, 11 4, 10 -2)))')
    assert bounds(geometry) == (Vector2(-5., -2.), Vector2(12., 4.))


def test_bounds_empty(caplog):
    assert bounds([]) == (Vector2(0., 0.), Vector2(0., 0.))
    assert 'without points' in caplog.text

    caplog.clear()
    assert bounds([[[]]]) == (Vector2(0., 0.), Vector2(0., 0.))
    assert 'without points' in caplog.text


@pytest.mark.parametrize('minimum, maximum, expected', [
    (Vector2(0., 0.), Vector2(10., 10.), Vector2(5., 5.)),
    (Vector2(-10., -4.), Vector2(10., 4.), Vector2(0., 0.)),
    ((1., 2.), (3., 8.), Vector2(2., 5.)),
    (Vector2(3., 3.), Vector2(3., 3.), Vector2(3., 3.)),
])
def test_center_from_bounds(minimum, maximum, expected):
    assert center_from_bounds(minimum, maximum) == expected


def test_rotate_wkt_points():
    result = rotate_wkt_points('POLYGON ((1 0, 0 1, -1 0, 1 0))', 90)
    assert_points_equal(
        result[0][0],
        [Vector2(0., 1.), Vector2(-1., 0.), Vector2(0., -1.), Vector2(0., 1.)]
    )

    assert rotate_wkt_points('POINT (1 1)', 90) == []


def test_rotate_wkt():
    wkt_str = 'POLYGON((30 20, 45 40, 10 40, 30 20))'
    assert rotate_wkt(wkt_str, 360) == wkt_str
    assert rotate_wkt(wkt_str, 0, (5., 5.)) == wkt_str

    assert rotate_wkt('LINESTRING (0 0, 1 1)', 90) == 'MULTIPOLYGON EMPTY'
    assert rotate_wkt('LINESTRING (0 0, 1 1)', 90, empty_default='') == ''


def test_translate_wkt():
    wkt_str = 'POLYGON ((0 0, 10 0, 10 10, 0 0))'
    assert translate_wkt(wkt_str, Vector2.zero()) is wkt_str

    result = translate_wkt(wkt_str, Vector2(1., 1.))
    assert result == 'POLYGON((1 1, 11 1, 11 11, 1 1))'

    assert translate_wkt(result, Vector2(-1., -1.)) == 'POLYGON((0 0, 10 0, 10 10, 0 0))'
