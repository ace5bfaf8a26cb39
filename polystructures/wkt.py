"""
Parsing and serialization of WKT polygon geometry to and from nested point lists
"""

__all__ = [
    'is_empty_wkt', 'is_multi_polygon', 'is_multipolygon_wkt', 'is_polygon_wkt',
    'parse_wkt', 'sanitize_wkt', 'split_multipolygon', 'to_wkt',
]

import re
from typing import List, Optional

import numpy as np

from polystructures._const import (
    EMPTY_GEOMETRIES, EMPTY_MULTIPOLYGON, MULTIPOLYGON_KEY, POLYGON_KEY
)
from polystructures.typing import MultiPolygonPoints, PolygonPoints, RingPoints
from polystructures.utils.logging import warn_once
from polystructures.vectors import Vector2

# A single number, e.g. '-1', '2.5', '.5' or '1e-3'
_RE_NUMBER_STR = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'

# A whole coordinate tuple, e.g. '1.0 2.0', optionally with Z and/or M values
_RE_COORD = re.compile(
    r'^\s*(' + _RE_NUMBER_STR + r')\s+(' + _RE_NUMBER_STR + r')((?:\s+' + _RE_NUMBER_STR + r'){0,2})\s*$'
)

_RE_POLYGON_WKT = re.compile(r'^\s*' + POLYGON_KEY + r'\b', flags=re.IGNORECASE)
_RE_MULTIPOLYGON_WKT = re.compile(r'^\s*' + MULTIPOLYGON_KEY + r'\b', flags=re.IGNORECASE)

# The geometry keyword, including an optional Z/M marker
_RE_KEYWORD = re.compile(r'^\s*(?:MULTI)?POLYGON\s*(?:ZM|Z|M)?\s*', flags=re.IGNORECASE)

# The boundary between two rings, e.g. '), ('
_RE_RING_SEPARATOR = re.compile(r'\)\s*,\s*\(')

# The boundary between two polygons of a multipolygon, e.g. ')), (('
_RE_POLYGON_SEPARATOR = re.compile(r'\)\s*\)\s*,\s*\(\s*\(')

_RE_LINE_BREAK = re.compile(r'[\r\n]+')
_RE_WHITESPACE = re.compile(r'\s+')


def sanitize_wkt(wkt_str: str) -> str:
    """
    Normalizes ring separators to '), (' and replaces line breaks with spaces.

    Args:
        wkt_str: (str)
            A WKT string

    Returns:
        str
    """
    wkt_str = _RE_LINE_BREAK.sub(' ', wkt_str)
    return _RE_RING_SEPARATOR.sub('), (', wkt_str)


def is_empty_wkt(wkt_str: Optional[str]) -> bool:
    """Whether the string is blank or one of the WKT empty-geometry literals"""
    if not wkt_str or not wkt_str.strip():
        return True

    return _RE_WHITESPACE.sub(' ', wkt_str.strip()).upper() in EMPTY_GEOMETRIES


def is_polygon_wkt(wkt_str: str) -> bool:
    return bool(_RE_POLYGON_WKT.match(wkt_str))


def is_multipolygon_wkt(wkt_str: str) -> bool:
    return bool(_RE_MULTIPOLYGON_WKT.match(wkt_str))


def is_multi_polygon(geometry: MultiPolygonPoints) -> bool:
    """
    Whether the geometry needs a MULTIPOLYGON keyword, i.e. it holds more
    than one polygon or a single polygon with more than one ring.
    """
    return len(geometry) > 1 or (len(geometry) == 1 and len(geometry[0]) > 1)


def split_multipolygon(wkt_str: str) -> List[str]:
    """
    Splits a MULTIPOLYGON string into one POLYGON string per member.

    Args:
        wkt_str: (str)
            A MULTIPOLYGON WKT string

    Returns:
        List of POLYGON WKT strings
    """
    body = _RE_KEYWORD.sub('', sanitize_wkt(wkt_str), count=1).strip().strip('()').strip()
    if not body:
        return []

    return [
        f'{POLYGON_KEY} (({fragment.strip().strip("()").strip()}))'
        for fragment in _RE_POLYGON_SEPARATOR.split(body)
    ]


def _parse_ring(ring_str: str) -> RingPoints:
    points = []
    for coord in ring_str.strip().strip('()').split(','):
        if not coord.strip():
            continue

        match = _RE_COORD.match(coord)
        if not match:
            warn_once(
                'Malformed WKT coordinates were skipped '
                '(this warning will not repeat)'
            )
            continue

        if match.group(3):
            warn_once(
                'Z and M values are not supported and were dropped '
                '(this warning will not repeat)'
            )

        points.append(Vector2(float(match.group(1)), float(match.group(2))))

    return points


def _parse_polygon(wkt_str: str) -> PolygonPoints:
    body = _RE_KEYWORD.sub('', wkt_str, count=1).strip()
    if body.startswith('(') and body.endswith(')'):
        body = body[1:-1].strip()

    if not body:
        return []

    rings = (_parse_ring(ring) for ring in _RE_RING_SEPARATOR.split(body))
    return [ring for ring in rings if ring]


def parse_wkt(wkt_str: Optional[str]) -> MultiPolygonPoints:
    """
    Parses a POLYGON or MULTIPOLYGON WKT string into nested point lists:
    polygons, each a list of rings, each a list of points. The first ring
    of a polygon is its exterior.

    Unrecognized and empty geometries produce an empty list; this function
    does not raise.

    Args:
        wkt_str: (str)
            A WKT string

    Returns:
        List of polygons
    """
    if is_empty_wkt(wkt_str):
        return []

    wkt_str = sanitize_wkt(str(wkt_str)).strip()
    if is_multipolygon_wkt(wkt_str):
        fragments = split_multipolygon(wkt_str)
    elif is_polygon_wkt(wkt_str):
        fragments = [wkt_str]
    else:
        return []

    polygons = (_parse_polygon(fragment) for fragment in fragments)
    return [polygon for polygon in polygons if polygon]


def _format_number(value: float) -> str:
    return np.format_float_positional(value, trim='-')


def _ring_to_wkt(ring: RingPoints) -> str:
    points = list(ring)
    if points[-1] != points[0]:
        points.append(points[0])

    coords = ', '.join(
        f'{_format_number(point[0])} {_format_number(point[1])}' for point in points
    )
    return f'(({coords}))'


def to_wkt(
    geometry: MultiPolygonPoints,
    force_multi: bool = False,
    empty_default: str = EMPTY_MULTIPOLYGON,
) -> str:
    """
    Serializes nested point lists into a WKT string. Rings which do not
    end on their first point are closed.

    Args:
        geometry:
            A list of polygons, each a list of rings, each a list of points

        force_multi: (bool) (Default False)
            Write a MULTIPOLYGON even when a POLYGON would do

        empty_default: (str) (Default 'MULTIPOLYGON EMPTY')
            Returned when the geometry is empty, or has a polygon without
            rings or a ring with fewer than 3 points

    Returns:
        str
    """
    if not geometry:
        return empty_default

    for polygon in geometry:
        if not polygon or any(len(ring) < 3 for ring in polygon):
            return empty_default

    multi = force_multi or is_multi_polygon(geometry)

    polygons = []
    for polygon in geometry:
        rings = ', '.join(_ring_to_wkt(ring) for ring in polygon)
        polygons.append(f'({rings})' if multi else rings)

    keyword = MULTIPOLYGON_KEY if multi else POLYGON_KEY
    return keyword + ', '.join(polygons)
