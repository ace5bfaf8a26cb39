"""
Constants declarations for polystructures
"""

# WKT geometry keywords
POLYGON_KEY = 'POLYGON'
MULTIPOLYGON_KEY = 'MULTIPOLYGON'

# WKT empty-geometry literals
EMPTY_POINT = 'POINT EMPTY'
EMPTY_LINESTRING = 'LINESTRING EMPTY'
EMPTY_MULTIPOINT = 'MULTIPOINT EMPTY'
EMPTY_POLYGON = 'POLYGON EMPTY'
EMPTY_MULTILINESTRING = 'MULTILINESTRING EMPTY'
EMPTY_MULTIPOLYGON = 'MULTIPOLYGON EMPTY'
EMPTY_GEOMETRYCOLLECTION = 'GEOMETRYCOLLECTION EMPTY'

EMPTY_GEOMETRIES = frozenset({
    EMPTY_POINT,
    EMPTY_LINESTRING,
    EMPTY_MULTIPOINT,
    EMPTY_POLYGON,
    EMPTY_MULTILINESTRING,
    EMPTY_MULTIPOLYGON,
    EMPTY_GEOMETRYCOLLECTION,
})
