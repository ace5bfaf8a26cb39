"""Module for parsing WKT text into polystructures"""

__all__ = ['parse_geometry']

import re
from typing import Dict, Type, Union

from polystructures._const import MULTIPOLYGON_KEY, POLYGON_KEY
from polystructures.multistructures import MultiPolygon
from polystructures.structures import Polygon
from polystructures import wkt


_PARSER_MAP: Dict[str, Union[Type[Polygon], Type[MultiPolygon]]] = {
    POLYGON_KEY: Polygon,
    MULTIPOLYGON_KEY: MultiPolygon,
}


def parse_geometry(wkt_str: str) -> Union[Polygon, MultiPolygon]:
    """
    Parses a WKT string into its corresponding polystructure.

    Args:
        wkt_str: (str)
            A POLYGON or MULTIPOLYGON well known text string

    Returns:
        Polygon or MultiPolygon, determined by input. Empty geometries
        produce an empty MultiPolygon.
    """
    if wkt.is_empty_wkt(wkt_str):
        return MultiPolygon()

    wkt_type_match = re.match(r'^\s*([a-zA-Z]+)', wkt_str)
    if wkt_type_match is None:
        raise ValueError('Invalid WKT')

    wkt_type = wkt_type_match.group(1).upper()
    if wkt_type not in _PARSER_MAP:
        raise ValueError('Invalid WKT')

    return _PARSER_MAP[wkt_type].from_wkt(wkt_str)
