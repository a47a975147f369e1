"""
OpenAir airspace parsing library.

This package converts airspace definitions in the OpenAir text format into
polygon records ready for display on a map.

The main public API includes:
- parse: Parse OpenAir text into AirspacePolygon records
- OpenAirParser: Configurable parser (strict mode, excluded classes)
- AirspacePolygon: Parsed airspace record
- LatLng: Immutable coordinate value
- OpenAirSource: Fetch and parse OpenAir files over HTTP
"""

__version__ = '0.1.0'

from .models import (
    AirspacePolygon,
    LatLng,
    CoordinateError,
    CoordinateParseError,
    OpenAirParseError,
    ParseIssue,
    ParseReport,
)
from .parsers import OpenAirParser, parse
from .sources import OpenAirSource, load_file

__all__ = [
    'parse',
    'OpenAirParser',
    'AirspacePolygon',
    'LatLng',
    'CoordinateError',
    'CoordinateParseError',
    'OpenAirParseError',
    'ParseIssue',
    'ParseReport',
    'OpenAirSource',
    'load_file',
]
