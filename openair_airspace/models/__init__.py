"""
Data models for the openair_airspace library.

This package contains the coordinate value type, the airspace polygon
output record and the parse diagnostics.
"""

from .latlng import LatLng
from .airspace import AirspacePolygon
from .validation import (
    CoordinateError,
    CoordinateParseError,
    OpenAirParseError,
    ParseIssue,
    ParseReport,
)

__all__ = [
    'LatLng',
    'AirspacePolygon',
    'CoordinateError',
    'CoordinateParseError',
    'OpenAirParseError',
    'ParseIssue',
    'ParseReport',
]
