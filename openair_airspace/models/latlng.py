#!/usr/bin/env python3

import math
from dataclasses import dataclass
from typing import Any, Dict

from .validation import CoordinateError


@dataclass(frozen=True)
class LatLng:
    """
    An immutable latitude/longitude pair in decimal degrees.

    Components are normalized on construction:
    - Latitude is clamped to -90 to +90 degrees
    - Longitude is wrapped into (-180, +180] degrees

    Distance and heading calculations live in ``openair_airspace.utils.geodesy``
    so this type stays a plain value.
    """

    lat: float
    lng: float

    def __post_init__(self):
        """Convert, validate and normalize the coordinates."""
        lat = self._to_degrees('lat', self.lat)
        lng = self._to_degrees('lng', self.lng)

        lat = min(max(lat, -90.0), 90.0)
        if lng != 180.0:
            lng = (lng + 180.0) % 360.0 - 180.0
            if lng == -180.0:
                lng = 180.0

        object.__setattr__(self, 'lat', lat)
        object.__setattr__(self, 'lng', lng)

    @staticmethod
    def _to_degrees(name: str, value: Any) -> float:
        try:
            degrees = float(value)
        except (TypeError, ValueError):
            raise CoordinateError(f"{name} must be a number, got {value!r}") from None
        if not math.isfinite(degrees):
            raise CoordinateError(f"{name} must be finite, got {value!r}")
        return degrees

    def to_dict(self) -> Dict[str, float]:
        """Convert to the ``{"lat", "lng"}`` literal used by map layers."""
        return {'lat': self.lat, 'lng': self.lng}

    def to_url_value(self, precision: int = 6) -> str:
        """Return ``"lat,lng"`` rounded to ``precision`` decimal places."""
        return f"{self.lat:.{precision}f},{self.lng:.{precision}f}"

    def __str__(self) -> str:
        return f"({self.lat}, {self.lng})"
