"""Airspace polygon output model."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .latlng import LatLng

HAZARDOUS_CLASSES = frozenset({'P', 'R', 'D', 'A', 'B', 'C'})
HAZARDOUS_NAME_KEYWORDS = ('PROHIBITED', 'RESTRICTED', 'DANGER')


@dataclass(frozen=True)
class AirspacePolygon:
    """
    A finalized airspace definition.

    Produced once per OpenAir block that survives the exclusion policy and
    never modified afterwards.

    Attributes:
        coordinates: Boundary points in definition order (defines winding)
        base_altitude_ft: Floor in feet, 0 when the block had no usable AL
        ceiling_altitude_ft: Ceiling in feet, None when not given
        name: Airspace name from AN
        airspace_class: Airspace class from AC
    """

    coordinates: Tuple[LatLng, ...] = field(default_factory=tuple)
    base_altitude_ft: Union[int, float] = 0
    ceiling_altitude_ft: Optional[Union[int, float]] = None
    name: Optional[str] = None
    airspace_class: Optional[str] = None

    @property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """Bounding box as (min_lat, min_lng, max_lat, max_lng), None if empty."""
        if not self.coordinates:
            return None
        lats = [point.lat for point in self.coordinates]
        lngs = [point.lng for point in self.coordinates]
        return min(lats), min(lngs), max(lats), max(lngs)

    @property
    def is_hazardous(self) -> bool:
        """True for prohibited, restricted, danger and controlled A/B/C airspace."""
        if self.airspace_class and self.airspace_class.upper() in HAZARDOUS_CLASSES:
            return True
        upper_name = (self.name or '').upper()
        return any(keyword in upper_name for keyword in HAZARDOUS_NAME_KEYWORDS)

    def contains(self, point: LatLng) -> bool:
        """
        Check whether a point lies inside the polygon.

        Uses ray casting in the lat/lng plane, which is adequate for the
        small extents of airspace definitions away from the antimeridian.
        """
        if len(self.coordinates) < 3:
            return False

        inside = False
        x, y = point.lng, point.lat
        previous = self.coordinates[-1]
        for current in self.coordinates:
            if (current.lat > y) != (previous.lat > y):
                crossing = (previous.lng - current.lng) * (y - current.lat) / (previous.lat - current.lat) + current.lng
                if x < crossing:
                    inside = not inside
            previous = current
        return inside

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the record shape consumed by map layers."""
        return {
            'coords': [point.to_dict() for point in self.coordinates],
            'base_alt': self.base_altitude_ft,
            'alt_ceiling': self.ceiling_altitude_ft,
            'name': self.name,
            'class': self.airspace_class,
        }

    def __str__(self) -> str:
        name_str = self.name or 'Unnamed airspace'
        return f"{name_str} ({self.airspace_class or '?'}) {len(self.coordinates)} points"
