"""
Spherical-earth geodesy helpers.

All functions are pure and work on ``LatLng`` values:
- Distances are in meters
- Headings are in degrees, clockwise from true north

The earth is modelled as a sphere of radius ``EARTH_RADIUS_M``; no
ellipsoidal correction is applied.
"""

import math

from openair_airspace.models.latlng import LatLng

EARTH_RADIUS_M = 6378137.0
METERS_PER_NM = 1852.0


def _fmod(a: float, b: float) -> float:
    """Floored modulo rounded to 8 significant digits."""
    return float(f"{a - math.floor(a / b) * b:.8g}")


def destination_point(origin: LatLng, distance: float, heading: float,
                      radius: float = EARTH_RADIUS_M) -> LatLng:
    """
    Compute the point reached by travelling from ``origin``.

    Args:
        origin: Starting point
        distance: Distance to travel in meters
        heading: Initial heading in degrees (0 is North, 90 is East)
        radius: Sphere radius in meters

    Returns:
        The destination as a new LatLng
    """
    angular = distance / radius
    heading_rad = math.radians(heading)

    lat1 = math.radians(origin.lat)
    cos_dist = math.cos(angular)
    sin_dist = math.sin(angular)
    sin_lat1 = math.sin(lat1)
    cos_lat1 = math.cos(lat1)

    sin_lat2 = cos_dist * sin_lat1 + sin_dist * cos_lat1 * math.cos(heading_rad)
    # Rounding can push the sine just outside [-1, 1] at the poles
    sin_lat2 = max(min(sin_lat2, 1.0), -1.0)

    lng2 = math.radians(origin.lng) + math.atan2(
        sin_dist * cos_lat1 * math.sin(heading_rad),
        cos_dist - sin_lat1 * sin_lat2
    )

    return LatLng(math.degrees(math.asin(sin_lat2)), math.degrees(lng2))


def initial_heading(origin: LatLng, target: LatLng) -> float:
    """
    Initial great circle heading from ``origin`` to ``target``.

    Returns:
        Heading in degrees within [-180, 180). A raw heading of exactly
        180 is returned unchanged.
    """
    lat1 = math.radians(origin.lat)
    lat2 = math.radians(target.lat)
    delta_lng = math.radians(target.lng) - math.radians(origin.lng)

    angle = math.degrees(math.atan2(
        math.sin(delta_lng) * math.cos(lat2),
        math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lng)
    ))

    if angle == 180:
        return angle
    return _fmod(_fmod(angle + 180, 360) + 360, 360) - 180


def great_circle_distance(origin: LatLng, target: LatLng, radius: float = EARTH_RADIUS_M) -> float:
    """
    Great circle distance between two points using the haversine formula.

    Returns:
        Distance in meters
    """
    lat1 = math.radians(origin.lat)
    lng1 = math.radians(origin.lng)
    lat2 = math.radians(target.lat)
    lng2 = math.radians(target.lng)

    a = (math.sin((lat1 - lat2) / 2) ** 2
         + math.cos(lat1) * math.cos(lat2) * math.sin((lng1 - lng2) / 2) ** 2)
    return 2 * math.asin(min(math.sqrt(a), 1.0)) * radius


def nautical_miles_to_meters(nm: float) -> float:
    """Convert nautical miles to meters."""
    return nm * METERS_PER_NM
