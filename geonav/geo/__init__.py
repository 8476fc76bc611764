"""Spherical geodesy: points, antimeridian-aware bounds and coordinate text.

Components:
    GeoPoint: Latitude/longitude on a sphere with great-circle and rhumb-line
              navigation (distance, bearing, destination, intersection, ...).
    GeoBounds: Southwest/northeast rectangle that may wrap across ±180°.
    GeoSpan: Height and width of a GeoBounds.
    CoordinateFormat: Compiled coordinate template for rendering and parsing.

Typical Usage:
    >>> from geonav.geo import GeoBounds, GeoPoint
    >>> from geonav.unit import Kilometer
    >>>
    >>> start = GeoPoint(37.5665, 126.9780)
    >>> leg = start.destination(45, Kilometer(500))
    >>> route = GeoBounds().extend(start).extend(leg)
    >>> route.contains(start.midpoint(leg))
    True
"""

from .coord_format import CoordinateFormat, compile_format
from .geo_bounds import GeoBounds, GeoSpan
from .geo_point import GeoPoint, normalize_longitude

__all__ = [
    "CoordinateFormat",
    "GeoBounds",
    "GeoPoint",
    "GeoSpan",
    "compile_format",
    "normalize_longitude",
]
