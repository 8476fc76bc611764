"""geonav: spherical navigation toolkit.

geonav models points on a spherical Earth and the quantities navigators
derive from them: great-circle distances and bearings, destinations,
intersections of two courses, rhumb lines and cross-track errors. A
companion bounds type covers rectangular regions, including regions that
straddle the ±180° antimeridian, and a small template language renders and
parses human-readable coordinates such as 37°34.0'N 122°25.2'W.

Package Layout:
    geonav.geo: GeoPoint, GeoBounds and the coordinate template language.
    geonav.unit: Type-safe angle and length units accepted by GeoPoint.
    geonav.config: Default sphere radius, default template and tolerances.

The model is a sphere of configurable radius (3440 NM by default). It is
accurate enough for navigation-scale work but is not an ellipsoidal (WGS84)
geodesy library.

geonav logs through the standard logging module under the "geonav" logger
and stays silent unless the application configures logging.
"""

import logging

from geonav.geo import GeoBounds, GeoPoint, GeoSpan

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = ["GeoBounds", "GeoPoint", "GeoSpan"]
