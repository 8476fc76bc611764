"""Latitude/longitude rectangles that may wrap across the antimeridian.

A GeoBounds is described by its southwest and northeast corners. When the
western edge lies east of the eastern edge the box wraps through ±180°, and
every longitude test has to follow the crossing flag instead of comparing
sw.lng <= lng <= ne.lng directly. Latitude never wraps.

Example:
    >>> pacific = GeoBounds(GeoPoint(10, 170), GeoPoint(20, -170))
    >>> pacific.crosses_antimeridian
    True
    >>> pacific.contains(GeoPoint(15, 175)), pacific.contains(GeoPoint(15, 0))
    (True, False)
    >>> pacific.to_span()
    GeoSpan(lat=10.0, lng=20.0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeoSpan:
    """Height and width of a GeoBounds in degrees.

    Unlike a coordinate, lng is a width: it is never negative and may exceed
    180 for wide boxes.
    """

    lat: float
    lng: float


class GeoBounds:
    """A rectangle on the sphere between a southwest and a northeast corner.

    Corners are copied on construction, so later changes to the points
    passed in do not affect the bounds. The bounds are grown in place with
    extend(); that is their only mutation and it replaces both corners and
    the crossing flag together.

    Attributes:
        valid (bool): False for bounds built without any corner.
        crosses_antimeridian (bool): True when the box wraps through ±180°.
    """

    def __init__(self, sw: GeoPoint | None = None, ne: GeoPoint | None = None):
        self._sw: GeoPoint | None = None
        self._ne: GeoPoint | None = None
        self.crosses_antimeridian = False

        corners = [point for point in (sw, ne) if point is not None]
        if corners:
            first, last = corners[0], corners[-1]
            self._set(first.lat, first.lng, last.lat, last.lng)

    def _set(self, south: float, west: float, north: float, east: float) -> None:
        self._sw = GeoPoint(south, west)
        self._ne = GeoPoint(north, east)
        self.crosses_antimeridian = (self._sw.lng == -180) != (self._ne.lng == 180) or self._sw.lng > self._ne.lng

    @property
    def valid(self) -> bool:
        return self._sw is not None and self._ne is not None

    @property
    def sw(self) -> GeoPoint | None:
        """Copy of the southwest corner, None when the bounds are empty."""
        return self._sw.clone() if self._sw else None

    @property
    def ne(self) -> GeoPoint | None:
        """Copy of the northeast corner, None when the bounds are empty."""
        return self._ne.clone() if self._ne else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoBounds):
            return NotImplemented
        if not (self.valid and other.valid):
            return self.valid == other.valid
        return self._sw == other._sw and self._ne == other._ne

    def __repr__(self) -> str:
        return f"GeoBounds(sw={self._sw!r}, ne={self._ne!r})"

    def clone(self) -> GeoBounds:
        return GeoBounds(self._sw, self._ne)

    def is_empty(self) -> bool:
        """True for invalid bounds or bounds whose north edge is south of the south edge."""
        return not self.valid or self._ne.lat < self._sw.lat

    def _lng_ranges(self) -> list[tuple[float, float]]:
        """Closed longitude intervals covered by the box."""
        if self.crosses_antimeridian:
            return [(self._sw.lng, 180.0), (-180.0, self._ne.lng)]
        return [(self._sw.lng, self._ne.lng)]

    def _contains_lng(self, lng: float) -> bool:
        return any(west <= lng <= east for west, east in self._lng_ranges())

    def contains(self, point: GeoPoint) -> bool:
        """Whether point lies inside the box, edges included."""
        if not self.valid:
            return False
        p = GeoPoint(point.lat, point.lng)
        return self._sw.lat <= p.lat <= self._ne.lat and self._contains_lng(p.lng)

    def center(self) -> GeoPoint | None:
        """Middle of the box, or None when the bounds are empty.

        For a crossing box the eastern edge is shifted by 360° before
        averaging, then the result is wrapped back into [-180, 180].
        """
        if not self.valid:
            logger.debug("Center requested for empty bounds")
            return None
        lat = (self._sw.lat + self._ne.lat) / 2
        if self.crosses_antimeridian:
            lng = (360 - self._sw.lng + self._ne.lng) / 2 + self._sw.lng
        else:
            lng = (self._sw.lng + self._ne.lng) / 2
        return GeoPoint(lat, lng)

    def to_span(self) -> GeoSpan:
        """Height and width of the box; zero for empty bounds."""
        if not self.valid:
            return GeoSpan(0.0, 0.0)
        width = self._ne.lng - self._sw.lng + (360 if self.crosses_antimeridian else 0)
        return GeoSpan(self._ne.lat - self._sw.lat, width)

    def extend(self, point: GeoPoint) -> GeoBounds:
        """Grow the box in place to the smallest box that also holds point.

        A point outside the longitude range is reached by growing westward
        when it lies west of the center (less than 180° away) and eastward
        otherwise, which is always the narrower of the two choices. Empty
        bounds become a degenerate box at point.

        Returns:
            GeoBounds: self, to allow chaining.
        """
        p = GeoPoint(point.lat, point.lng)
        if not self.valid:
            self._set(p.lat, p.lng, p.lat, p.lng)
            return self

        south = min(p.lat, self._sw.lat)
        north = max(p.lat, self._ne.lat)
        west, east = self._sw.lng, self._ne.lng
        if not self._contains_lng(p.lng):
            offset = (p.lng - self.center().lng + 180) % 360 - 180
            # an edge on ±180 takes the sign facing the rest of the box
            if offset < 0:
                west = 180.0 if p.lng == -180 else p.lng
            else:
                east = -180.0 if p.lng == 180 else p.lng

        self._set(south, west, north, east)
        return self

    def extended(self, point: GeoPoint) -> GeoBounds:
        """Return a grown copy, leaving these bounds untouched."""
        return self.clone().extend(point)

    def intersects(self, other: GeoBounds) -> bool:
        """Whether the two boxes share at least one point.

        Longitude overlap is tested on the same intervals contains() uses,
        so two crossing boxes always overlap in longitude.
        """
        if not (self.valid and other.valid):
            return False
        if self._ne.lat < other._sw.lat or other._ne.lat < self._sw.lat:
            return False
        return any(
            west1 <= east2 and west2 <= east1
            for west1, east1 in self._lng_ranges()
            for west2, east2 in other._lng_ranges()
        )

    def to_string(self, format: str | None = None) -> str:
        """Render as "<sw>, <ne>", or an empty string for empty bounds."""
        if not self.valid:
            return ""
        return f"{self._sw.to_string(format)}, {self._ne.to_string(format)}"

    def __str__(self) -> str:
        return self.to_string()
