"""Geographic points on a spherical Earth.

GeoPoint holds a latitude/longitude pair in degrees together with the radius
of the sphere it lives on, and implements the classic spherical navigation
formulae on top of it: haversine distance, initial and final bearings,
midpoints, destinations, great-circle intersections, rhumb lines and
cross/along-track distances.

The sphere defaults to the mean Earth radius in nautical miles, so distances
come back in nautical miles unless a point carries its own radius, in which
case they come back in the units of that radius. Angles are degrees at the
API and radians inside. The trigonometry runs on NumPy so that rounding
overshoots past [-1, 1] yield NaN instead of raising, and those NaNs are
guarded before they can reach a result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from geonav.config import BASE_TYPE, DEFAULT_FORMAT, EARTH_RADIUS, EPSILON
from geonav.unit import Degree, NauticalMile, UnitFloat

from .coord_format import compile_format

logger = logging.getLogger(__name__)

PI = np.pi
PI2 = 2 * np.pi
PI3 = 3 * np.pi
PI_4 = np.pi / 4


def normalize_longitude(lng: float) -> float:
    """Wrap a longitude into [-180, 180].

    Exact multiples of 180 keep the sign convention of the wrapping formula:
    180 and 540 map to 180, -180 and -540 stay -180, multiples of 360 map
    to 0.

    Example:
        >>> normalize_longitude(190)
        -170.0
        >>> normalize_longitude(-180)
        -180.0
    """
    boundary = 1 if np.fmod(lng, 180) else -1
    sign = -1 if lng < 0 else 1
    wrapped = (abs(lng) + 180) % 360 - 180
    return float(boundary * sign * wrapped) + 0.0


def _degrees(angle: BASE_TYPE | UnitFloat) -> float:
    """Read a bearing given either as plain degrees or as an angle unit."""
    if isinstance(angle, UnitFloat):
        return angle.to(Degree)
    return float(angle)


def _nautical(length: BASE_TYPE | UnitFloat) -> float:
    """Read a radius given either as a plain number or as a length unit."""
    if isinstance(length, UnitFloat):
        return length.to(NauticalMile)
    return float(length)


def _wrap_pi(angle: float) -> float:
    """Normalise a longitude in radians to [-π, π)."""
    return (angle + PI3) % PI2 - PI


def _clip_unit(value: float) -> float:
    return float(np.clip(value, -1.0, 1.0))


def _acos_or_zero(value: float) -> float:
    angle = np.arccos(value)
    return 0.0 if np.isnan(angle) else float(angle)


def _haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Central angle in radians between two points given in radians."""
    a = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    return float(2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))


def _mercator_stretch(lat1: float, lat2: float) -> tuple[float, float]:
    """Return (Δψ, q) for a rhumb line between two latitudes in radians.

    Δψ is the difference of the Mercator-projected latitudes and q = Δφ/Δψ
    the stretch factor; an east-west line (Δψ = 0) uses q = cos φ1.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        dpsi = np.log(np.tan(lat2 / 2 + PI_4) / np.tan(lat1 / 2 + PI_4))
    dlat = lat2 - lat1
    q = dlat / dpsi if abs(dpsi) > EPSILON else np.cos(lat1)
    return float(dpsi), float(q)


@dataclass(eq=False)
class GeoPoint:
    """A point on a sphere, in degrees.

    Latitude is clamped to [-90, 90] and longitude wrapped into [-180, 180]
    on construction (see normalize_longitude). The radius is only stored when
    it differs from the default EARTH_RADIUS; sphere_radius always returns
    the effective value.

    Points compare equal when latitude, longitude and radius match; the
    display format does not take part in equality. The only in-place
    mutation is flip(), so a point shared between threads must not be
    flipped concurrently.

    Attributes:
        lat (float): Latitude in degrees, positive north.
        lng (float): Longitude in degrees, positive east.
        format (str | None): Template used by str(); see coord_format.
        radius (float | None): Sphere radius, or None for the default.

    Example:
        >>> origin = GeoPoint(0, 0)
        >>> round(origin.distance(GeoPoint(0, 1)), 2)  # one degree of arc
        60.04
        >>> origin.bearing(GeoPoint(0, 1))
        90.0
        >>> GeoPoint(10, 190)
        GeoPoint(lat=10.0, lng=-170.0, format=None, radius=None)
    """

    lat: float
    lng: float
    format: str | None = None
    radius: float | None = None
    _plain_radius: bool = field(default=False, init=False, repr=False)

    def __post_init__(self):
        self.lat = float(min(90.0, max(-90.0, float(self.lat))))
        self.lng = normalize_longitude(float(self.lng))
        has_unit = isinstance(self.radius, UnitFloat)
        radius = _nautical(self.radius) if self.radius else None
        self.radius = radius if radius and radius != EARTH_RADIUS else None
        # a custom radius given as a bare number has no known length unit
        self._plain_radius = self.radius is not None and not has_unit

    @classmethod
    def from_rad(cls, lat: float, lng: float, radius: float | None = None) -> GeoPoint:
        """Create a GeoPoint from latitude and longitude in radians."""
        return cls(float(np.degrees(lat)), float(np.degrees(lng)), radius=radius)

    @classmethod
    def parse(cls, text: str, format: str | None = None) -> GeoPoint | None:
        """Parse text written in a coordinate template.

        Args:
            text: String to read, e.g. "37°34.0'N 122°25.2'W".
            format: Template the text was written in; DEFAULT_FORMAT if omitted.

        Returns:
            GeoPoint | None: The point, carrying format, or None when text
            does not match the template.
        """
        coords = compile_format(format or DEFAULT_FORMAT).parse(text)
        if coords is None:
            return None
        return cls(coords[0], coords[1], format=format)

    @property
    def sphere_radius(self) -> float:
        """Effective radius of the sphere this point lives on."""
        return self.radius or EARTH_RADIUS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return self.lat == other.lat and self.lng == other.lng and self.radius == other.radius

    def clone(self) -> GeoPoint:
        return self._same_sphere(GeoPoint(self.lat, self.lng, self.format, self.radius))

    def flip(self, flip_lat: bool = True, flip_lng: bool = False) -> None:
        """Mirror this point in place across the equator and/or the prime meridian."""
        if flip_lat:
            self.lat = -self.lat
        if flip_lng:
            self.lng = normalize_longitude(-self.lng)

    def flipped(self, flip_lat: bool = True, flip_lng: bool = False) -> GeoPoint:
        """Return a mirrored copy, leaving this point untouched."""
        point = self.clone()
        point.flip(flip_lat, flip_lng)
        return point

    def to_string(self, format: str | None = None) -> str:
        """Render the point with format, this point's own format, or the default."""
        return compile_format(format or self.format or DEFAULT_FORMAT).render(self.lat, self.lng)

    def __str__(self) -> str:
        return self.to_string()

    def _radians(self) -> tuple[float, float]:
        return float(np.radians(self.lat)), float(np.radians(self.lng))

    def _on_sphere(self, lat: float, lng: float) -> GeoPoint:
        """Build a point from radians on this point's sphere."""
        return self._same_sphere(GeoPoint(float(np.degrees(lat)), float(np.degrees(lng)), radius=self.radius))

    def _same_sphere(self, point: GeoPoint) -> GeoPoint:
        point._plain_radius = self._plain_radius
        return point

    def _arc(self, distance: BASE_TYPE | UnitFloat) -> float:
        """Central angle in radians covered by distance on this sphere."""
        if isinstance(distance, UnitFloat):
            if self._plain_radius:
                raise TypeError(
                    f"cannot measure {distance!r} on a sphere of radius {self.radius} without a unit; "
                    "give the radius as a length unit"
                )
            return distance.to(NauticalMile) / self.sphere_radius
        return float(distance) / self.sphere_radius

    # -------------------------------- Great circle --------------------------------
    def distance(self, other: GeoPoint) -> float:
        """Great-circle distance to other using the haversine formula.

        Returns:
            float: Distance in the units of this point's sphere radius.
        """
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        return self.sphere_radius * _haversine(lat1, lon1, lat2, lon2)

    def bearing(self, other: GeoPoint) -> float:
        """Initial great-circle bearing towards other, in [0, 360).

        The bearing changes along a great circle, so the bearing from other
        back to this point is generally not this value plus 180.
        """
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        dlon = lon2 - lon1

        y = np.sin(dlon) * np.cos(lat2)
        x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
        return float((np.degrees(np.arctan2(y, x)) + 360) % 360)

    def final_bearing(self, other: GeoPoint) -> float:
        """Bearing on arrival at other, in [0, 360)."""
        return (other.bearing(self) + 180) % 360

    def midpoint(self, other: GeoPoint) -> GeoPoint:
        """Point halfway along the great circle between this point and other."""
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        dlon = lon2 - lon1

        bx = np.cos(lat2) * np.cos(dlon)
        by = np.cos(lat2) * np.sin(dlon)
        lat3 = np.arctan2(np.sin(lat1) + np.sin(lat2), np.sqrt((np.cos(lat1) + bx) ** 2 + by**2))
        lon3 = lon1 + np.arctan2(by, np.cos(lat1) + bx)
        return self._on_sphere(lat3, _wrap_pi(lon3))

    def destination(self, bearing: BASE_TYPE | UnitFloat, distance: BASE_TYPE | UnitFloat) -> GeoPoint:
        """Point reached after travelling distance along an initial bearing.

        Args:
            bearing: Initial bearing in degrees, or an angle unit.
            distance: Distance in radius units, or a length unit.

        Raises:
            TypeError: distance is a length unit but the sphere radius was
                given as a bare number, so the two cannot be related.
        """
        d = self._arc(distance)
        brng = np.radians(_degrees(bearing))
        lat1, lon1 = self._radians()

        lat2 = np.arcsin(_clip_unit(np.sin(lat1) * np.cos(d) + np.cos(lat1) * np.sin(d) * np.cos(brng)))
        lon2 = lon1 + np.arctan2(
            np.sin(brng) * np.sin(d) * np.cos(lat1),
            np.cos(d) - np.sin(lat1) * np.sin(lat2),
        )
        return self._on_sphere(lat2, _wrap_pi(lon2))

    def intersection(
        self,
        bearing1: BASE_TYPE | UnitFloat,
        other: GeoPoint,
        bearing2: BASE_TYPE | UnitFloat,
    ) -> GeoPoint | None:
        """Crossing of the great circles leaving this point and other.

        Args:
            bearing1: Bearing of the path leaving this point.
            other: Start of the second path.
            bearing2: Bearing of the path leaving other.

        Returns:
            GeoPoint | None: The intersection, or None when the points
            coincide, when both paths run along the same great circle, or
            when the paths diverge so that the crossing is ambiguous.
        """
        lat1, lon1 = self._radians()
        lat2, lon2 = other._radians()
        brng13 = np.radians(_degrees(bearing1))
        brng23 = np.radians(_degrees(bearing2))

        dist12 = 2 * np.arcsin(
            np.sqrt(
                np.clip(
                    np.sin((lat2 - lat1) / 2) ** 2
                    + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2,
                    0.0,
                    1.0,
                )
            )
        )
        if dist12 == 0:
            logger.debug("No intersection: %s and %s coincide", self, other)
            return None

        # bearings between the two points; NaN from rounding counts as 0
        with np.errstate(divide="ignore", invalid="ignore"):
            brng_a = _acos_or_zero((np.sin(lat2) - np.sin(lat1) * np.cos(dist12)) / (np.sin(dist12) * np.cos(lat1)))
            brng_b = _acos_or_zero((np.sin(lat1) - np.sin(lat2) * np.cos(dist12)) / (np.sin(dist12) * np.cos(lat2)))

        if np.sin(lon2 - lon1) > 0:
            brng12, brng21 = brng_a, PI2 - brng_b
        else:
            brng12, brng21 = PI2 - brng_a, brng_b

        alpha1 = (brng13 - brng12 + PI) % PI2 - PI  # angle 2-1-3
        alpha2 = (brng21 - brng23 + PI) % PI2 - PI  # angle 1-2-3
        sin1, sin2 = np.sin(alpha1), np.sin(alpha2)

        if abs(sin1) < EPSILON and abs(sin2) < EPSILON:
            logger.debug("No intersection: paths from %s and %s share a great circle", self, other)
            return None
        if sin1 * sin2 < 0:
            logger.debug("No intersection: paths from %s and %s diverge", self, other)
            return None

        alpha3 = np.arccos(_clip_unit(-np.cos(alpha1) * np.cos(alpha2) + sin1 * sin2 * np.cos(dist12)))
        dist13 = np.arctan2(np.sin(dist12) * sin1 * sin2, np.cos(alpha2) + np.cos(alpha1) * np.cos(alpha3))
        lat3 = np.arcsin(
            _clip_unit(np.sin(lat1) * np.cos(dist13) + np.cos(lat1) * np.sin(dist13) * np.cos(brng13))
        )
        dlon13 = np.arctan2(
            np.sin(brng13) * np.sin(dist13) * np.cos(lat1),
            np.cos(dist13) - np.sin(lat1) * np.sin(lat3),
        )
        return self._on_sphere(lat3, _wrap_pi(lon1 + dlon13))

    def cross_track(self, p1: GeoPoint, p2: GeoPoint) -> float:
        """Signed distance from this point to the great circle p1 → p2.

        Positive when this point lies to the right of the path, negative to
        the left.
        """
        lat1, lon1 = p1._radians()
        lat3, lon3 = self._radians()
        d13 = _haversine(lat1, lon1, lat3, lon3)
        brng13 = np.radians(p1.bearing(self))
        brng12 = np.radians(p1.bearing(p2))
        return float(np.arcsin(_clip_unit(np.sin(d13) * np.sin(brng13 - brng12)))) * self.sphere_radius

    def along_track(self, p1: GeoPoint, p2: GeoPoint) -> float:
        """Distance from p1 to the point of the path p1 → p2 closest to this point."""
        lat1, lon1 = p1._radians()
        lat3, lon3 = self._radians()
        d13 = _haversine(lat1, lon1, lat3, lon3)
        dxt = self.cross_track(p1, p2) / self.sphere_radius
        with np.errstate(divide="ignore", invalid="ignore"):
            ratio = np.nan_to_num(np.cos(d13) / np.cos(dxt), nan=1.0)
        return float(np.arccos(_clip_unit(ratio))) * self.sphere_radius

    def max_lat(self, bearing: BASE_TYPE | UnitFloat) -> float:
        """Highest latitude, in degrees, of the great circle leaving at bearing."""
        brng = np.radians(_degrees(bearing))
        lat = np.radians(self.lat)
        return float(np.degrees(np.arccos(_clip_unit(abs(np.sin(brng) * np.cos(lat))))))

    # -------------------------------- Rhumb line --------------------------------
    def rhumb_distance(self, other: GeoPoint) -> float:
        """Length of the constant-bearing path to other.

        Longitude differences above 180° take the shorter way across the
        antimeridian.
        """
        lat1, lat2 = np.radians(self.lat), np.radians(other.lat)
        dlat = lat2 - lat1
        dlon = np.radians(abs(other.lng - self.lng))
        if dlon > PI:
            dlon = PI2 - dlon

        _, q = _mercator_stretch(lat1, lat2)
        return float(np.sqrt(dlat * dlat + q * q * dlon * dlon)) * self.sphere_radius

    def rhumb_bearing(self, other: GeoPoint) -> float:
        """Constant bearing of the rhumb line towards other, in [0, 360)."""
        lat1, lat2 = np.radians(self.lat), np.radians(other.lat)
        dlon = np.radians(other.lng - self.lng)
        if abs(dlon) > PI:
            dlon = -(PI2 - dlon) if dlon > 0 else PI2 + dlon

        dpsi, _ = _mercator_stretch(lat1, lat2)
        return float((np.degrees(np.arctan2(dlon, dpsi)) + 360) % 360)

    def rhumb_destination(self, bearing: BASE_TYPE | UnitFloat, distance: BASE_TYPE | UnitFloat) -> GeoPoint:
        """Point reached after travelling distance on a constant bearing.

        A path that runs past a pole is reflected back onto the far side.
        Distances follow the same unit rules as destination().
        """
        d = self._arc(distance)
        brng = np.radians(_degrees(bearing))
        lat1, lon1 = self._radians()

        lat2 = lat1 + d * np.cos(brng)
        _, q = _mercator_stretch(lat1, lat2)
        dlon = d * np.sin(brng) / q if q else 0.0

        if abs(lat2) > PI / 2:
            lat2 = PI - lat2 if lat2 > 0 else -PI - lat2
        return self._on_sphere(lat2, _wrap_pi(lon1 + dlon))
