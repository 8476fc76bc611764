"""Length units for distances and sphere radii.

Lengths are stored in meters (the SI unit). The nautical mile matters most
here: geonav's default sphere radius is expressed in nautical miles, so any
Length handed to a GeoPoint is converted to nautical miles before use.

Classes:
    Meter: Base length unit (SI).
    Kilometer: 1000 meters.
    NauticalMile: 1852 meters, one minute of latitude on the mean Earth.
    StatuteMile: 1609.344 meters.

Type Aliases:
    Length: Any length unit.

Example:
    >>> leg = Kilometer(18.52)
    >>> round(leg.to(NauticalMile), 6)
    10.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: Kilometer."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """Length unit: international nautical mile.

    The unit of geonav.config.EARTH_RADIUS and therefore of every distance
    returned by a GeoPoint that uses the default radius.
    """

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"


class StatuteMile(Meter):
    """Length unit: statute (land) mile."""

    SCALE_TO_SI = 1609.344
    SYMBOL = "mi"


Length = Meter | Kilometer | NauticalMile | StatuteMile
