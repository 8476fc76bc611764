"""Angular units for bearings and coordinates.

Angles are stored in radians (the SI unit) and may be written in radians or
degrees. geonav accepts either wherever a bearing is expected; plain numbers
are read as degrees.

Classes:
    Radian: Base angular unit (SI).
    Degree: 1/360 of a full turn.

Type Aliases:
    Angle: Any angular unit (Radian | Degree).

Example:
    >>> heading = Degree(45)
    >>> print(heading)
    45.0 °
    >>> round(float(heading), 4)
    0.7854
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree, converted to radians for storage.

    Example:
        >>> Degree(180).to(Radian) == pi
        True
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
