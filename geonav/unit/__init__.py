"""Type-safe units for angles and lengths.

geonav works in plain degrees and in the units of the sphere radius, but
callers may attach units to the values they pass in. A bearing can be given
as Degree(45) or Radian(0.785), a distance as Kilometer(12) and a radius as
Kilometer(6371); GeoPoint converts them before doing any trigonometry.

Modules:
    - unit_base: Unit class with family management
    - unit_float: UnitFloat, float-based units stored in SI
    - unit_angle: Radian (root), Degree
    - unit_distance: Meter (root), Kilometer, NauticalMile, StatuteMile

Example:
    >>> from geonav.unit import Degree, Kilometer, NauticalMile
    >>> Kilometer(1.852).to(NauticalMile)
    1.0
    >>> Degree(90) + Kilometer(1)
    Traceback (most recent call last):
    ...
    TypeError: incompatible units: Radian and Kilometer
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter, NauticalMile, StatuteMile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Length units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "StatuteMile",
    "Length",
]
