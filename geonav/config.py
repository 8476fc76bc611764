"""Global constants and numeric type definitions for geonav.

This module centralises the handful of values every other module agrees on:
the default sphere radius, the default coordinate template and the tolerance
used to detect degenerate great-circle configurations.

Constants:
    EARTH_RADIUS: Mean Earth radius in nautical miles. Points without an
                  explicit radius live on a sphere of this size, and every
                  distance they return is expressed in the same unit.
    DEFAULT_FORMAT: Coordinate template used when neither the caller nor the
                    point supplies one (degrees and decimal minutes).
    EPSILON: Threshold below which a sine is treated as zero.

Type Definitions:
    BASE_TYPE: Numeric types accepted as raw coordinates. NumPy scalars are
               included because the trigonometry in geonav.geo runs on NumPy.

Example:
    >>> from geonav.config import EARTH_RADIUS
    >>> EARTH_RADIUS
    3440.0
"""

from numpy import floating

BASE_TYPE = int | float | floating

EARTH_RADIUS = 3440.0  # NM

DEFAULT_FORMAT = "%yd2°%ym2.1'%yc %xd3°%xm2.1'%xc"

EPSILON = 1e-12
