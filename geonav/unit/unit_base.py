"""Unit family foundation for type-safe angles and lengths.

Every quantity geonav accepts with a unit attached (bearings, distances,
sphere radii) derives from the Unit class below. Units are grouped into
families: a family is identified by its ROOT class, the first ancestor that
declares IS_FAMILY_ROOT. Units of one family convert into each other freely,
while mixing families (adding a Degree to a Meter, or passing a Kilometer
where a bearing is expected) raises TypeError.

Classes:
    Unit: Base class for all unit types with automatic family resolution.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class NauticalMile(Length):
    ...     pass
    >>> NauticalMile.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Concrete units inherit from UnitFloat rather than from this class
    directly.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class as a family root.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the family ROOT of a newly created unit class.

        The ROOT is the class itself when it declares IS_FAMILY_ROOT, else
        the nearest ancestor that does, else the class itself.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Ensure unit_type belongs to the same family as this class.

        Raises:
            TypeError: If the two unit types measure different quantities.
        """
        if cls.ROOT is not getattr(unit_type, "ROOT", None):
            msg = f"incompatible units: {cls.ROOT.__name__} and {unit_type.__name__}"
            raise TypeError(msg)
