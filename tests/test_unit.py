"""
Tests for the angle and length unit system.
"""

import math
import unittest

from geonav.unit import Degree, Kilometer, Meter, NauticalMile, Radian, StatuteMile


class TestUnitFamilies(unittest.TestCase):
    """Test family resolution and cross-family protection."""

    def test_family_roots(self):
        """Test that every unit resolves to its family root."""
        self.assertIs(Degree.ROOT, Radian)
        self.assertIs(Radian.ROOT, Radian)
        self.assertIs(NauticalMile.ROOT, Meter)
        self.assertIs(StatuteMile.ROOT, Meter)

    def test_mixing_families_raises(self):
        """Test that angles and lengths cannot be combined."""
        with self.assertRaises(TypeError):
            Degree(90) + Kilometer(1)
        with self.assertRaises(TypeError):
            Kilometer(1).to(Degree)

    def test_multiplying_units_raises(self):
        """Test that a unit can only be scaled by a plain number."""
        with self.assertRaises(TypeError):
            Kilometer(1) * Meter(2)


class TestConversions(unittest.TestCase):
    """Test conversions within a family."""

    def test_si_storage(self):
        """Test that values are stored in SI units."""
        self.assertEqual(float(NauticalMile(1)), 1852.0)
        self.assertEqual(float(Kilometer(2)), 2000.0)
        self.assertAlmostEqual(float(Degree(180)), math.pi)

    def test_to(self):
        """Test conversion to plain numbers in another unit."""
        self.assertAlmostEqual(Degree(180).to(Radian), math.pi)
        self.assertAlmostEqual(StatuteMile(1).to(Kilometer), 1.609344)
        self.assertAlmostEqual(Kilometer(18.52).to(NauticalMile), 10.0)

    def test_as_unit_keeps_type(self):
        """Test conversion that keeps the unit type."""
        leg = Kilometer(1.852).as_unit(NauticalMile)
        self.assertIsInstance(leg, NauticalMile)
        self.assertAlmostEqual(leg.to(NauticalMile), 1.0)


class TestArithmetic(unittest.TestCase):
    """Test arithmetic inside a family."""

    def test_add_and_subtract(self):
        """Test addition and subtraction across units of one family."""
        total = Kilometer(1) + Meter(500)
        self.assertIsInstance(total, Kilometer)
        self.assertAlmostEqual(total.to(Kilometer), 1.5)
        self.assertAlmostEqual((Kilometer(1) - Meter(250)).to(Meter), 750.0)

    def test_scale(self):
        """Test scaling by plain numbers."""
        self.assertAlmostEqual((Kilometer(2) * 3).to(Kilometer), 6.0)
        self.assertAlmostEqual((3 * Kilometer(2)).to(Kilometer), 6.0)
        self.assertAlmostEqual((Kilometer(6) / 4).to(Kilometer), 1.5)
        self.assertAlmostEqual((-Degree(30)).to(Degree), -30.0)

    def test_comparison(self):
        """Test ordering within a family."""
        self.assertTrue(NauticalMile(1) > Kilometer(1))
        self.assertTrue(Meter(10) <= Meter(10))
        with self.assertRaises(TypeError):
            Meter(1) < Degree(1)

    def test_string_forms(self):
        """Test human readable output."""
        self.assertEqual(str(Kilometer(5)), "5.0 km")
        self.assertEqual(repr(Kilometer(5)), "5 km (= 5000 SI)")


if __name__ == '__main__':
    unittest.main()
