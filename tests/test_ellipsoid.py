"""
Tests for reference ellipsoids and the body catalog.
"""

import dataclasses
import unittest

import numpy as np

from geoposition.core.ellipsoid import (
    BODIES,
    EARTH,
    MARS,
    MOON,
    Ellipsoid,
    ellipsoid_by_name,
)
from geoposition.errors import InvalidParameterError


class TestEarth(unittest.TestCase):
    """Test the EARTH constant."""

    def test_axes(self):
        """Test the semi-major and semi-minor axes."""
        self.assertEqual(EARTH.a, 6378137.0)
        self.assertEqual(EARTH.b, 6356752.3142)

    def test_derived_values(self):
        """Test squared axes and first eccentricity squared."""
        self.assertEqual(EARTH.a2, 6378137.0 ** 2)
        self.assertEqual(EARTH.b2, 6356752.3142 ** 2)
        self.assertAlmostEqual(EARTH.e2, 0.00669438, places=8)

    def test_circumferences(self):
        """Test equatorial and polar circumferences."""
        self.assertAlmostEqual(EARTH.circumference_a(), 40075016.686, delta=1.0)
        self.assertAlmostEqual(EARTH.circumference_b(), 39940652.742, delta=1.0)


class TestRadius(unittest.TestCase):
    """Test the two radius forms."""

    def test_geocentric_radius_at_equator_and_pole(self):
        """Test the geocentric radius equals a at the equator and b at the pole."""
        self.assertAlmostEqual(EARTH.geocentric_radius_at(0.0), EARTH.a, delta=1e-6)
        self.assertAlmostEqual(EARTH.geocentric_radius_at(np.pi / 2.0), EARTH.b, delta=1e-6)

    def test_meridian_radius_at_equator_and_pole(self):
        """Test the meridian radius equals b^2/a at the equator and a^2/b at the pole."""
        self.assertAlmostEqual(EARTH.meridian_radius_at(0.0), EARTH.b2 / EARTH.a, delta=1e-6)
        self.assertAlmostEqual(EARTH.meridian_radius_at(np.pi / 2.0), EARTH.a2 / EARTH.b, delta=1e-6)

    def test_radius_at_selects_form(self):
        """Test that radius_at dispatches on the requested form."""
        lat = np.deg2rad(54.0)
        self.assertEqual(EARTH.radius_at(lat), EARTH.geocentric_radius_at(lat))
        self.assertEqual(EARTH.radius_at(lat, "geocentric"), EARTH.geocentric_radius_at(lat))
        self.assertEqual(EARTH.radius_at(lat, "meridian"), EARTH.meridian_radius_at(lat))

    def test_radius_at_unknown_form(self):
        """Test that an unknown radius form is rejected."""
        with self.assertRaises(InvalidParameterError):
            EARTH.radius_at(0.0, "polar")

    def test_sphere_radius_is_constant(self):
        """Test that both forms agree on a sphere."""
        for lat in (0.0, 0.5, 1.2):
            self.assertAlmostEqual(MARS.geocentric_radius_at(lat), MARS.a, delta=1e-6)
            self.assertAlmostEqual(MARS.meridian_radius_at(lat), MARS.a, delta=1e-6)


class TestConstruction(unittest.TestCase):
    """Test construction and validation."""

    def test_from_axis(self):
        """Test the alternate constructor and value equality."""
        e = Ellipsoid.from_axis(6378137.0, 6356752.3142)
        self.assertEqual(e, EARTH)
        self.assertEqual(hash(e), hash(EARTH))

    def test_non_positive_axes_rejected(self):
        """Test that zero, negative and non-finite axes are rejected."""
        for a, b in ((0.0, 1.0), (1.0, 0.0), (-5.0, 1.0), (1.0, -1.0), (float("nan"), 1.0), (1.0, float("inf"))):
            with self.subTest(a=a, b=b):
                with self.assertRaises(InvalidParameterError):
                    Ellipsoid(a, b)

    def test_invalid_parameter_is_value_error(self):
        """Test that InvalidParameterError can be caught as ValueError."""
        with self.assertRaises(ValueError):
            Ellipsoid(0.0, 0.0)

    def test_immutable(self):
        """Test that ellipsoids cannot be modified."""
        with self.assertRaises(dataclasses.FrozenInstanceError):
            EARTH.a = 1.0

    def test_sphere_has_zero_eccentricity(self):
        """Test e2 for a sphere."""
        self.assertEqual(Ellipsoid(1000.0, 1000.0).e2, 0.0)


class TestCatalog(unittest.TestCase):
    """Test the named body catalog."""

    def test_catalog_names(self):
        """Test that every solar-system body is present."""
        expected = {
            "EARTH", "SUN", "MERCURY", "VENUS", "MOON", "MARS",
            "JUPITER", "SATURN", "URANUS", "NEPTUNE", "PLUTO",
        }
        self.assertEqual(set(BODIES), expected)

    def test_catalog_is_read_only(self):
        """Test that the catalog mapping rejects writes."""
        with self.assertRaises(TypeError):
            BODIES["VULCAN"] = Ellipsoid(1.0, 1.0)

    def test_moon_literal_axes(self):
        """Test the MOON entry keeps its literal axes."""
        self.assertEqual(MOON.a, 3476000.0)
        self.assertEqual(MOON.b, 3476000.3142)

    def test_lookup_by_name(self):
        """Test case-insensitive lookup."""
        self.assertIs(ellipsoid_by_name("moon"), MOON)
        self.assertIs(ellipsoid_by_name(" Earth "), EARTH)

    def test_lookup_unknown_name(self):
        """Test that unknown names are rejected."""
        with self.assertRaises(InvalidParameterError):
            ellipsoid_by_name("vulcan")


if __name__ == "__main__":
    unittest.main()
