"""
Tests for the JSON configuration model.
"""

import json
import os
import tempfile
import unittest

from geoposition.config import FormattingConfig, GeoConfig, SolverConfig, load_config
from geoposition.core.ellipsoid import EARTH, MARS
from geoposition.errors import InvalidParameterError


class TestDefaults(unittest.TestCase):
    """Test default configuration values."""

    def test_defaults(self):
        """Test that no path gives the defaults."""
        cfg = load_config(None)
        self.assertEqual(cfg.ellipsoid, "EARTH")
        self.assertIs(cfg.body(), EARTH)
        self.assertEqual(cfg.solver.tolerance, 0.001)
        self.assertEqual(cfg.solver.max_iterations, 50)
        self.assertEqual(cfg.formatting.style, "dms")
        self.assertEqual(cfg.formatting.decimal_precision, 5)

    def test_solver_kwargs(self):
        """Test the keyword arguments handed to the solver."""
        self.assertEqual(SolverConfig().as_kwargs(), {"tolerance": 0.001, "max_iterations": 50})

    def test_dict_round_trip(self):
        """Test from_dict(to_dict())."""
        cfg = GeoConfig(ellipsoid="MARS", solver=SolverConfig(1e-6, 20), formatting=FormattingConfig(3, "decimal"))
        self.assertEqual(GeoConfig.from_dict(cfg.to_dict()), cfg)


class TestValidation(unittest.TestCase):
    """Test rejected values."""

    def test_bad_solver(self):
        """Test non-positive tolerance and iteration cap."""
        with self.assertRaises(InvalidParameterError):
            SolverConfig(tolerance=0.0)
        with self.assertRaises(InvalidParameterError):
            SolverConfig(max_iterations=0)

    def test_bad_formatting(self):
        """Test unknown style and negative precision."""
        with self.assertRaises(InvalidParameterError):
            FormattingConfig(style="utm")
        with self.assertRaises(InvalidParameterError):
            FormattingConfig(decimal_precision=-1)

    def test_unknown_body(self):
        """Test an unknown ellipsoid name."""
        with self.assertRaises(InvalidParameterError):
            GeoConfig(ellipsoid="VULCAN")


class TestLoadConfig(unittest.TestCase):
    """Test loading configuration files."""

    def setUp(self):
        """Create a scratch directory."""
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _write(self, name, text):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_load_json(self):
        """Test a partial JSON file merged over the defaults."""
        path = self._write(
            "geo.json",
            json.dumps({"ellipsoid": "mars", "solver": {"max_iterations": 10}, "formatting": {"style": "decimal"}}),
        )
        cfg = load_config(path)
        self.assertIs(cfg.body(), MARS)
        self.assertEqual(cfg.solver.max_iterations, 10)
        self.assertEqual(cfg.solver.tolerance, 0.001)
        self.assertEqual(cfg.formatting.style, "decimal")

    def test_missing_file(self):
        """Test a path that does not exist."""
        with self.assertRaises(FileNotFoundError):
            load_config(os.path.join(self.tmp.name, "missing.json"))

    def test_wrong_suffix(self):
        """Test that non-JSON files are rejected."""
        path = self._write("geo.yaml", "ellipsoid: EARTH\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_non_object_root(self):
        """Test that the JSON root must be an object."""
        path = self._write("geo.json", "[1, 2, 3]")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_invalid_values(self):
        """Test that invalid values in the file are rejected."""
        path = self._write("geo.json", json.dumps({"solver": {"tolerance": -1}}))
        with self.assertRaises(InvalidParameterError):
            load_config(path)


if __name__ == "__main__":
    unittest.main()
