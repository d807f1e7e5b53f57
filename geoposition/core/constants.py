"""Numeric constants shared by the geodesy core."""

from __future__ import annotations

import numpy as np

WGS84_A_M = 6378137.0
WGS84_B_M = 6356752.3142

# Solver stops once both |dlat| (rad) and |dalt| (m) drop to this value.
SOLVER_TOLERANCE = 0.001
SOLVER_MAX_ITERATIONS = 50

TWO_PI = 2.0 * np.pi
