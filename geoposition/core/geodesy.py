"""Geodetic <-> ECEF <-> local East-North-Up conversions on an ellipsoid."""

from __future__ import annotations

import logging

import numpy as np

from ..errors import ConvergenceError
from .constants import SOLVER_MAX_ITERATIONS, SOLVER_TOLERANCE, TWO_PI
from .ellipsoid import EARTH, Ellipsoid
from .vectors import as_vec3, vec3

logger = logging.getLogger(__name__)


def prime_vertical_radius(sin_lat: float, ellipsoid: Ellipsoid) -> float:
    return float(ellipsoid.a / np.sqrt(1.0 - ellipsoid.e2 * sin_lat * sin_lat))


def _ecef_from_trig(sin_lat, cos_lat, sin_lon, cos_lon, alt_m, ellipsoid: Ellipsoid) -> np.ndarray:
    V = prime_vertical_radius(sin_lat, ellipsoid)
    x = (V + alt_m) * cos_lat * cos_lon
    y = (V + alt_m) * cos_lat * sin_lon
    z = ((1.0 - ellipsoid.e2) * V + alt_m) * sin_lat
    return vec3(x, y, z)


def _enu_rows_from_trig(sin_lat, cos_lat, sin_lon, cos_lon) -> np.ndarray:
    east = [-sin_lon, cos_lon, 0.0]
    north = [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat]
    up = [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    return np.array([east, north, up], dtype=float)


def geodetic_to_ecef(lat_deg: float, lon_deg: float, alt_m: float, ellipsoid: Ellipsoid = EARTH) -> np.ndarray:
    lat = np.deg2rad(float(lat_deg))
    lon = np.deg2rad(float(lon_deg))
    return _ecef_from_trig(np.sin(lat), np.cos(lat), np.sin(lon), np.cos(lon), float(alt_m), ellipsoid)


def ecef_to_geodetic(
    ecef_xyz,
    ellipsoid: Ellipsoid = EARTH,
    *,
    tolerance: float = SOLVER_TOLERANCE,
    max_iterations: int = SOLVER_MAX_ITERATIONS,
) -> tuple[float, float, float]:
    """Invert :func:`geodetic_to_ecef` by fixed-point iteration.

    Latitude starts at the equator and altitude at the surface; longitude is
    exact and computed once. The loop ends when the latitude change (radians)
    and the altitude change (metres) both fall to ``tolerance``.

    Points on the polar axis are resolved directly: longitude is
    ``atan2(0, 0) == 0`` and latitude is +/-90 by the sign of z.

    Returns
    -------
    (lat_deg, lon_deg, alt_m)

    Raises
    ------
    ConvergenceError
        If ``max_iterations`` passes do not settle, an iterate stops being
        finite, or the point is the ellipsoid centre.
    """
    x, y, z = as_vec3(ecef_xyz)
    e2 = ellipsoid.e2

    lon = np.arctan2(y, x)
    xy = np.sqrt(x * x + y * y)

    if xy == 0.0:
        if z == 0.0:
            raise ConvergenceError("Geodetic latitude is undefined at the ellipsoid centre", iterations=0)
        lat_deg = 90.0 if z > 0.0 else -90.0
        return lat_deg, float(np.rad2deg(lon)), float(abs(z) - ellipsoid.b)

    lat = 0.0
    alt = 0.0
    sin_lat = 0.0
    for iteration in range(1, int(max_iterations) + 1):
        old_lat = lat
        old_alt = alt

        V = prime_vertical_radius(sin_lat, ellipsoid)
        lat = np.arctan((z - alt * e2 * sin_lat) / (xy * (1.0 - e2)))
        sin_lat = np.sin(lat)
        alt = xy / np.cos(lat) - V

        if not (np.isfinite(lat) and np.isfinite(alt)):
            logger.debug("ECEF solver diverged at iteration %d for %s", iteration, (x, y, z))
            raise ConvergenceError(
                f"Non-finite iterate after {iteration} iterations for ECEF ({x}, {y}, {z})",
                iterations=iteration,
            )
        if abs(old_lat - lat) <= tolerance and abs(old_alt - alt) <= tolerance:
            logger.debug("ECEF solver converged after %d iterations", iteration)
            return float(np.rad2deg(lat)), float(np.rad2deg(lon)), float(alt)

    logger.debug("ECEF solver hit its cap of %d iterations for %s", max_iterations, (x, y, z))
    raise ConvergenceError(
        f"No convergence within {max_iterations} iterations for ECEF ({x}, {y}, {z})",
        iterations=int(max_iterations),
    )


def local_transform(lat_deg: float, lon_deg: float) -> np.ndarray:
    """Rotation taking ECEF vectors into the East-North-Up frame at (lat, lon)."""
    lat = np.deg2rad(float(lat_deg))
    lon = np.deg2rad(float(lon_deg))
    return _enu_rows_from_trig(np.sin(lat), np.cos(lat), np.sin(lon), np.cos(lon))


def ecef_to_enu(origin_ecef, rotation, ecef_xyz) -> np.ndarray:
    return np.asarray(rotation, dtype=float) @ (as_vec3(ecef_xyz) - as_vec3(origin_ecef))


def enu_to_ecef(origin_ecef, rotation, enu_xyz) -> np.ndarray:
    return as_vec3(origin_ecef) + np.asarray(rotation, dtype=float).T @ as_vec3(enu_xyz)


def to_range_0_2pi(angle: float) -> float:
    out = float(np.mod(angle, TWO_PI))
    # np.mod can round a tiny negative input up to exactly 2*pi.
    return 0.0 if out >= TWO_PI else out


def to_range_pi(angle: float) -> float:
    """Normalize to (-pi, pi]."""
    out = to_range_0_2pi(angle)
    return out - TWO_PI if out > np.pi else out
