"""Horizon visibility on the local sphere of a position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .position import GeoPosition


@dataclass(frozen=True, slots=True)
class HorizonAltitude:
    altitude: float
    distance: float


def tangent_points(px: float, py: float, r: float):
    """Points where the two tangents from ``(px, py)`` touch the circle of radius ``r`` at the origin.

    With ``d = |P|``, ``a = asin(r / d)`` is the half-angle the circle subtends at
    P and ``b = atan2(py, px)``; the tangents leave P at ``b + pi - a`` and
    ``b + pi + a`` and have length ``sqrt(d^2 - r^2)``.

    Returns None when P lies inside the circle.
    """
    p = np.array([px, py], dtype=float)
    d = float(np.hypot(px, py))
    if d < r:
        return None

    a = np.arcsin(r / d)
    b = np.arctan2(py, px)
    length = d * np.cos(a)

    points = []
    for theta in (b + np.pi - a, b + np.pi + a):
        points.append(p + length * np.array([np.cos(theta), np.sin(theta)], dtype=float))
    return points[0], points[1]


def distance_to_horizon(position: "GeoPosition") -> float | None:
    """Straight-line range from ``position`` to its horizon, in metres.

    The ECEF point is laid into the meridian plane as (distance from the polar
    axis, height along it) and tangents are drawn to the circle of the
    position's geocentric radius. Observers below that circle have no horizon.
    """
    x, y, z = position.to_vec3()
    px = float(np.hypot(x, y))
    py = float(z)
    r = position.radius

    if px * px + py * py < r * r:
        return None

    first, _ = tangent_points(px, py, r)
    return float(np.hypot(first[0] - px, first[1] - py))


def altitude_above_horizon(position: "GeoPosition", distance: float) -> HorizonAltitude:
    """Lowest target altitude still visible at ``distance`` metres from ``position``.

    ``HorizonAltitude.distance`` is the observer's own horizon range. Targets
    inside that range are visible from the ground up, so their altitude is 0.
    """
    R = position.radius
    alt = position.altitude

    own = alt * alt + 2.0 * R * alt
    d1 = float(np.sqrt(own)) if own > 0.0 else 0.0
    if distance < d1:
        return HorizonAltitude(altitude=0.0, distance=d1)

    d0 = distance - d1
    h1 = float(np.sqrt(d0 * d0 + R * R) - R)
    return HorizonAltitude(altitude=h1, distance=d1)
