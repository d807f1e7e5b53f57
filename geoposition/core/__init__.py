"""Ellipsoids, vector helpers and coordinate conversions."""

from .ellipsoid import (
    BODIES,
    EARTH,
    JUPITER,
    MARS,
    MERCURY,
    MOON,
    NEPTUNE,
    PLUTO,
    SATURN,
    SUN,
    URANUS,
    VENUS,
    Ellipsoid,
    ellipsoid_by_name,
)
from .geodesy import (
    ecef_to_enu,
    ecef_to_geodetic,
    enu_to_ecef,
    geodetic_to_ecef,
    local_transform,
)

__all__ = [
    "BODIES",
    "EARTH",
    "SUN",
    "MERCURY",
    "VENUS",
    "MOON",
    "MARS",
    "JUPITER",
    "SATURN",
    "URANUS",
    "NEPTUNE",
    "PLUTO",
    "Ellipsoid",
    "ellipsoid_by_name",
    "ecef_to_enu",
    "ecef_to_geodetic",
    "enu_to_ecef",
    "geodetic_to_ecef",
    "local_transform",
]
