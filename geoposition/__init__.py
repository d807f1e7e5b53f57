"""Geodetic positions on a reference ellipsoid."""

from .config import GeoConfig, load_config
from .core.ellipsoid import (
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
from .errors import ConvergenceError, GeoError, InvalidParameterError
from .formatting import (
    latitude_to_decimal_degrees,
    latitude_to_deg_min_sec,
    longitude_to_decimal_degrees,
    longitude_to_deg_min_sec,
)
from .horizon import HorizonAltitude
from .position import GeoPosition, from_vec3

__all__ = [
    "GeoConfig",
    "load_config",
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
    "ConvergenceError",
    "GeoError",
    "InvalidParameterError",
    "latitude_to_decimal_degrees",
    "latitude_to_deg_min_sec",
    "longitude_to_decimal_degrees",
    "longitude_to_deg_min_sec",
    "HorizonAltitude",
    "GeoPosition",
    "from_vec3",
]
