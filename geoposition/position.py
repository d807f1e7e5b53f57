"""Immutable geodetic position with distance, bearing and ENU helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .core.constants import SOLVER_MAX_ITERATIONS, SOLVER_TOLERANCE
from .core.ellipsoid import EARTH, Ellipsoid
from .core.geodesy import (
    _ecef_from_trig,
    _enu_rows_from_trig,
    ecef_to_enu,
    ecef_to_geodetic,
    enu_to_ecef,
    to_range_0_2pi,
    to_range_pi,
)
from . import horizon
from .errors import InvalidParameterError


@dataclass(frozen=True, slots=True)
class GeoPosition:
    """A point given by latitude/longitude in degrees and altitude in metres.

    Altitude is measured along the local normal above ``ellipsoid``. Radians,
    sines and cosines of latitude and longitude and the local geocentric
    radius are computed once at construction.

    Example
    -------
    >>> p = GeoPosition(54.0, 8.125)
    >>> int(p.distance_to(GeoPosition(53.0, 8.125)))
    111075
    """

    latitude: float
    longitude: float
    altitude: float = 0.0
    ellipsoid: Ellipsoid = EARTH

    _rad_lat: float = field(init=False, repr=False, compare=False)
    _rad_lon: float = field(init=False, repr=False, compare=False)
    _sin_lat: float = field(init=False, repr=False, compare=False)
    _cos_lat: float = field(init=False, repr=False, compare=False)
    _sin_lon: float = field(init=False, repr=False, compare=False)
    _cos_lon: float = field(init=False, repr=False, compare=False)
    _radius: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        set_ = object.__setattr__
        set_(self, "latitude", float(self.latitude))
        set_(self, "longitude", float(self.longitude))
        set_(self, "altitude", float(self.altitude))

        rad_lat = float(np.deg2rad(self.latitude))
        rad_lon = float(np.deg2rad(self.longitude))
        set_(self, "_rad_lat", rad_lat)
        set_(self, "_rad_lon", rad_lon)
        set_(self, "_sin_lat", float(np.sin(rad_lat)))
        set_(self, "_cos_lat", float(np.cos(rad_lat)))
        set_(self, "_sin_lon", float(np.sin(rad_lon)))
        set_(self, "_cos_lon", float(np.cos(rad_lon)))
        set_(self, "_radius", self.ellipsoid.geocentric_radius_at(rad_lat))

    @classmethod
    def from_string(cls, value: str, ellipsoid: Ellipsoid = EARTH) -> "GeoPosition":
        """Parse ``"lat;lon;alt"`` as written by ``str(position)``."""
        parts = str(value).split(";")
        if len(parts) != 3:
            raise InvalidParameterError(f"Invalid position string: {value!r}")
        try:
            lat, lon, alt = (float(p) for p in parts)
        except ValueError:
            raise InvalidParameterError(f"Invalid position string: {value!r}") from None
        return cls(lat, lon, alt, ellipsoid)

    @classmethod
    def from_vec3(
        cls,
        ecef_xyz,
        ellipsoid: Ellipsoid = EARTH,
        *,
        tolerance: float = SOLVER_TOLERANCE,
        max_iterations: int = SOLVER_MAX_ITERATIONS,
    ) -> "GeoPosition":
        lat, lon, alt = ecef_to_geodetic(
            ecef_xyz,
            ellipsoid,
            tolerance=tolerance,
            max_iterations=max_iterations,
        )
        return cls(lat, lon, alt, ellipsoid)

    def __str__(self) -> str:
        return f"{self.latitude!r};{self.longitude!r};{self.altitude!r}"

    @property
    def radius(self) -> float:
        """Geocentric radius of the ellipsoid at this latitude."""
        return self._radius

    @property
    def rad_latitude(self) -> float:
        return self._rad_lat

    @property
    def rad_longitude(self) -> float:
        return self._rad_lon

    def to_vec3(self) -> np.ndarray:
        return _ecef_from_trig(
            self._sin_lat, self._cos_lat, self._sin_lon, self._cos_lon, self.altitude, self.ellipsoid
        )

    def to_local_transform(self) -> np.ndarray:
        return _enu_rows_from_trig(self._sin_lat, self._cos_lat, self._sin_lon, self._cos_lon)

    def to_global_transform(self) -> np.ndarray:
        return self.to_local_transform().T.copy()

    def to_relative_vec3(self, other: "GeoPosition") -> np.ndarray:
        """ENU offset of ``other`` as seen from this position."""
        return ecef_to_enu(self.to_vec3(), self.to_local_transform(), other.to_vec3())

    def from_relative_vec3(self, enu_xyz, **solver) -> "GeoPosition":
        ecef = enu_to_ecef(self.to_vec3(), self.to_local_transform(), enu_xyz)
        return GeoPosition.from_vec3(ecef, self.ellipsoid, **solver)

    def distance_to(self, other: "GeoPosition", ellipsoid: Ellipsoid | None = None) -> float:
        """Haversine distance on a sphere of this position's geocentric radius."""
        r = self._radius if ellipsoid is None else ellipsoid.geocentric_radius_at(self._rad_lat)

        lat_diff = abs(other._rad_lat - self._rad_lat)
        lon_diff = abs(other._rad_lon - self._rad_lon)
        sin_half_lat = np.sin(lat_diff / 2.0)
        sin_half_lon = np.sin(lon_diff / 2.0)

        a = sin_half_lat * sin_half_lat + self._cos_lat * other._cos_lat * sin_half_lon * sin_half_lon
        c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
        return float(r * c)

    def azimuth_to(self, other: "GeoPosition") -> float:
        """Initial great-circle bearing in radians, [0, 2*pi), clockwise from north."""
        lon_diff = other._rad_lon - self._rad_lon
        azimuth = np.arctan2(
            other._cos_lat * np.sin(lon_diff),
            self._cos_lat * other._sin_lat - self._sin_lat * other._cos_lat * np.cos(lon_diff),
        )
        return to_range_0_2pi(azimuth)

    def elevation_to(self, other: "GeoPosition") -> float:
        """Line-of-sight angle in radians, (-pi, pi]; positive when ``other`` is below."""
        x, y, z = self.to_relative_vec3(other)
        return to_range_pi(-np.arctan2(z, np.sqrt(x * x + y * y)))

    def extrapolate_vector(self, x: float, y: float, z: float) -> "GeoPosition":
        """Small-offset move by east ``x``, north ``y`` and up ``z`` metres."""
        angle_lat = y / self.ellipsoid.a
        angle_lon = x / (self._cos_lat * self.ellipsoid.b)
        return GeoPosition(
            self.latitude + float(np.rad2deg(angle_lat)),
            self.longitude + float(np.rad2deg(angle_lon)),
            self.altitude + z,
            self.ellipsoid,
        )

    def extrapolate_polar(self, distance: float, azimuth: float) -> "GeoPosition":
        """Travel ``distance`` metres along the great circle leaving at ``azimuth`` radians."""
        if distance < 0.0:
            raise InvalidParameterError(f"distance should be >= 0.0, but is {distance}")

        arc = distance / self.ellipsoid.meridian_radius_at(self._rad_lat)
        sin_arc = np.sin(arc)
        cos_arc = np.cos(arc)

        new_lat = np.arcsin(self._sin_lat * cos_arc + self._cos_lat * sin_arc * np.cos(azimuth))
        new_lon = self._rad_lon + np.arctan2(
            sin_arc * np.sin(azimuth),
            self._cos_lat * cos_arc - self._sin_lat * sin_arc * np.cos(azimuth),
        )
        return GeoPosition(float(np.rad2deg(new_lat)), float(np.rad2deg(new_lon)), self.altitude, self.ellipsoid)

    def center_with(self, other: "GeoPosition", altitude: float) -> "GeoPosition":
        """Mean of latitudes and longitudes; not the geodesic midpoint."""
        return GeoPosition(
            (self.latitude + other.latitude) / 2.0,
            (self.longitude + other.longitude) / 2.0,
            altitude,
            self.ellipsoid,
        )

    def distance_to_horizon(self) -> float | None:
        """Range to the horizon in metres, or None when below the reference surface."""
        return horizon.distance_to_horizon(self)

    def altitude_above_horizon(self, distance: float) -> horizon.HorizonAltitude:
        return horizon.altitude_above_horizon(self, distance)


def from_vec3(ecef_xyz, ellipsoid: Ellipsoid = EARTH, **solver) -> GeoPosition:
    return GeoPosition.from_vec3(ecef_xyz, ellipsoid, **solver)
