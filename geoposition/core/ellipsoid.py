"""Reference ellipsoids and the catalog of solar-system bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from ..errors import InvalidParameterError
from .constants import WGS84_A_M, WGS84_B_M

RADIUS_FORMS = ("geocentric", "meridian")


@dataclass(frozen=True, slots=True)
class Ellipsoid:
    """Oblate spheroid given by its semi-major axis ``a`` and semi-minor axis ``b`` (metres)."""

    a: float
    b: float
    a2: float = field(init=False, repr=False, compare=False)
    b2: float = field(init=False, repr=False, compare=False)
    e2: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        a = float(self.a)
        b = float(self.b)
        if not (np.isfinite(a) and a > 0.0):
            raise InvalidParameterError(f"semi-major axis must be > 0, got {self.a!r}")
        if not (np.isfinite(b) and b > 0.0):
            raise InvalidParameterError(f"semi-minor axis must be > 0, got {self.b!r}")

        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "a2", a * a)
        object.__setattr__(self, "b2", b * b)
        object.__setattr__(self, "e2", (a * a - b * b) / (a * a))

    @classmethod
    def from_axis(cls, a: float, b: float) -> "Ellipsoid":
        return cls(a, b)

    def meridian_radius_at(self, rad_lat: float) -> float:
        """Radius of curvature in the meridian plane at ``rad_lat``."""
        sin_lat = np.sin(rad_lat)
        return float(self.a * (1.0 - self.e2) / (1.0 - self.e2 * sin_lat * sin_lat) ** 1.5)

    def geocentric_radius_at(self, rad_lat: float) -> float:
        """Distance from the centre to the surface point at geodetic latitude ``rad_lat``."""
        cos2 = np.cos(rad_lat) ** 2
        sin2 = np.sin(rad_lat) ** 2
        num = self.a2 * self.a2 * cos2 + self.b2 * self.b2 * sin2
        den = self.a2 * cos2 + self.b2 * sin2
        return float(np.sqrt(num / den))

    def radius_at(self, rad_lat: float, form: str = "geocentric") -> float:
        if form == "geocentric":
            return self.geocentric_radius_at(rad_lat)
        if form == "meridian":
            return self.meridian_radius_at(rad_lat)
        raise InvalidParameterError(f"Unknown radius form {form!r}; expected one of {RADIUS_FORMS}")

    def circumference_a(self) -> float:
        return float(2.0 * np.pi * self.a)

    def circumference_b(self) -> float:
        return float(2.0 * np.pi * self.b)


EARTH = Ellipsoid(WGS84_A_M, WGS84_B_M)
SUN = Ellipsoid(1392500000.0, 1392500000.0)
MERCURY = Ellipsoid(2439640.0, 2439640.0)
VENUS = Ellipsoid(6051590.0, 6051590.0)
MOON = Ellipsoid(3476000.0, 3476000.3142)
MARS = Ellipsoid(3399200.0, 3399200.0)
JUPITER = Ellipsoid(71492680.0, 71492680.0)
SATURN = Ellipsoid(60267140.0, 60267140.0)
URANUS = Ellipsoid(25557250.0, 25557250.0)
NEPTUNE = Ellipsoid(24766360.0, 24766360.0)
PLUTO = Ellipsoid(1148070.0, 1148070.0)

BODIES = MappingProxyType(
    {
        "EARTH": EARTH,
        "SUN": SUN,
        "MERCURY": MERCURY,
        "VENUS": VENUS,
        "MOON": MOON,
        "MARS": MARS,
        "JUPITER": JUPITER,
        "SATURN": SATURN,
        "URANUS": URANUS,
        "NEPTUNE": NEPTUNE,
        "PLUTO": PLUTO,
    }
)


def ellipsoid_by_name(name: str) -> Ellipsoid:
    key = str(name).strip().upper()
    try:
        return BODIES[key]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown body {name!r}; expected one of {', '.join(BODIES)}"
        ) from None
