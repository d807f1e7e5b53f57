"""Display strings for latitudes and longitudes.

Values are truncated, not rounded, to the displayed precision. A small guard
absorbs binary representation noise so that e.g. 8.1 degrees renders as
``008° 06' 00''`` rather than ``008° 05' 59''``.
"""

from __future__ import annotations

from .errors import InvalidParameterError

_TRUNCATION_GUARD = 1e-9


def _hemisphere(value: float, positive: str, negative: str) -> str:
    return negative if value < 0.0 else positive


def _deg_min_sec(value: float) -> tuple[int, int, int]:
    total_seconds = int(abs(float(value)) * 3600.0 + _TRUNCATION_GUARD)
    degrees, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return degrees, minutes, seconds


def _check_precision(precision) -> int:
    if precision is None:
        raise InvalidParameterError("precision is required for decimal-degree formatting")
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidParameterError(f"precision must be a non-negative integer, got {precision!r}")
    return precision


def _decimal(value: float, precision: int, width: int) -> str:
    scale = 10**precision
    scaled = int(abs(float(value)) * scale + _TRUNCATION_GUARD)
    whole, frac = divmod(scaled, scale)
    if precision == 0:
        return f"{whole:0{width}d}°"
    return f"{whole:0{width}d}.{frac:0{precision}d}°"


def latitude_to_deg_min_sec(lat: float) -> str:
    d, m, s = _deg_min_sec(lat)
    return f"{d:02d}° {m:02d}' {s:02d}'' {_hemisphere(lat, 'N', 'S')}"


def longitude_to_deg_min_sec(lon: float) -> str:
    d, m, s = _deg_min_sec(lon)
    return f"{d:03d}° {m:02d}' {s:02d}'' {_hemisphere(lon, 'E', 'W')}"


def latitude_to_decimal_degrees(lat: float, precision: int | None = None) -> str:
    p = _check_precision(precision)
    return f"{_decimal(lat, p, 2)} {_hemisphere(lat, 'N', 'S')}"


def longitude_to_decimal_degrees(lon: float, precision: int | None = None) -> str:
    p = _check_precision(precision)
    return f"{_decimal(lon, p, 3)} {_hemisphere(lon, 'E', 'W')}"
