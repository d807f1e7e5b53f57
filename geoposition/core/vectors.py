"""3-vector and 3x3 matrix helpers on top of numpy."""

from __future__ import annotations

import numpy as np

from ..errors import InvalidParameterError


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=float)


def as_vec3(v) -> np.ndarray:
    out = np.asarray(v, dtype=float).reshape(-1)
    if out.shape != (3,):
        raise InvalidParameterError(f"Expected a 3-vector, got shape {np.shape(v)}")
    return out


def from_polar(pitch: float, yaw: float, distance: float) -> np.ndarray:
    """Local offset for a line of sight; positive pitch points below the horizontal."""
    cos_pitch_dist = distance * np.cos(pitch)
    sin_pitch_dist = -distance * np.sin(pitch)
    return vec3(cos_pitch_dist * np.cos(yaw), cos_pitch_dist * np.sin(yaw), sin_pitch_dist)


def from_string(value: str) -> np.ndarray:
    parts = str(value).split(";")
    if len(parts) != 3:
        raise InvalidParameterError(f"Invalid vector string: {value!r}")
    try:
        return vec3(*(float(p) for p in parts))
    except ValueError:
        raise InvalidParameterError(f"Invalid vector string: {value!r}") from None


def to_string(v) -> str:
    x, y, z = as_vec3(v)
    return f"{float(x)!r};{float(y)!r};{float(z)!r}"


def matrix3x3(rows) -> np.ndarray:
    m = np.asarray(rows, dtype=float)
    if m.shape != (3, 3):
        raise InvalidParameterError(f"Expected a 3x3 matrix, got shape {m.shape}")
    return m


def transpose(m) -> np.ndarray:
    return matrix3x3(m).T.copy()


def mat_vec(m, v) -> np.ndarray:
    return matrix3x3(m) @ as_vec3(v)
