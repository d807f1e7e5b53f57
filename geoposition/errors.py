"""Exception types raised by the geodesy routines."""

from __future__ import annotations


class GeoError(Exception):
    """Base class for all geoposition errors."""


class InvalidParameterError(GeoError, ValueError):
    """An argument lies outside the domain an operation accepts."""


class ConvergenceError(GeoError, ArithmeticError):
    """The ECEF-to-geodetic solver did not settle within its iteration cap."""

    def __init__(self, message: str, iterations: int):
        super().__init__(message)
        self.iterations = iterations
