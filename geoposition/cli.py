"""Command-line entrypoint for geoposition calculations."""

from __future__ import annotations

import argparse
import logging

import numpy as np

from .config import FORMAT_STYLES, load_config
from .core.ellipsoid import BODIES
from .errors import GeoError
from .formatting import (
    latitude_to_decimal_degrees,
    latitude_to_deg_min_sec,
    longitude_to_decimal_degrees,
    longitude_to_deg_min_sec,
)
from .position import GeoPosition

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geoposition", description="Geodetic position calculations")
    parser.add_argument("--config", default=None, help="Path to config JSON")
    parser.add_argument(
        "--ellipsoid",
        choices=sorted(BODIES),
        default=None,
        help="Reference body override",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("distance", help="Great-circle distance and initial azimuth")
    for name in ("lat1", "lon1", "lat2", "lon2"):
        p.add_argument(name, type=float)

    p = sub.add_parser("to-ecef", help="Geodetic to ECEF")
    for name in ("lat", "lon", "alt"):
        p.add_argument(name, type=float)

    p = sub.add_parser("from-ecef", help="ECEF to geodetic")
    for name in ("x", "y", "z"):
        p.add_argument(name, type=float)

    p = sub.add_parser("horizon", help="Horizon range, optionally the target altitude at a range")
    for name in ("lat", "lon", "alt"):
        p.add_argument(name, type=float)
    p.add_argument("--range", dest="range_m", type=float, default=None, help="Target range in metres")

    p = sub.add_parser("format", help="Display a latitude/longitude pair")
    p.add_argument("lat", type=float)
    p.add_argument("lon", type=float)
    p.add_argument("--style", choices=FORMAT_STYLES, default=None, help="Output style override")
    p.add_argument("--precision", type=int, default=None, help="Decimal precision override")
    return parser


def _run(args, cfg) -> None:
    body = cfg.body()

    if args.command == "distance":
        p1 = GeoPosition(args.lat1, args.lon1, 0.0, body)
        p2 = GeoPosition(args.lat2, args.lon2, 0.0, body)
        print(f"distance_m: {p1.distance_to(p2):.3f}")
        print(f"azimuth_deg: {np.rad2deg(p1.azimuth_to(p2)):.6f}")

    elif args.command == "to-ecef":
        x, y, z = GeoPosition(args.lat, args.lon, args.alt, body).to_vec3()
        print(f"x_m: {x:.3f}")
        print(f"y_m: {y:.3f}")
        print(f"z_m: {z:.3f}")

    elif args.command == "from-ecef":
        pos = GeoPosition.from_vec3([args.x, args.y, args.z], body, **cfg.solver.as_kwargs())
        print(f"lat_deg: {pos.latitude:.9f}")
        print(f"lon_deg: {pos.longitude:.9f}")
        print(f"alt_m: {pos.altitude:.3f}")

    elif args.command == "horizon":
        pos = GeoPosition(args.lat, args.lon, args.alt, body)
        horizon_m = pos.distance_to_horizon()
        if horizon_m is None:
            print("horizon_m: none (observer below the reference surface)")
        else:
            print(f"horizon_m: {horizon_m:.3f}")
        if args.range_m is not None:
            needed = pos.altitude_above_horizon(args.range_m)
            print(f"target_altitude_m: {needed.altitude:.3f}")
            print(f"own_horizon_m: {needed.distance:.3f}")

    elif args.command == "format":
        style = args.style or cfg.formatting.style
        if style == "decimal":
            precision = cfg.formatting.decimal_precision if args.precision is None else args.precision
            print(latitude_to_decimal_degrees(args.lat, precision))
            print(longitude_to_decimal_degrees(args.lon, precision))
        else:
            print(latitude_to_deg_min_sec(args.lat))
            print(longitude_to_deg_min_sec(args.lon))


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(args.config)
        if args.ellipsoid is not None:
            cfg.ellipsoid = args.ellipsoid
        logger.debug("Running %s on %s", args.command, cfg.ellipsoid)
        _run(args, cfg)
    except (GeoError, FileNotFoundError, ValueError) as exc:
        parser.exit(2, f"[error] {exc}\n")


if __name__ == "__main__":
    main()
