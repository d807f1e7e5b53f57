"""Configuration model for geoposition tools."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .core.constants import SOLVER_MAX_ITERATIONS, SOLVER_TOLERANCE
from .core.ellipsoid import Ellipsoid, ellipsoid_by_name
from .errors import InvalidParameterError

logger = logging.getLogger(__name__)

FORMAT_STYLES = ("dms", "decimal")


@dataclass(slots=True)
class SolverConfig:
    tolerance: float = SOLVER_TOLERANCE
    max_iterations: int = SOLVER_MAX_ITERATIONS

    def __post_init__(self):
        self.tolerance = float(self.tolerance)
        self.max_iterations = int(self.max_iterations)
        if self.tolerance <= 0.0:
            raise InvalidParameterError(f"solver.tolerance must be > 0, got {self.tolerance}")
        if self.max_iterations < 1:
            raise InvalidParameterError(f"solver.max_iterations must be >= 1, got {self.max_iterations}")

    def as_kwargs(self) -> dict[str, Any]:
        return {"tolerance": self.tolerance, "max_iterations": self.max_iterations}


@dataclass(slots=True)
class FormattingConfig:
    decimal_precision: int = 5
    style: str = "dms"

    def __post_init__(self):
        if self.style not in FORMAT_STYLES:
            raise InvalidParameterError(f"formatting.style must be one of {FORMAT_STYLES}, got {self.style!r}")
        if isinstance(self.decimal_precision, bool) or int(self.decimal_precision) < 0:
            raise InvalidParameterError(
                f"formatting.decimal_precision must be >= 0, got {self.decimal_precision!r}"
            )
        self.decimal_precision = int(self.decimal_precision)


@dataclass(slots=True)
class GeoConfig:
    ellipsoid: str = "EARTH"
    solver: SolverConfig = field(default_factory=SolverConfig)
    formatting: FormattingConfig = field(default_factory=FormattingConfig)

    def __post_init__(self):
        ellipsoid_by_name(self.ellipsoid)

    def body(self) -> Ellipsoid:
        return ellipsoid_by_name(self.ellipsoid)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeoConfig":
        return cls(
            ellipsoid=str(data.get("ellipsoid", "EARTH")),
            solver=SolverConfig(**data.get("solver", {})),
            formatting=FormattingConfig(**data.get("formatting", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config(path: str | Path | None) -> GeoConfig:
    if path is None:
        return GeoConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path.suffix.lower() != ".json":
        raise ValueError("Only JSON config files are supported")

    with config_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a JSON object")

    logger.debug("Loaded config from %s", config_path)
    return GeoConfig.from_dict(raw)
