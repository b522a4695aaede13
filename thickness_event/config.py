"""thickness_event/config.py
Author: Sabin Thapa <sthapa3@kent.edu>

Run configuration as frozen dataclasses.

`EventConfig` is what an `Event` needs (grid + reduced thickness);
`CollisionConfig` drives the collider that produces the two nuclei.
Both validate eagerly: a bad value is a `ConfigurationError` at construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from .errors import ConfigurationError


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}")


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_flag(key: str, value: Any) -> bool:
    """Run-card boolean: bool, 0/1, or true/false, yes/no, on/off."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE:
            return True
        if word in _FALSE:
            return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")


def _parse_number(key: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {value!r}") from None


@dataclass(frozen=True)
class EventConfig:
    """Per-event grid and reduced-thickness settings.

    normalization      overall factor applied to the reduced thickness
    grid_step          cell width dxy [fm]
    grid_max           requested half extent of the grid [fm]
    reduced_thickness  generalized-mean exponent p
    ncoll              collision-count accumulation (not implemented, ignored)
    """
    normalization: float = 1.0
    grid_step: float = 0.2
    grid_max: float = 10.0
    reduced_thickness: float = 0.0
    ncoll: bool = False

    def __post_init__(self):
        _require_positive("normalization", self.normalization)
        _require_positive("grid-step", self.grid_step)
        _require_positive("grid-max", self.grid_max)
        if not math.isfinite(self.reduced_thickness):
            raise ConfigurationError(
                f"reduced-thickness must be finite, got {self.reduced_thickness!r}"
            )
        if math.ceil(2.0 * self.grid_max / self.grid_step) <= 0:
            raise ConfigurationError("grid has no cells")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "EventConfig":
        """Build from option names as they appear in run cards.

        Accepts "grid-step" as well as "grid_step"; unknown keys are an error.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = key.replace("-", "_")
            if name not in known:
                raise ConfigurationError(f"unknown event option '{key}'")
            kwargs[name] = _parse_flag(key, value) if name == "ncoll" else _parse_number(key, value)
        return cls(**kwargs)


@dataclass(frozen=True)
class CollisionConfig:
    projectile: str  # "p", "d", "Au", "Pb", ...
    target: str
    sNN_GeV: float = 200.0
    sigmaNN_mb: Optional[float] = None  # None -> look up from √s table

    # nucleon thickness profile
    width: float = 0.5  # fm
    shape: float = 2.0  # generalized Gaussian exponent, 2 = Gaussian
    truncate: float = 5.0  # profile radii kept on the grid

    # participant fluctuations: Gamma(k, scale=1/k), k <= 0 disables
    fluctuation_k: float = 1.0

    # impact parameter range
    bmin: float = 0.0
    bmax: float = 20.0

    def __post_init__(self):
        _require_positive("sNN_GeV", self.sNN_GeV)
        if self.sigmaNN_mb is not None:
            _require_positive("sigmaNN_mb", self.sigmaNN_mb)
        _require_positive("width", self.width)
        _require_positive("shape", self.shape)
        _require_positive("truncate", self.truncate)
        if not math.isfinite(self.fluctuation_k):
            raise ConfigurationError("fluctuation_k must be finite")
        if self.bmin < 0.0 or not self.bmax >= self.bmin:
            raise ConfigurationError(
                f"impact parameter range [{self.bmin}, {self.bmax}] is invalid"
            )
