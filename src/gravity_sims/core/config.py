# src/gravity_sims/core/config.py

from __future__ import annotations
from dataclasses import dataclass, fields
import math
from typing import Any, Mapping

G = 6.67430e-11         # gravitational constant, SI
TIME_STEP = 1.0 / 60    # one display tick
SOFTENING = 1e7         # softening length (squared in the force denominator)
SCALE_FACTOR = 1e-9     # SI force -> display-scaled length units
SCREEN_WIDTH = 1000.0
SCREEN_HEIGHT = 800.0


@dataclass(frozen=True)
class SimConfig:
    gravitational_constant: float = G
    dt: float = TIME_STEP
    softening: float = SOFTENING
    scale_factor: float = SCALE_FACTOR
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not (math.isfinite(value) and value > 0):
                raise ValueError(f"{f.name} must be a positive finite number, got {value!r}")

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2

    @classmethod
    def from_args(cls, args, base: "SimConfig | None" = None) -> "SimConfig":
        """Overlay any non-None argparse attributes matching a field onto `base`."""
        kwargs = {} if base is None else {f.name: getattr(base, f.name) for f in fields(cls)}
        for f in fields(cls):
            value = getattr(args, f.name, None)
            if value is not None:
                kwargs[f.name] = float(value)
        return cls(**kwargs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SimConfig":
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown physics settings: {unknown}")
        return cls(**{k: float(v) for k, v in data.items()})
