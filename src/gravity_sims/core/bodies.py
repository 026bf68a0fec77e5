# src/gravity_sims/core/bodies.py

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Any, Tuple

from gravity_sims.utils.plotting import color_to_uint8
from .vector import Vector2D, ZERO

Color = Tuple[int, int, int]


class InvalidMassError(ValueError):
    """Raised when a body is given a zero, negative or non-finite mass."""


@dataclass
class Body:
    """
    One simulated mass.

    - position / velocity: display-scaled simulation units
    - mass: kilograms, strictly positive
    - radius / color / name: display attributes only, never read by the physics
    """
    position: Vector2D
    velocity: Vector2D
    mass: float
    radius: float = 1.0
    color: Any = None
    name: str = ""
    id: int | None = None

    def __post_init__(self):
        mass = float(self.mass)
        if not math.isfinite(mass) or mass <= 0.0:
            raise InvalidMassError(f"Body mass must be a positive finite number, got {self.mass!r}")
        self.mass = mass


def create_body(
    position: tuple[float, float] | Vector2D,
    velocity: tuple[float, float] | Vector2D = ZERO,
    mass: float = 1.0,
    radius: float = 1.0,
    color: str | Color | None = None,
    name: str = "",
) -> Body:
    """Helper to create a Body from plain tuples and matplotlib color names."""
    if not isinstance(position, Vector2D):
        position = Vector2D(float(position[0]), float(position[1]))
    if not isinstance(velocity, Vector2D):
        velocity = Vector2D(float(velocity[0]), float(velocity[1]))
    return Body(
        position=position,
        velocity=velocity,
        mass=mass,
        radius=float(radius),
        color=color_to_uint8(color) if isinstance(color, str) else color,
        name=name,
    )
