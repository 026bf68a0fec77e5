# src/gravity_sims/core/forces.py

from __future__ import annotations
import math
from typing import Sequence

from .bodies import Body
from .config import SimConfig
from .vector import Vector2D, ZERO, add


def gravitational_force(a: Body, b: Body, config: SimConfig) -> Vector2D:
    """
    Softened Newtonian force exerted on `a` by `b`, pointing from `a` toward `b`.

    The softening term keeps the magnitude below
    G * m_a * m_b / softening**2 * scale_factor. Coincident bodies have no
    defined direction and contribute zero force.
    """
    dx = b.position.x - a.position.x
    dy = b.position.y - a.position.y
    dist_sq = dx * dx + dy * dy
    if dist_sq == 0.0:
        return ZERO
    dist = math.sqrt(dist_sq)

    magnitude = (
        config.gravitational_constant * a.mass * b.mass
        / (dist_sq + config.softening * config.softening)
    )
    return Vector2D(
        magnitude * dx / dist * config.scale_factor,
        magnitude * dy / dist * config.scale_factor,
    )


def net_force(bodies: Sequence[Body], i: int, config: SimConfig) -> Vector2D:
    """Sum of forces on bodies[i] from every other body."""
    total = ZERO
    for j, other in enumerate(bodies):
        if j != i:
            total = add(total, gravitational_force(bodies[i], other, config))
    return total
