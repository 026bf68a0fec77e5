from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Sequence
if TYPE_CHECKING:
    from gravity_sims.core import Body


def _masses(bodies: Sequence[Body]) -> np.ndarray:
    return np.array([b.mass for b in bodies], dtype=float)


def total_momentum(bodies: Sequence[Body]) -> np.ndarray:
    vel = np.array([b.velocity.to_array() for b in bodies], dtype=float).reshape(-1, 2)
    return (_masses(bodies)[:, None] * vel).sum(axis=0)


def center_of_mass(bodies: Sequence[Body]) -> np.ndarray:
    # ignores the wrap; only meaningful while bodies stay away from the edges
    pos = np.array([b.position.to_array() for b in bodies], dtype=float).reshape(-1, 2)
    m = _masses(bodies)
    if m.sum() == 0.0:
        return np.zeros(2)
    return (m[:, None] * pos).sum(axis=0) / m.sum()


def kinetic_energy(bodies: Sequence[Body]) -> float:
    vel = np.array([b.velocity.to_array() for b in bodies], dtype=float).reshape(-1, 2)
    return float(0.5 * (_masses(bodies) * (vel ** 2).sum(axis=1)).sum())
