# src/gravity_sims/core/vector.py

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Vector2D:
    """Immutable 2D vector. Every operation returns a new value."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return add(self, other)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return add(self, scale(other, -1.0))

    def __neg__(self) -> Vector2D:
        return scale(self, -1.0)

    def __mul__(self, k: float) -> Vector2D:
        return scale(self, k)

    __rmul__ = __mul__

    def norm(self) -> float:
        return float(np.hypot(self.x, self.y))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    @classmethod
    def from_array(cls, arr) -> Vector2D:
        arr = np.asarray(arr, dtype=float)
        return cls(float(arr[0]), float(arr[1]))


ZERO = Vector2D(0.0, 0.0)


def add(v1: Vector2D, v2: Vector2D) -> Vector2D:
    return Vector2D(v1.x + v2.x, v1.y + v2.y)


def scale(v: Vector2D, k: float) -> Vector2D:
    return Vector2D(v.x * k, v.y * k)
