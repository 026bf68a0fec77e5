# src/gravity_sims/core/boundary.py
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
import math

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .vector import Vector2D


class Boundary(ABC):
    @abstractmethod
    def apply(self, pos: Vector2D) -> Vector2D:
        """
        Return the position after applying the boundary policy.
        Velocities are never touched.
        """
        ...

    @abstractmethod
    def contains(self, pos: Vector2D) -> bool:
        ...

    def bounds(self) -> tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax) for camera setup / plotting."""
        raise NotImplementedError


def wrap_coordinate(value: float, extent: float) -> float:
    """Reduce `value` into [0, extent). Values already in range come back unchanged."""
    wrapped = math.fmod(value, extent)
    if wrapped < 0.0:
        wrapped += extent
    # -tiny + extent can round up to extent itself
    if wrapped >= extent:
        wrapped = 0.0
    return wrapped


@dataclass(frozen=True)
class WrapBoundary(Boundary):
    """Toroidal display area: leaving one edge re-enters at the opposite one."""
    width: float
    height: float

    def apply(self, pos: Vector2D) -> Vector2D:
        return Vector2D(wrap_coordinate(pos.x, self.width), wrap_coordinate(pos.y, self.height))

    def contains(self, pos: Vector2D) -> bool:
        return 0.0 <= pos.x < self.width and 0.0 <= pos.y < self.height

    def bounds(self) -> tuple[float, float, float, float]:
        return 0.0, self.width, 0.0, self.height

    def plot(self, ax=None, delta=0, **kwargs):
        """
        Plot the wrap area as a rectangle.

        Parameters
        ----------
        ax : matplotlib.axes.Axes, optional
            Axes to draw on. If None, a new figure and axes are created.
        **kwargs :
            Passed to Rectangle, e.g. edgecolor, facecolor, linewidth.

        Returns
        -------
        ax or (fig, ax)
            (fig, ax) when a new figure was created, otherwise ax.
        """
        created_fig = False
        if ax is None:
            fig, ax = plt.subplots()
            created_fig = True

        ax.add_patch(Rectangle((0.0, 0.0), self.width, self.height, **kwargs))
        ax.set_xlim(-delta, self.width + delta)
        ax.set_ylim(-delta, self.height + delta)
        ax.set_aspect("equal", adjustable="box")

        if created_fig:
            return fig, ax
        return ax
