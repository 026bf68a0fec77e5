# src/gravity_sims/render/renderer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Circle

from gravity_sims.utils.plotting import color_to_float

if TYPE_CHECKING:
    from gravity_sims.core import Boundary, Simulation
    from gravity_sims.core.recording import BodyStaticSnapshot, FrameSnapshot


@dataclass
class RendererConfig:
    figsize: tuple[float, float] = (10.0, 8.0)
    dpi: int = 100
    background_color: str = "black"
    body_color_default: str = "white"
    boundary_color: str | None = None
    show_axes: bool = False
    show_labels: bool = False
    label_color: str = "white"


class MatplotlibRenderer:
    """
    Draws bodies as filled circles over the wrap area.
    Coordinate system matches the simulation: x-right, y-down.
    """

    def __init__(self, config: RendererConfig | None = None):
        self.config = config or RendererConfig()
        self.fig = None
        self.ax = None
        self._patches: dict[int, Circle] = {}
        self._labels: dict[int, object] = {}

    def init_figure(self, boundary: "Boundary") -> None:
        fig, ax = plt.subplots(figsize=self.config.figsize, dpi=self.config.dpi)
        fig.patch.set_facecolor(self.config.background_color)
        self.fig, self.ax = fig, ax
        self._setup_axes(ax, boundary)

    def _setup_axes(self, ax: Axes, boundary: "Boundary") -> None:
        ax.clear()
        xmin, xmax, ymin, ymax = boundary.bounds()
        ax.set_facecolor(self.config.background_color)
        if self.config.boundary_color is not None:
            boundary.plot(ax=ax, facecolor="none", edgecolor=self.config.boundary_color, linewidth=1)
        ax.set_xlim(xmin, xmax)
        # y increases downward
        ax.set_ylim(ymax, ymin)
        ax.set_aspect("equal", adjustable="box")
        if not self.config.show_axes:
            ax.set_axis_off()
        self._patches.clear()
        self._labels.clear()

    def _face_color(self, color) -> tuple[float, float, float]:
        rgb = color_to_float(color)
        return rgb if rgb is not None else color_to_float(self.config.body_color_default)

    def _draw(self, items: Iterable[tuple[int, tuple[float, float], float, object, str]]) -> list:
        """Create or move one patch per (id, pos, radius, color, name); returns touched artists."""
        artists = []
        for body_id, pos, radius, color, name in items:
            patch = self._patches.get(body_id)
            if patch is None:
                patch = Circle(pos, radius, fc=self._face_color(color), ec=None)
                self.ax.add_patch(patch)
                self._patches[body_id] = patch
            else:
                patch.center = pos
            artists.append(patch)
            if self.config.show_labels and name:
                label = self._labels.get(body_id)
                if label is None:
                    label = self.ax.text(pos[0], pos[1] - radius, name, ha="center", va="bottom",
                                         size=8, color=self.config.label_color)
                    self._labels[body_id] = label
                else:
                    label.set_position((pos[0], pos[1] - radius))
                artists.append(label)
        return artists

    def render_simulation(self, sim: "Simulation") -> list:
        """Draw the live state of `sim`."""
        if self.ax is None:
            self.init_figure(sim.boundary)
        return self._draw(
            (b.id, (b.position.x, b.position.y), b.radius, b.color, b.name) for b in sim.bodies
        )

    def render_snapshot(
        self,
        snapshot: "FrameSnapshot",
        body_static: dict[int, "BodyStaticSnapshot"],
    ) -> list:
        """Draw one recorded frame. `init_figure` must have been called."""
        if self.ax is None:
            raise RuntimeError("init_figure must be called before render_snapshot")
        return self._draw(
            (
                body_id,
                state.pos,
                body_static[body_id].radius,
                body_static[body_id].color,
                body_static[body_id].name,
            )
            for body_id, state in snapshot.bodies.items()
        )

    def close(self) -> None:
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None
        self._patches.clear()
        self._labels.clear()
