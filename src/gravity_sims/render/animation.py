# src/gravity_sims/render/animation.py

from __future__ import annotations

from typing import TYPE_CHECKING

from matplotlib.animation import FuncAnimation

from .renderer import MatplotlibRenderer, RendererConfig

if TYPE_CHECKING:
    from gravity_sims.core import Simulation


def animate(
    sim: "Simulation",
    renderer: MatplotlibRenderer | None = None,
    *,
    steps_per_frame: int = 1,
    interval_ms: float | None = None,
    frames: int | None = None,
) -> FuncAnimation:
    """
    Live view: every animation tick advances `sim` by `steps_per_frame` and
    redraws the bodies. Keep a reference to the returned animation and call
    `plt.show()` to run it.
    """
    if steps_per_frame < 1:
        raise ValueError(f"steps_per_frame must be >= 1, got {steps_per_frame}")
    if renderer is None:
        renderer = MatplotlibRenderer(RendererConfig())
    if renderer.ax is None:
        renderer.init_figure(sim.boundary)
    if interval_ms is None:
        interval_ms = 1000.0 * sim.config.dt

    def _init():
        return renderer.render_simulation(sim)

    def _tick(_frame):
        for _ in range(steps_per_frame):
            sim.step()
        return renderer.render_simulation(sim)

    return FuncAnimation(
        renderer.fig,
        _tick,
        init_func=_init,
        frames=frames,
        interval=interval_ms,
        blit=True,
        cache_frame_data=False,
    )
