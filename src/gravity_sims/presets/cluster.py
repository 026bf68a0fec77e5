from __future__ import annotations
import numpy as np
import matplotlib

from gravity_sims.core import Simulation, SimConfig, create_body
from gravity_sims.utils.plotting import rgba_float_to_u8
from gravity_sims.utils.preset_loader import LoadedPreset, load_preset
from gravity_sims.utils.random import rng


def make_random_cluster(
    config: SimConfig | None = None,
    n_bodies: int = 12,
    mass_range: tuple[float, float] = (1e27, 1e29),
    sigma_v: float = 5.0,
    radius_range: tuple[float, float] = (2.0, 8.0),
    margin: float = 100.0,
    cmap: str | None = "viridis",
) -> Simulation:
    """Scatter bodies uniformly inside the view (minus `margin`) with Gaussian velocities."""
    config = config or SimConfig()
    if n_bodies < 1:
        raise ValueError(f"n_bodies must be >= 1, got {n_bodies}")
    if 2 * margin >= min(config.width, config.height):
        raise ValueError(f"margin {margin} leaves no room inside a {config.width}x{config.height} view")

    sim = Simulation(config=config)
    colormap = matplotlib.colormaps[cmap] if cmap is not None else None
    log_lo, log_hi = np.log10(mass_range[0]), np.log10(mass_range[1])
    for i in range(n_bodies):
        pos = (
            rng("presets").uniform(margin, config.width - margin),
            rng("presets").uniform(margin, config.height - margin),
        )
        vel = rng("presets").normal(0.0, sigma_v, size=2)
        frac = rng("presets").uniform()
        mass = 10 ** (log_lo + frac * (log_hi - log_lo))
        # heavier bodies drawn larger
        radius = radius_range[0] + frac * (radius_range[1] - radius_range[0])
        color = rgba_float_to_u8(colormap(rng("color").uniform()))[:3] if colormap is not None else (255, 255, 255)
        sim.add_body(create_body(pos, tuple(vel), mass=mass, radius=radius, color=color, name=f"body_{i}"))
    return sim


def make_cluster_from_preset(preset: LoadedPreset | str = "random_cluster", **overrides) -> Simulation:
    if not isinstance(preset, LoadedPreset):
        preset = load_preset(preset)
    params = dict(preset.resolved.get("cluster") or {})
    params.update({k: v for k, v in overrides.items() if v is not None})
    for key in ("mass_range", "radius_range"):
        if key in params:
            params[key] = tuple(float(x) for x in params[key])
    return make_random_cluster(SimConfig.from_dict(preset.physics), **params)
