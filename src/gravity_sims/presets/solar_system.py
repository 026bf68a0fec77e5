from __future__ import annotations
from typing import Any, Mapping

from gravity_sims.core import Simulation, SimConfig, Vector2D, create_body
from gravity_sims.utils.preset_loader import LoadedPreset, load_preset


def _body_from_spec(spec: Mapping[str, Any], anchor: tuple[Vector2D, Vector2D], scaling: Mapping[str, float], config: SimConfig):
    name = spec.get("name", "")
    if "mass" not in spec:
        raise ValueError(f"Body {name!r} has no mass")
    orbit_scale = float(scaling.get("orbit_scale", 1.0))
    speed_scale = float(scaling.get("speed_scale", 1.0))

    anchor_pos, anchor_vel = anchor
    offset = float(spec.get("orbit_radius", 0.0)) * orbit_scale
    speed = float(spec.get("speed", 0.0)) * speed_scale * config.scale_factor
    color = spec.get("color")
    return create_body(
        position=anchor_pos + Vector2D(offset, 0.0),
        velocity=anchor_vel + Vector2D(0.0, -speed),
        mass=float(spec["mass"]),
        radius=float(spec.get("radius", 1.0)),
        color=tuple(color) if isinstance(color, list) else color,
        name=name,
    )


def make_solar_system(preset: LoadedPreset | str = "solar_system") -> Simulation:
    """
    Build a Simulation from a body-list preset.

    Bodies without a parent start at the view centre plus their scaled orbit
    radius along +x, moving in -y. A parent must be listed before its children.
    """
    if not isinstance(preset, LoadedPreset):
        preset = load_preset(preset)
    config = SimConfig.from_dict(preset.physics)
    scaling = preset.resolved.get("scaling") or {}
    specs = preset.resolved.get("bodies") or []
    if not specs:
        raise ValueError(f"Preset {preset.preset_path} defines no bodies")

    sim = Simulation(config=config)
    center = Vector2D(*config.center)
    placed: dict[str, tuple[Vector2D, Vector2D]] = {}
    for spec in specs:
        parent = spec.get("parent")
        if parent is None:
            anchor = (center, Vector2D())
        elif parent in placed:
            anchor = placed[parent]
        else:
            raise ValueError(f"Body {spec.get('name')!r} references unknown parent {parent!r}")
        body = _body_from_spec(spec, anchor, scaling, config)
        sim.add_body(body)
        placed[body.name] = (body.position, body.velocity)
    return sim
