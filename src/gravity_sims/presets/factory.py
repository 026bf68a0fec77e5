from __future__ import annotations
from dataclasses import asdict, replace

from gravity_sims.core import Simulation, SimConfig
from gravity_sims.utils.preset_loader import load_preset
from .cluster import make_cluster_from_preset
from .solar_system import make_solar_system


def build_simulation(args) -> Simulation:
    """
    Load `args.preset`, overlay any physics flags given on the command line and
    dispatch to the matching builder: presets with a `cluster` section are
    generated, everything else is read as an explicit body list.
    """
    preset = load_preset(args.preset)
    config = SimConfig.from_args(args, base=SimConfig.from_dict(preset.physics))
    preset = replace(preset, resolved={**preset.resolved, "physics": asdict(config)})
    if "cluster" in preset.resolved:
        return make_cluster_from_preset(preset, n_bodies=getattr(args, "n_bodies", None))
    return make_solar_system(preset)
