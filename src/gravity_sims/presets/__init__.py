# src/gravity_sims/presets/__init__.py

from .solar_system import make_solar_system
from .cluster import make_random_cluster, make_cluster_from_preset
from .factory import build_simulation

__all__ = [
    "make_solar_system",
    "make_random_cluster",
    "make_cluster_from_preset",
    "build_simulation",
]
