# src/gravity_sims/core/__init__.py

from .vector import Vector2D, add, scale
from .config import SimConfig
from .bodies import Body, InvalidMassError, create_body
from .forces import gravitational_force, net_force
from .boundary import Boundary, WrapBoundary, wrap_coordinate
from .simulation import Simulation, new_simulation, run_simulation
from .recording import (
    BodyStateSnapshot,
    BodyStaticSnapshot,
    FrameSnapshot,
    SimulationRecording,
)

__all__ = [
    "Vector2D",
    "add",
    "scale",
    "SimConfig",
    "Body",
    "InvalidMassError",
    "create_body",
    "gravitational_force",
    "net_force",
    "Boundary",
    "WrapBoundary",
    "wrap_coordinate",
    "Simulation",
    "new_simulation",
    "run_simulation",
    "BodyStateSnapshot",
    "BodyStaticSnapshot",
    "FrameSnapshot",
    "SimulationRecording",
]
