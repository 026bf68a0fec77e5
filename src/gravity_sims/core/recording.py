# src/gravity_sims/core/recording.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Tuple
import numpy as np

from gravity_sims.utils.plotting import color_to_float

if TYPE_CHECKING:
    from .bodies import Body
    from .simulation import Simulation


@dataclass
class BodyStaticSnapshot:
    """Static properties of a body, stored once per recording."""
    id: int
    name: str
    mass: float
    radius: float
    color: Tuple[float, float, float] | None  # normalized 0–1 for matplotlib


@dataclass
class BodyStateSnapshot:
    """Per-frame dynamic state of a body."""
    pos: Tuple[float, float]
    vel: Tuple[float, float]


@dataclass
class FrameSnapshot:
    t: float
    step: int
    bodies: dict[int, BodyStateSnapshot]


@dataclass
class SimulationRecording:
    """
    In-memory record of a simulation run, consumed by renderers.

    `meta` holds the config and anything else the driver wants to keep alongside.
    """
    frames: list[FrameSnapshot] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)
    body_static: Dict[int, BodyStaticSnapshot] = field(default_factory=dict)

    def add_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)

    @property
    def times(self) -> list[float]:
        return [f.t for f in self.frames]

    @property
    def t_end(self) -> float | None:
        """Time of the last frame, or None if no frames."""
        if not self.frames:
            return None
        return self.frames[-1].t

    def positions(self, body_id: int) -> np.ndarray:
        """Trajectory of one body as an (n_frames, 2) array."""
        if body_id not in self.body_static:
            raise KeyError(f"No body with id {body_id} in recording")
        return np.array([f.bodies[body_id].pos for f in self.frames], dtype=float).reshape(-1, 2)


def make_body_static_snapshot(body: "Body") -> BodyStaticSnapshot:
    return BodyStaticSnapshot(
        id=body.id,
        name=body.name,
        mass=float(body.mass),
        radius=float(body.radius),
        color=color_to_float(body.color),
    )


def make_body_state_snapshot(body: "Body") -> BodyStateSnapshot:
    return BodyStateSnapshot(
        pos=(body.position.x, body.position.y),
        vel=(body.velocity.x, body.velocity.y),
    )


def snapshot_simulation(
    sim: "Simulation",
    *,
    body_static_registry: Dict[int, BodyStaticSnapshot],
) -> FrameSnapshot:
    bodies_state: Dict[int, BodyStateSnapshot] = {}

    for body in sim.bodies:
        if body.id is None:
            raise ValueError("All bodies must have an id before snapshotting")

        if body.id not in body_static_registry:
            body_static_registry[body.id] = make_body_static_snapshot(body)

        bodies_state[body.id] = make_body_state_snapshot(body)

    return FrameSnapshot(t=sim.time, step=sim.n_steps, bodies=bodies_state)
