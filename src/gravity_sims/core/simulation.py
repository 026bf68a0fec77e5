# src/gravity_sims/core/simulation.py

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import List
import numpy as np

from .bodies import Body
from .boundary import WrapBoundary
from .config import SimConfig
from .forces import net_force
from .recording import BodyStaticSnapshot, SimulationRecording, snapshot_simulation
from .vector import Vector2D, add, scale


@dataclass
class Simulation:
    """
    Owns an ordered list of bodies and advances them with a fixed time step.

    Not thread safe: callers must not interleave `add_body` and `step`.
    """
    config: SimConfig = field(default_factory=SimConfig)
    bodies: List[Body] = field(default_factory=list, init=False)
    time: float = field(default=0.0, init=False)
    n_steps: int = field(default=0, init=False)
    _next_id: int = field(default=0, init=False, repr=False)

    def __post_init__(self):
        self.boundary = WrapBoundary(self.config.width, self.config.height)

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    def new_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def add_body(self, body: Body) -> None:
        if body.id is None:
            body.id = self.new_id()
        elif any(b.id == body.id for b in self.bodies):
            raise ValueError(f"Body id {body.id} already exists in simulation")
        else:
            self._next_id = max(self._next_id, body.id + 1)
        self.bodies.append(body)

    def get_body(self, body_id: int) -> Body:
        for body in self.bodies:
            if body.id == body_id:
                return body
        raise KeyError(f"No body with id {body_id}")

    def net_forces(self) -> np.ndarray:
        """(n, 2) array of net force on each body from the current positions."""
        forces = np.zeros((self.n_bodies, 2), dtype=float)
        for i in range(self.n_bodies):
            forces[i] = net_force(self.bodies, i, self.config).to_array()
        return forces

    def step(self) -> None:
        """
        Advance every body by one dt with semi-implicit Euler:
        - all forces come from the positions at the start of the step
        - velocity is updated first, then position with the new velocity
        - positions are wrapped into the display area
        """
        dt = self.config.dt
        # must be complete before any body moves
        forces = self.net_forces()

        for body, force in zip(self.bodies, forces):
            acc = scale(Vector2D.from_array(force), 1.0 / body.mass)
            body.velocity = add(body.velocity, scale(acc, dt))
            body.position = self.boundary.apply(add(body.position, scale(body.velocity, dt)))

        self.time += dt
        self.n_steps += 1


def new_simulation(config: SimConfig | None = None) -> Simulation:
    return Simulation(config=config or SimConfig())


def run_simulation(
    sim: Simulation,
    n_steps: int,
    log_interval: int = 600,
    *,
    record_every: int = 1,
) -> SimulationRecording:
    """
    Step the simulation forward n_steps and record snapshots for rendering.
    The initial state is recorded as frame 0.
    """
    if record_every < 1:
        raise ValueError(f"record_every must be >= 1, got {record_every}")
    recording = SimulationRecording(meta={"config": asdict(sim.config)})
    body_static: dict[int, BodyStaticSnapshot] = {}

    recording.add_frame(snapshot_simulation(sim, body_static_registry=body_static))
    for step in range(n_steps):
        sim.step()
        if (step + 1) % record_every == 0:
            recording.add_frame(snapshot_simulation(sim, body_static_registry=body_static))
        if log_interval and (step + 1) % log_interval == 0:
            print(f"Simulated {sim.time:.3f} time units / {n_steps * sim.config.dt:.3f}...")
            print(f"Number of bodies: {sim.n_bodies}")

    recording.body_static.update(body_static)
    return recording
