# scripts/main.py

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt

from gravity_sims.core import run_simulation
from gravity_sims.presets import build_simulation
from gravity_sims.render.animation import animate
from gravity_sims.render.frame_export import export_frame
from gravity_sims.render.renderer import MatplotlibRenderer, RendererConfig
from gravity_sims.utils.cli import build_parser
from gravity_sims.utils.physics_utils import kinetic_energy, total_momentum
from gravity_sims.utils.random import seed_all

PROJECT_ROOT = Path(__file__).parent.parent


def main():
    parser = build_parser()
    args = parser.parse_args()
    seed_all(args.seed)

    sim = build_simulation(args)
    print(f"Loaded {sim.n_bodies} bodies from preset '{args.preset}'")
    render_config = RendererConfig(show_labels=args.show_labels)

    if not args.headless:
        renderer = MatplotlibRenderer(render_config)
        anim = animate(sim, renderer, steps_per_frame=args.steps_per_frame)  # noqa: F841
        plt.show()
        return

    p0 = total_momentum(sim.bodies)
    recording = run_simulation(sim, args.steps, log_interval=args.log_interval,
                               record_every=args.steps_per_frame)
    print("Simulation completed.")
    print(f"Kinetic energy: {kinetic_energy(sim.bodies):.6e}")
    print(f"Momentum drift: {total_momentum(sim.bodies) - p0}")
    for body in sim.bodies:
        print(f"  {body.name or body.id}: pos=({body.position.x:.3f}, {body.position.y:.3f}) "
              f"vel=({body.velocity.x:.4f}, {body.velocity.y:.4f})")

    if args.export_frame is not None:
        out = Path(args.export_frame)
        if not out.is_absolute():
            out = PROJECT_ROOT / out
        export_frame(recording, out_path=out, frame_index=-1,
                     renderer=MatplotlibRenderer(render_config))
        print(f"Saved last frame to {out}")


if __name__ == "__main__":
    main()
