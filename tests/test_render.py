import matplotlib.pyplot as plt
from matplotlib.animation import PillowWriter
import pytest

from gravity_sims.core import run_simulation
from gravity_sims.render.animation import animate
from gravity_sims.render.frame_export import export_frame
from gravity_sims.render.renderer import MatplotlibRenderer, RendererConfig


def test_render_simulation_reuses_patches(sun_venus):
    renderer = MatplotlibRenderer(RendererConfig(show_labels=True))
    first = renderer.render_simulation(sun_venus)
    sun_venus.step()
    second = renderer.render_simulation(sun_venus)
    assert len(renderer.ax.patches) == 2
    assert first[0] is second[0]
    venus = sun_venus.bodies[1]
    assert renderer._patches[venus.id].center == pytest.approx((venus.position.x, venus.position.y))
    assert renderer.ax.get_ylim() == (800.0, 0.0)
    renderer.close()


def test_render_snapshot_requires_figure(sun_venus):
    recording = run_simulation(sun_venus, 1, log_interval=0)
    with pytest.raises(RuntimeError):
        MatplotlibRenderer().render_snapshot(recording.frames[0], recording.body_static)


def test_export_frame(tmp_path, sun_venus):
    recording = run_simulation(sun_venus, 5, log_interval=0)
    out = export_frame(recording, out_path=tmp_path / "frames" / "last.png", frame_index=-1)
    assert out.exists() and out.stat().st_size > 0
    by_time = export_frame(recording, out_path=tmp_path / "t.png", t=0.04)
    assert by_time.exists()


def test_export_frame_argument_checks(tmp_path, sun_venus):
    recording = run_simulation(sun_venus, 2, log_interval=0)
    with pytest.raises(ValueError):
        export_frame(recording, out_path=tmp_path / "x.png")
    with pytest.raises(IndexError):
        export_frame(recording, out_path=tmp_path / "x.png", frame_index=10)


def test_animate_steps_simulation(tmp_path, sun_venus):
    anim = animate(sun_venus, steps_per_frame=3, frames=2)
    anim.save(tmp_path / "anim.gif", writer=PillowWriter(fps=10))
    assert sun_venus.n_steps == 6
    assert (tmp_path / "anim.gif").exists()
    plt.close("all")


def test_animate_rejects_bad_steps(sun_venus):
    with pytest.raises(ValueError):
        animate(sun_venus, steps_per_frame=0)
