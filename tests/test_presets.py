import textwrap

import pytest

from gravity_sims.core import SimConfig, Vector2D
from gravity_sims.presets import build_simulation, make_cluster_from_preset, make_random_cluster, make_solar_system
from gravity_sims.utils.cli import build_parser
from gravity_sims.utils.preset_loader import load_preset
from gravity_sims.utils.random import seed_all


def _write(path, text):
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_bundled_solar_system_preset_resolves_includes():
    preset = load_preset("solar_system")
    assert [p.name for p in preset.loaded_files] == ["default_physics.yaml", "solar_system.yaml"]
    assert "include" not in preset.resolved
    assert SimConfig.from_dict(preset.physics) == SimConfig()


def test_solar_system_layout():
    sim = make_solar_system()
    names = [b.name for b in sim.bodies]
    assert names == ["Sun", "Venus", "Earth", "Moon", "Mars", "Jupiter"]

    sun = sim.get_body(0)
    assert sun.position == Vector2D(500.0, 400.0)
    assert sun.velocity == Vector2D(0.0, 0.0)
    assert sun.color == (255, 255, 0)

    venus = sim.bodies[1]
    assert venus.position.x == pytest.approx(608.2)
    assert venus.velocity.y == pytest.approx(-35.02e3 * 300000 * 1e-9)

    earth, moon = sim.bodies[2], sim.bodies[3]
    assert moon.position.x == pytest.approx(earth.position.x + 0.3844)
    assert moon.position.y == earth.position.y
    assert moon.velocity.y == pytest.approx(earth.velocity.y - 1.022e3 * 300000 * 1e-9)


def test_solar_system_steps_inside_bounds():
    sim = make_solar_system()
    for _ in range(120):
        sim.step()
    for body in sim.bodies:
        assert sim.boundary.contains(body.position)


def test_include_overrides_and_nested(tmp_path):
    _write(tmp_path / "base.yaml", """
        physics:
          dt: 0.5
          width: 100.0
        tags: [a]
    """)
    _write(tmp_path / "mid.yaml", """
        include: [base.yaml]
        physics:
          height: 50.0
    """)
    top = _write(tmp_path / "top.yaml", """
        include: [mid.yaml]
        physics:
          dt: 0.25
        tags: [b, c]
        bodies:
          - name: A
            mass: 1.0
          - name: B
            parent: A
            orbit_radius: 10.0
            speed: 2.0
            mass: 1.0
    """)
    preset = load_preset(top)
    assert preset.physics == {"dt": 0.25, "width": 100.0, "height": 50.0}
    assert preset.resolved["tags"] == ["b", "c"]
    assert len(preset.loaded_files) == 3

    sim = make_solar_system(preset)
    a, b = sim.bodies
    assert a.position == Vector2D(50.0, 25.0)
    assert b.position == Vector2D(60.0, 25.0)
    assert b.velocity == Vector2D(0.0, -2.0 * 1e-9)


def test_circular_include_rejected(tmp_path):
    _write(tmp_path / "a.yaml", "include: [b.yaml]\n")
    _write(tmp_path / "b.yaml", "include: [a.yaml]\n")
    with pytest.raises(ValueError, match="Circular"):
        load_preset(tmp_path / "a.yaml")


def test_unknown_parent_rejected(tmp_path):
    path = _write(tmp_path / "p.yaml", """
        bodies:
          - name: Moon
            parent: Earth
            mass: 1.0
    """)
    with pytest.raises(ValueError, match="parent"):
        make_solar_system(path)


def test_missing_preset():
    with pytest.raises(FileNotFoundError):
        load_preset("no_such_preset")


def test_random_cluster_is_reproducible():
    seed_all(3)
    first = make_random_cluster(n_bodies=5)
    seed_all(3)
    second = make_random_cluster(n_bodies=5)
    assert [b.position for b in first.bodies] == [b.position for b in second.bodies]
    assert [b.mass for b in first.bodies] == [b.mass for b in second.bodies]
    for body in first.bodies:
        assert 100.0 <= body.position.x <= 900.0
        assert 100.0 <= body.position.y <= 700.0
        assert 1e27 * (1 - 1e-12) <= body.mass <= 1e29 * (1 + 1e-12)


def test_cluster_preset_overrides():
    seed_all(0)
    sim = make_cluster_from_preset("random_cluster", n_bodies=4)
    assert sim.n_bodies == 4
    sim.step()


def test_cluster_rejects_bad_arguments():
    with pytest.raises(ValueError):
        make_random_cluster(n_bodies=0)
    with pytest.raises(ValueError):
        make_random_cluster(margin=500.0)


def test_build_simulation_applies_cli_overrides():
    seed_all(5)
    args = build_parser().parse_args(
        ["--preset", "random_cluster", "--n_bodies", "7", "--width", "1500", "--dt", "0.05"]
    )
    sim = build_simulation(args)
    assert sim.n_bodies == 7
    assert sim.config.width == 1500.0
    assert sim.config.height == 800.0
    assert sim.config.dt == 0.05
    assert sim.boundary.bounds() == (0.0, 1500.0, 0.0, 800.0)


def test_build_simulation_defaults_to_solar_system():
    args = build_parser().parse_args(["--height", "900"])
    sim = build_simulation(args)
    assert [b.name for b in sim.bodies][:2] == ["Sun", "Venus"]
    assert sim.config.height == 900.0
    assert sim.get_body(0).position == Vector2D(500.0, 450.0)


def test_build_simulation_rejects_bad_override():
    args = build_parser().parse_args(["--softening", "0"])
    with pytest.raises(ValueError, match="softening"):
        build_simulation(args)
