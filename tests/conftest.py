import matplotlib

matplotlib.use("Agg")

import pytest

from gravity_sims.core import SimConfig, create_body, new_simulation

SUN_MASS = 1.989e30
VENUS_MASS = 4.867e24


@pytest.fixture
def config():
    return SimConfig()


@pytest.fixture
def sun_venus(config):
    sim = new_simulation(config)
    v = 35.02e3 * 300000 * config.scale_factor
    sim.add_body(create_body((500.0, 400.0), (0.0, 0.0), mass=SUN_MASS, radius=20, color="yellow", name="Sun"))
    sim.add_body(create_body((500.0 + 108.2e9 * 1e-9, 400.0), (0.0, -v), mass=VENUS_MASS, radius=4, name="Venus"))
    return sim
