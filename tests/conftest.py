import numpy as np
import pytest


@pytest.fixture
def sim_config():
    """The 'simulation' section of config.json, scaled down for fast tests."""
    return {
        "star_count": 500,
        "galaxy_radius": 15.0,
        "min_radius": 0.1,
        "min_height": -0.5,
        "max_height": 0.5,
        "max_velocity": 0.5,
        "flat_rotation_velocity": 0.5,
        "speed_of_light": 1.0,
        "observer_position_z": 20.0,
        "reference_wavelength": 0.5,
        "keplerian_softening": 0.1,
        "beta_limit": 0.99,
        "velocity_step": 0.01,
        "max_observer_velocity": 0.9,
        "rotation_increment": 0.1,
        "view_rotation_step": 5.0,
    }


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
