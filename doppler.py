# doppler.py

import numpy as np
import numba

DEFAULT_BETA_LIMIT = 0.99  # Largest |beta| fed into the Doppler formula.


@numba.jit(nopython=True)
def clamp_beta(beta, beta_limit):
    """
    Keeps beta inside the open interval (-1, 1).
    Any beta at or beyond the speed of light is replaced by the boundary
    value; everything else passes through untouched.
    """
    if beta >= 1.0:
        return beta_limit
    if beta <= -1.0:
        return -beta_limit
    return beta


@numba.jit(nopython=True)
def doppler_factor_from_beta(beta):
    """
    Relativistic Doppler factor for a line-of-sight beta.
    lambda_observed = lambda_emitted * sqrt((1 + beta) / (1 - beta))
    Receding sources (beta > 0) are stretched, approaching sources compressed.
    """
    return np.sqrt((1.0 + beta) / (1.0 - beta))


@numba.jit(nopython=True)
def relativistic_doppler_factor(star_velocity, observer_velocity, observer_position,
                                speed_of_light=1.0, beta_limit=DEFAULT_BETA_LIMIT):
    """
    Calculates the factor by which a star's emitted wavelength is scaled as
    seen by the observer.

    The line of sight runs from the star's velocity vector to the observer's
    position, not from the star's position.

    Data Contract:
    - Inputs:
        - star_velocity (np.ndarray): 3-vector, fraction of c.
        - observer_velocity (np.ndarray): 3-vector, fraction of c.
        - observer_position (np.ndarray): 3-vector, model units.
        - speed_of_light (float): Normalized speed of light.
        - beta_limit (float): Replacement magnitude for |beta| >= 1.
    - Outputs: float - Wavelength scale factor (>1 redshift, <1 blueshift).
    - Invariants: Always finite for finite inputs.
    """
    los_x = observer_position[0] - star_velocity[0]
    los_y = observer_position[1] - star_velocity[1]
    los_z = observer_position[2] - star_velocity[2]
    los_len = np.sqrt(los_x * los_x + los_y * los_y + los_z * los_z)

    if los_len == 0.0:
        # No direction to project onto, so nothing is seen moving along it.
        return doppler_factor_from_beta(0.0)

    rel_x = star_velocity[0] - observer_velocity[0]
    rel_y = star_velocity[1] - observer_velocity[1]
    rel_z = star_velocity[2] - observer_velocity[2]
    relative_velocity = (rel_x * los_x + rel_y * los_y + rel_z * los_z) / los_len

    beta = clamp_beta(relative_velocity / speed_of_light, beta_limit)
    return doppler_factor_from_beta(beta)
