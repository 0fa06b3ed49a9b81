# simulation_state.py

import numpy as np
import logging
import constants
from star_field import StarField, build_star_fields

logger = logging.getLogger("doppler_galaxy")


class SimulationParameters:
    """
    The viewer's adjustable parameters.

    - observer_velocity (float): Observer speed along the view axis, fraction of c.
    - show_keplerian / show_flat_rotation (bool): Which viewports are drawn.
    - view_angle (float): Cosmetic rotation of the galaxy in degrees, [0, 360).
    """
    def __init__(self, observer_velocity: float = 0.0, show_keplerian: bool = True,
                 show_flat_rotation: bool = True, view_angle: float = 0.0):
        self.observer_velocity = observer_velocity
        self.show_keplerian = show_keplerian
        self.show_flat_rotation = show_flat_rotation
        self.view_angle = view_angle

    def __repr__(self):
        return (f"SimulationParameters(observer_velocity={self.observer_velocity:.2f}, "
                f"show_keplerian={self.show_keplerian}, show_flat_rotation={self.show_flat_rotation}, "
                f"view_angle={self.view_angle:.1f})")


class SimulationState:
    """
    Owns the parameters and both star fields, and is the only place they change.

    Every change of observer velocity recomputes both fields before the method
    returns, so a frame drawn afterwards never sees stale colors.

    Data Contract:
    - Inputs:
        - keplerian (StarField): Field built with the Keplerian model.
        - flat_rotation (StarField): Field built with the flat-rotation model.
        - config (dict): The 'simulation' section of the config file.
    - Outputs: None.
    - Side Effects: Rewrites shifted colors of both fields on velocity changes.
    - Invariants: |observer_velocity| <= max_observer_velocity.
      0 <= view_angle < 360.
    """
    def __init__(self, keplerian: StarField, flat_rotation: StarField, config: dict):
        self.keplerian = keplerian
        self.flat_rotation = flat_rotation
        self.config = config
        self.velocity_step = config['velocity_step']
        self.max_observer_velocity = config['max_observer_velocity']
        self.rotation_increment = config['rotation_increment']
        self.view_rotation_step = config.get('view_rotation_step', 5.0)
        self.params = SimulationParameters()

        self._recompute()
        logger.info(f"SimulationState initialized: {self.params}")

    @classmethod
    def from_config(cls, config: dict, rng: np.random.Generator):
        """Builds both star fields from one layout and wraps them in a state."""
        keplerian, flat_rotation = build_star_fields(config, rng)
        return cls(keplerian, flat_rotation, config)

    # --- Read access for the renderer ---

    @property
    def observer_velocity(self) -> float:
        return self.params.observer_velocity

    @property
    def view_angle(self) -> float:
        return self.params.view_angle

    def observer_velocity_vector(self) -> np.ndarray:
        """The observer only moves along the view (z) axis."""
        return np.array([0.0, 0.0, self.params.observer_velocity])

    def visible_fields(self):
        """(label, field) pairs the renderer should draw, in viewport order."""
        fields = []
        if self.params.show_keplerian:
            fields.append((constants.KEPLERIAN_LABEL, self.keplerian))
        if self.params.show_flat_rotation:
            fields.append((constants.FLAT_ROTATION_LABEL, self.flat_rotation))
        return fields

    # --- Transitions ---

    def increase_observer_velocity(self):
        self._set_observer_velocity(self.params.observer_velocity + self.velocity_step)

    def decrease_observer_velocity(self):
        self._set_observer_velocity(self.params.observer_velocity - self.velocity_step)

    def toggle_keplerian(self):
        self.params.show_keplerian = not self.params.show_keplerian
        logger.info(f"Keplerian model {'shown' if self.params.show_keplerian else 'hidden'}.")

    def toggle_flat_rotation(self):
        self.params.show_flat_rotation = not self.params.show_flat_rotation
        logger.info(f"Flat rotation model {'shown' if self.params.show_flat_rotation else 'hidden'}.")

    def rotate_view(self, delta_degrees: float):
        angle = (self.params.view_angle + delta_degrees) % 360.0
        # A tiny negative sum rounds up to exactly 360.0 under the modulo.
        self.params.view_angle = 0.0 if angle >= 360.0 else angle

    def rotate_left(self):
        self.rotate_view(-self.view_rotation_step)

    def rotate_right(self):
        self.rotate_view(self.view_rotation_step)

    def advance_rotation(self):
        """Idle tick: slow automatic spin of the view."""
        self.rotate_view(self.rotation_increment)

    def reset(self):
        self.params = SimulationParameters()
        self._recompute()
        logger.info(f"Simulation reset: {self.params}")

    def _set_observer_velocity(self, velocity: float):
        limit = self.max_observer_velocity
        self.params.observer_velocity = float(np.clip(velocity, -limit, limit))
        self._recompute()
        logger.info(f"Observer velocity set to {self.params.observer_velocity:+.2f}c")

    def _recompute(self):
        observer_velocity = self.observer_velocity_vector()
        self.keplerian.recompute_shifted_colors(observer_velocity)
        self.flat_rotation.recompute_shifted_colors(observer_velocity)
