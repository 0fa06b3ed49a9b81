# star.py

import numpy as np


class Star:
    """
    Read-only view of a single simulated star.

    StarField stores its stars as parallel NumPy arrays; a Star is produced on
    demand when a caller indexes or iterates a field, and copies its rows so
    later recomputes do not change an existing Star.
    """
    def __init__(self, position: np.ndarray, velocity: np.ndarray, base_color: np.ndarray, shifted_color: np.ndarray):
        self.position = position
        self.velocity = velocity
        self.base_color = base_color
        self.shifted_color = shifted_color

    @property
    def speed(self) -> float:
        """Orbital speed as a fraction of c."""
        return float(np.linalg.norm(self.velocity))

    @property
    def display_color(self):
        """Shifted color scaled to 0-255 integers for drawing."""
        rgb = np.clip(self.shifted_color, 0.0, 1.0)
        return tuple(int(round(c * 255)) for c in rgb)

    def __repr__(self):
        return (f"Star(position={self.position.tolist()}, velocity={self.velocity.tolist()}, "
                f"shifted_color={self.shifted_color.tolist()})")
