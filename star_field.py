# star_field.py

import numpy as np
import logging
import numba
from collections import namedtuple
from doppler import relativistic_doppler_factor, DEFAULT_BETA_LIMIT
from spectrum import wavelength_to_rgb
from star import Star

logger = logging.getLogger("doppler_galaxy")

# Rotation model identifiers.
KEPLERIAN = "keplerian"
FLAT_ROTATION = "flat_rotation"
ROTATION_MODELS = (KEPLERIAN, FLAT_ROTATION)

# Cylindrical coordinates of every star, shared by both rotation models so a
# given index sits at the same place in each field.
StarLayout = namedtuple('StarLayout', ['angles', 'radii', 'heights'])

# --- JIT-Compiled Color Kernel ---
# Kept outside the StarField class so Numba can compile it in nopython mode
# against plain NumPy arrays and scalars.

@numba.jit(nopython=True)
def _recompute_shifted_colors_jit(velocities, observer_velocity, observer_position, reference_wavelength, speed_of_light, beta_limit, shifted_colors):
    """
    Numba-accelerated full pass over a field.
    For each star the reference wavelength is scaled by its Doppler factor,
    clamped to the visible band and mapped to RGB in place.
    """
    for i in range(velocities.shape[0]):
        factor = relativistic_doppler_factor(velocities[i], observer_velocity, observer_position, speed_of_light, beta_limit)
        shifted_wavelength = reference_wavelength * factor

        # Clamp to the visible spectrum before mapping
        if shifted_wavelength < 0.0:
            shifted_wavelength = 0.0
        elif shifted_wavelength > 1.0:
            shifted_wavelength = 1.0

        r, g, b = wavelength_to_rgb(shifted_wavelength)
        shifted_colors[i, 0] = r
        shifted_colors[i, 1] = g
        shifted_colors[i, 2] = b


def sample_layout(count: int, radius_range: tuple, height_range: tuple, rng: np.random.Generator) -> StarLayout:
    """
    Draws a flat radial distribution of stars in a thin disc.

    Data Contract:
    - Inputs:
        - count (int): Number of stars, zero or more.
        - radius_range (tuple): (min_radius, max_radius) in model units.
        - height_range (tuple): (min_height, max_height) offset from the plane.
        - rng (np.random.Generator): The seeded random source.
    - Outputs: StarLayout of three arrays of length `count`.
    - Invariants: Angles lie in [0, 2*pi).
    """
    if count < 0:
        raise ValueError(f"Star count must be non-negative, got {count}.")

    angles = rng.uniform(0.0, 2.0 * np.pi, count)
    radii = rng.uniform(radius_range[0], radius_range[1], count)
    heights = rng.uniform(height_range[0], height_range[1], count)
    return StarLayout(angles=angles, radii=radii, heights=heights)


def keplerian_speeds(radii: np.ndarray, max_velocity: float, galaxy_radius: float, softening: float) -> np.ndarray:
    """
    Orbital speed falling off as 1/sqrt(r), as for mass concentrated at the centre.
    The softening term keeps stars sampled near r=0 from blowing up.
    """
    return max_velocity * np.sqrt(galaxy_radius / (radii + softening))


def flat_rotation_speeds(radii: np.ndarray, flat_rotation_velocity: float) -> np.ndarray:
    """The same speed at every radius, as observed in real galaxy rotation curves."""
    return np.full(radii.shape, flat_rotation_velocity, dtype=float)


class StarField:
    """
    Holds the stars of one rotation model and their Doppler-shifted colors,
    stored as NumPy arrays (Structure of Arrays).

    Data Contract:
    - Inputs:
        - model (str): KEPLERIAN or FLAT_ROTATION.
        - layout (StarLayout): Cylindrical coordinates of every star.
        - config (dict): The 'simulation' section of the config file.
    - Outputs: None. recompute_shifted_colors modifies internal state.
    - Side Effects: None outside this object.
    - Invariants: The number of stars is fixed at construction. Positions,
      velocities and base colors never change; only shifted_colors is
      rewritten, and every value in it stays within [0, 1].
    """
    def __init__(self, model: str, layout: StarLayout, config: dict):
        if model not in ROTATION_MODELS:
            raise ValueError(f"Unknown rotation model '{model}'. Expected one of {ROTATION_MODELS}.")

        self.model = model
        self.config = config
        self.num_stars = len(layout.radii)
        self.reference_wavelength = config.get('reference_wavelength', 0.5)
        self.speed_of_light = config.get('speed_of_light', 1.0)
        self.beta_limit = config.get('beta_limit', DEFAULT_BETA_LIMIT)
        self.observer_position = np.array([0.0, 0.0, config['observer_position_z']])

        angles, radii, heights = layout
        cos_a = np.cos(angles)
        sin_a = np.sin(angles)

        # --- Positions: x/z span the galactic plane, y is the height ---
        self.positions = np.column_stack((radii * cos_a, heights, radii * sin_a)).astype(float)
        self.radii = np.array(radii, dtype=float)

        # --- Tangential velocities in the orbital plane ---
        if model == KEPLERIAN:
            self.speeds = keplerian_speeds(
                self.radii,
                config['max_velocity'],
                config['galaxy_radius'],
                config.get('keplerian_softening', 0.1)
            )
        else:
            self.speeds = flat_rotation_speeds(self.radii, config['flat_rotation_velocity'])
        tangents = np.column_stack((-sin_a, np.zeros_like(angles), cos_a)).astype(float)
        self.velocities = tangents * self.speeds[:, np.newaxis]

        # --- Colors ---
        base_color = np.array(wavelength_to_rgb(self.reference_wavelength))
        self.base_colors = np.tile(base_color, (self.num_stars, 1))
        self.shifted_colors = np.empty((self.num_stars, 3), dtype=float)

        # Start with a stationary observer so shifted colors are valid before the first key press.
        self.observer_velocity = np.zeros(3)
        self.recompute_shifted_colors(self.observer_velocity)

        logger.info(f"StarField '{model}' created for {self.num_stars} stars.")

    @classmethod
    def generate(cls, count: int, radius_range: tuple, height_range: tuple, model: str, config: dict, rng: np.random.Generator):
        """Samples a fresh layout and builds a field for the given model."""
        layout = sample_layout(count, radius_range, height_range, rng)
        return cls(model, layout, config)

    def recompute_shifted_colors(self, observer_velocity_vector):
        """
        Recomputes every star's shifted color for the given observer velocity.
        This is a full O(n) pass; calling it again with the same velocity
        produces identical colors.
        """
        self.observer_velocity = np.asarray(observer_velocity_vector, dtype=float).reshape(3)

        _recompute_shifted_colors_jit(
            self.velocities,
            self.observer_velocity,
            self.observer_position,
            self.reference_wavelength,
            self.speed_of_light,
            self.beta_limit,
            self.shifted_colors  # Written in place
        )

        logger.debug(f"StarField '{self.model}' recomputed for observer velocity {self.observer_velocity.tolist()}.")

    def snapshot(self):
        """
        Returns read-only views of (positions, shifted_colors) for drawing.
        """
        positions = self.positions.view()
        positions.flags.writeable = False
        colors = self.shifted_colors.view()
        colors.flags.writeable = False
        return positions, colors

    def __len__(self):
        return self.num_stars

    def __getitem__(self, index: int) -> Star:
        return Star(
            self.positions[index].copy(),
            self.velocities[index].copy(),
            self.base_colors[index].copy(),
            self.shifted_colors[index].copy()
        )

    def __iter__(self):
        for i in range(self.num_stars):
            yield self[i]


def build_star_fields(config: dict, rng: np.random.Generator):
    """
    Builds the Keplerian and flat-rotation fields from one shared layout so the
    two models can be compared star for star.

    Data Contract:
    - Inputs:
        - config (dict): The 'simulation' section of the config file.
        - rng (np.random.Generator): The master seeded random number generator.
    - Outputs: tuple (keplerian_field, flat_rotation_field).
    """
    layout = sample_layout(
        config['star_count'],
        (config['min_radius'], config['galaxy_radius']),
        (config['min_height'], config['max_height']),
        rng
    )
    logger.info(
        f"Sampled layout for {config['star_count']} stars "
        f"(radius {config['min_radius']}-{config['galaxy_radius']}, "
        f"height {config['min_height']}-{config['max_height']})."
    )
    return StarField(KEPLERIAN, layout, config), StarField(FLAT_ROTATION, layout, config)
