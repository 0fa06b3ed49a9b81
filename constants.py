# constants.py

"""
Application Constants

This module defines static configuration values for the viewer's framework.
These are not expected to change between simulation runs. Physical model
parameters live in config.json under the 'simulation' section.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions
WIDTH = 1200  # Pixels
HEIGHT = 600  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BACKGROUND = (0, 0, 25)  # Deep blue night sky
DIVIDER = (40, 40, 70)

# Window Title
TITLE = "Relativistic Doppler Effect: Galaxy Rotation Models"

# Viewport labels
KEPLERIAN_LABEL = "Keplerian Orbit Model"
FLAT_ROTATION_LABEL = "Flat Rotation Curve Model"

# Camera
CAMERA_HEIGHT = 10.0  # Model units above the galactic plane.
FIELD_OF_VIEW = 45.0  # Vertical field of view in degrees.
NEAR_PLANE = 0.1      # Points closer than this to the eye are culled.

# Stars are drawn as small squares of this edge length.
STAR_POINT_SIZE = 2  # Pixels

# HUD
HUD_FONT_SIZE = 20
LABEL_FONT_SIZE = 28
HUD_MARGIN = 10  # Pixels
CONTROLS_HINT = "Use 'W/S' for velocity, 'A/D' for rotation, 'K/F' toggle models, 'R' reset"
DOPPLER_LEGEND = "Redshift = Moving Away (Redder) | Blueshift = Moving Toward (Bluer)"

# Spectrum legend bar drawn under the HUD text.
SPECTRUM_BAR_WIDTH = 400   # Pixels
SPECTRUM_BAR_HEIGHT = 12   # Pixels
SPECTRUM_BAR_OFFSET = 50   # Pixels from the bottom of the window

# How often (in frames) the main loop writes a debug line.
LOG_EVERY_N_FRAMES = 300
