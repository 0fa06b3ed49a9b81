# renderer.py

import numpy as np
import pygame
import logging
import constants
from spectrum import wavelength_to_rgb

logger = logging.getLogger("doppler_galaxy")


def project_points(positions: np.ndarray, view_angle: float, viewport_size: tuple, eye: tuple, fov_degrees: float = constants.FIELD_OF_VIEW):
    """
    Perspective projection of model-space points into a viewport.

    The galaxy is first spun about its pole (y axis) by view_angle, then seen
    from `eye` looking at the origin with y up.

    Data Contract:
    - Inputs:
        - positions (np.ndarray): (n, 3) model-space points.
        - view_angle (float): Rotation about the y axis in degrees.
        - viewport_size (tuple): (width, height) in pixels.
        - eye (tuple): Camera position in model space.
        - fov_degrees (float): Vertical field of view.
    - Outputs: (pixels, depths, mask)
        - pixels (np.ndarray): (n, 2) int pixel coordinates.
        - depths (np.ndarray): (n,) distance along the view direction.
        - mask (np.ndarray): (n,) bool, True for points in front of the camera
          and inside the viewport.
    """
    width, height = viewport_size
    positions = np.asarray(positions, dtype=float).reshape(-1, 3)

    # --- Spin the galaxy about its pole ---
    theta = np.radians(view_angle)
    cos_t, sin_t = np.cos(theta), np.sin(theta)
    x = positions[:, 0] * cos_t + positions[:, 2] * sin_t
    y = positions[:, 1]
    z = -positions[:, 0] * sin_t + positions[:, 2] * cos_t

    # --- Camera basis (look-at the origin) ---
    eye = np.asarray(eye, dtype=float)
    forward = -eye / np.linalg.norm(eye)
    right = np.cross(forward, np.array([0.0, 1.0, 0.0]))
    right /= np.linalg.norm(right)
    up = np.cross(right, forward)

    dx, dy, dz = x - eye[0], y - eye[1], z - eye[2]
    cam_x = dx * right[0] + dy * right[1] + dz * right[2]
    cam_y = dx * up[0] + dy * up[1] + dz * up[2]
    depths = dx * forward[0] + dy * forward[1] + dz * forward[2]

    in_front = depths > constants.NEAR_PLANE
    safe_depths = np.where(in_front, depths, 1.0)
    focal = (height / 2.0) / np.tan(np.radians(fov_degrees) / 2.0)

    screen_x = width / 2.0 + focal * cam_x / safe_depths
    screen_y = height / 2.0 - focal * cam_y / safe_depths

    mask = in_front & (screen_x >= 0) & (screen_x < width) & (screen_y >= 0) & (screen_y < height)
    pixels = np.zeros((positions.shape[0], 2), dtype=np.int32)
    pixels[mask, 0] = screen_x[mask].astype(np.int32)
    pixels[mask, 1] = screen_y[mask].astype(np.int32)
    return pixels, depths, mask


def colors_to_bytes(colors: np.ndarray) -> np.ndarray:
    """
    Converts [0, 1] float colors to uint8, guarding against bad values so a
    numerical slip never crashes the draw call.
    """
    sane = np.nan_to_num(np.asarray(colors, dtype=float), nan=0.0, posinf=1.0, neginf=0.0)
    return (np.clip(sane, 0.0, 1.0) * 255).astype(np.uint8)


class Renderer:
    """
    Draws the simulation state: one viewport per visible rotation model side by
    side, plus a HUD. It only reads the state.
    """
    def __init__(self, screen: pygame.Surface, observer_z: float):
        self.screen = screen
        self.eye = (0.0, constants.CAMERA_HEIGHT, observer_z)
        self.hud_font = pygame.font.Font(None, constants.HUD_FONT_SIZE)
        self.label_font = pygame.font.Font(None, constants.LABEL_FONT_SIZE)
        self.spectrum_bar = self._build_spectrum_bar()
        self.resize(screen.get_width(), screen.get_height())

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height
        self.viewport_size = (width // 2, height)
        self.viewport_surface = pygame.Surface(self.viewport_size)
        logger.info(f"Renderer viewport size set to {self.viewport_size}.")

    def _build_spectrum_bar(self) -> pygame.Surface:
        bar = pygame.Surface((constants.SPECTRUM_BAR_WIDTH, constants.SPECTRUM_BAR_HEIGHT))
        for i in range(constants.SPECTRUM_BAR_WIDTH):
            rgb = wavelength_to_rgb(i / constants.SPECTRUM_BAR_WIDTH)
            color = tuple(int(c * 255) for c in rgb)
            pygame.draw.line(bar, color, (i, 0), (i, constants.SPECTRUM_BAR_HEIGHT - 1))
        return bar

    def draw(self, state):
        self.screen.fill(constants.BACKGROUND)

        # Keplerian always takes the left half, flat rotation the right half.
        for label, field in state.visible_fields():
            offset_x = 0 if field is state.keplerian else self.viewport_size[0]
            self._draw_field(field, label, state.view_angle)
            self.screen.blit(self.viewport_surface, (offset_x, 0))

        pygame.draw.line(self.screen, constants.DIVIDER, (self.width // 2, 0), (self.width // 2, self.height))
        self._draw_hud(state)

    def _draw_field(self, field, label: str, view_angle: float):
        surface = self.viewport_surface
        surface.fill(constants.BACKGROUND)

        positions, colors = field.snapshot()
        if len(field) > 0:
            pixels, depths, mask = project_points(positions, view_angle, self.viewport_size, self.eye)

            # Far stars first so nearer ones overwrite them.
            visible = np.flatnonzero(mask)
            visible = visible[np.argsort(-depths[visible])]
            xs, ys = pixels[visible, 0], pixels[visible, 1]
            rgb = colors_to_bytes(colors[visible])

            width, height = self.viewport_size
            pixel_array = pygame.surfarray.pixels3d(surface)
            for ox in range(constants.STAR_POINT_SIZE):
                for oy in range(constants.STAR_POINT_SIZE):
                    px = np.minimum(xs + ox, width - 1)
                    py = np.minimum(ys + oy, height - 1)
                    pixel_array[px, py] = rgb
            del pixel_array  # Unlock the surface before blitting

        text = self.label_font.render(label, True, constants.WHITE)
        surface.blit(text, ((self.viewport_size[0] - text.get_width()) // 2, constants.HUD_MARGIN * 4))

    def _draw_hud(self, state):
        margin = constants.HUD_MARGIN
        info = (f"Observer Velocity: {state.observer_velocity:.2f}c | View Angle: {state.view_angle:.1f} | "
                f"{constants.CONTROLS_HINT}")
        self.screen.blit(self.hud_font.render(info, True, constants.WHITE), (margin, margin))

        legend = self.hud_font.render(constants.DOPPLER_LEGEND, True, constants.WHITE)
        self.screen.blit(legend, (margin, self.height - margin - legend.get_height()))

        bar_x = (self.width - constants.SPECTRUM_BAR_WIDTH) // 2
        bar_y = self.height - constants.SPECTRUM_BAR_OFFSET
        self.screen.blit(self.spectrum_bar, (bar_x, bar_y))

        blue = self.hud_font.render("Blueshift", True, constants.WHITE)
        red = self.hud_font.render("Redshift", True, constants.WHITE)
        self.screen.blit(blue, (bar_x - blue.get_width() - margin, bar_y))
        self.screen.blit(red, (bar_x + constants.SPECTRUM_BAR_WIDTH + margin, bar_y))
