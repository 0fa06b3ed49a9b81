# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from renderer import Renderer
from simulation_state import SimulationState

# Get the application's dedicated logger
logger = logging.getLogger("doppler_galaxy")

# Discrete key presses mapped to SimulationState transitions.
KEY_BINDINGS = {
    pygame.K_w: SimulationState.increase_observer_velocity,
    pygame.K_s: SimulationState.decrease_observer_velocity,
    pygame.K_a: SimulationState.rotate_left,
    pygame.K_d: SimulationState.rotate_right,
    pygame.K_k: SimulationState.toggle_keplerian,
    pygame.K_f: SimulationState.toggle_flat_rotation,
    pygame.K_r: SimulationState.reset,
}

CONTROLS_HELP = (
    "Controls:\n"
    "  W/S: Increase/decrease observer velocity\n"
    "  A/D: Rotate view left/right\n"
    "  K: Toggle Keplerian model display\n"
    "  F: Toggle Flat rotation model display\n"
    "  R: Reset view and settings\n"
    "  ESC: Exit"
)


def handle_events(state: SimulationState, renderer: Renderer) -> bool:
    """
    Applies all pending input events to the state.
    Returns False once the user asked to quit.
    """
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            renderer.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            action = KEY_BINDINGS.get(event.key)
            if action is not None:
                action(state)
    return True


def run_viewer_loop(state: SimulationState, renderer: Renderer, clock: pygame.time.Clock):
    """
    The main loop: input, then the idle tick, then drawing, all on one thread.
    Color recomputes happen inside input handling, so a frame is never drawn
    from a half-updated field.
    """
    running = True
    frame = 0

    while running:
        running = handle_events(state, renderer)

        # --- Idle tick ---
        state.advance_rotation()

        # --- Logging (throttled) ---
        if frame % constants.LOG_EVERY_N_FRAMES == 0:
            logger.debug(
                f"Frame={frame}, "
                f"ObserverVelocity={state.observer_velocity:+.2f}, "
                f"ViewAngle={state.view_angle:.1f}, "
                f"FPS={clock.get_fps():.1f}"
            )

        # --- Drawing ---
        renderer.draw(state)
        pygame.display.flip()
        clock.tick(constants.FPS)
        frame += 1


def main():
    """
    Main function to initialize and run the galaxy Doppler viewer.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    with open('config.json', 'r') as f:
        config = json.load(f)
    sim_config = config['simulation']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    state = SimulationState.from_config(sim_config, rng)

    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()
    renderer = Renderer(screen, observer_z=sim_config['observer_position_z'])

    print(CONTROLS_HELP)

    run_viewer_loop(state, renderer, clock)

    logger.info("Application shutting down.")
    pygame.quit()

if __name__ == "__main__":
    main()
