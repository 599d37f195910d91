# main.py
"""
Main entry point for the particle text animation.

This script orchestrates the application lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the window and starts the animation on its canvas.
4. Pumps events and frames until the user quits or max_steps is reached.
5. Handles clean shutdown.
"""
import cProfile
import io
import logging
import pstats
import sys

import numpy as np

from constants import FPS, LOG_THROTTLE_STEPS, MOTION_BLUR_ALPHA
from utils import load_config, resolve_words, setup_logging


def main(config_path: str = 'config.json') -> int:
    """
    The main function to run the animation.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return 1

    setup_logging(config)

    logging.info("--- Particle Text Starting ---")

    anim_params = config.get('animation', {})
    particle_params = config.get('particles', {})
    display_params = config.get('display', {})
    run_params = config.get('run_control', {})

    try:
        words = resolve_words(config)
    except ValueError:
        return 1

    from animation import AnimationLoop
    from visualization import FrameScheduler, Visualizer

    # --- Component Initialization ---
    visualizer = Visualizer(display_params, trail_alpha=anim_params.get('trail_alpha', MOTION_BLUR_ALPHA))
    scheduler = FrameScheduler(display_params.get('fps', FPS))
    rng = np.random.default_rng(anim_params.get('seed'))
    log_throttle = run_params.get('log_throttle_steps', LOG_THROTTLE_STEPS)
    loop = AnimationLoop(scheduler, anim_params, particle_params, rng, log_throttle=log_throttle)

    max_steps = run_params.get('max_steps')
    profiler = cProfile.Profile() if run_params.get('profile', False) else None

    loop.start(words, visualizer.canvas)
    if profiler is not None:
        profiler.enable()

    step_num = 0
    running = True
    while running and scheduler.has_pending:
        running, resized = visualizer.poll_events()
        if not running:
            break
        if resized:
            loop.notify_resize()

        scheduler.run_frame()
        visualizer.present()
        step_num += 1

        if max_steps is not None and step_num >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping animation.")
            running = False

    if profiler is not None:
        profiler.disable()

    loop.stop()
    visualizer.close()
    logging.info("Animation loop finished.")

    if profiler is not None:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particle Text Shutting Down ---")
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
