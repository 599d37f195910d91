# constants.py
"""
Application-level constants.

These values are static and do not change between runs. Every tunable in
`config.json` falls back to the default defined here, so the animation
runs even with a sparse configuration file.
"""

# Display settings
# Set to True to run in borderless fullscreen mode.
# Set to False to run in a window of DEFAULT_WIDTH x DEFAULT_HEIGHT.
FULLSCREEN = False
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
DEFAULT_PIXEL_RATIO = 1.0
FPS = 60
WINDOW_TITLE = "Particle Text"
BACKGROUND_COLOR = (0, 0, 0)

# --- Trail Effect ---
# Alpha value for the motion blur overlay (0-255). Lower is a longer trail.
# 31 is roughly 0.12 opacity.
MOTION_BLUR_ALPHA = 31

# --- Word Cycle ---
DEFAULT_WORDS = ["WARP", "LOADING", "PLEASE WAIT"]
# Number of frames each word is held before the next one is sampled.
WORD_INTERVAL_FRAMES = 180

# --- Target Sampling ---
# Only every Nth pixel of the rendered word is considered as a target.
PIXEL_STEPS = 6
# Glyph height as a fraction of min(width, height).
FONT_SCALE = 0.14
FONT_NAME = "Arial"
TEXT_COLOR = (255, 255, 255)

# --- Particle Tuning ---
# Distance below which a particle starts to brake on approach.
CLOSE_ENOUGH_RADIUS = 100.0
MAX_SPEED_RANGE = (4.0, 10.0)
MAX_FORCE_RATIO = 0.05
SIZE_RANGE = (6.0, 12.0)
COLOR_BLEND_RATE_RANGE = (0.0025, 0.03)
# How far beyond each canvas edge the off-canvas direction is sampled,
# as a multiple of the canvas size.
SPAWN_OVERSIZE = 1.0

# Side length of a particle drawn in point mode.
POINT_SIZE = 2
DRAW_AS_POINTS = True

# --- Logging ---
LOG_THROTTLE_STEPS = 600
