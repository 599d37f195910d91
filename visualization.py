# visualization.py
"""
Handles the rendering host for the particle text animation using Pygame.

`Canvas` is the drawing surface the animation paints on (logical pixels),
`FrameScheduler` is the frame-pacing primitive, and `Visualizer` owns the
window: it pumps events and presents the canvas scaled by the pixel ratio.
"""
import logging
import math
from typing import Any, Callable, Dict, Optional, Tuple

import pygame

from constants import (
    BACKGROUND_COLOR, DEFAULT_HEIGHT, DEFAULT_PIXEL_RATIO, DEFAULT_WIDTH, FPS,
    FULLSCREEN, MOTION_BLUR_ALPHA, POINT_SIZE, WINDOW_TITLE
)
from simulation import advance_color

# Forward reference for type hinting
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from particle import Particle


# --- Data Contracts ---
#
# class Canvas:
#   - __init__(self, width: int, height: int, pixel_ratio: float, trail_alpha: int):
#     - Inputs: logical size, device pixel ratio, alpha of the trail overlay.
#     - Side Effects: Creates the logical drawing surface and the overlay.
#     - Invariants: `surface` is None when the area is empty; otherwise its
#       size is exactly (width, height).
#
#   - fade(self) -> bool:
#     - Side Effects: Blits the translucent black overlay over the surface,
#       fading the previous frame instead of clearing it.
#     - Outputs: False if there is no surface to draw on.
#
# class FrameScheduler:
#   - request_frame(self, callback) -> int: registers a callback for the
#     next frame and returns a handle.
#   - cancel(self, handle) -> None: drops a pending callback.
#   - run_frame(self) -> int: runs every callback registered before this
#     frame, then waits for the frame budget. Callbacks registered while
#     running fire on the following frame.
#
# class Visualizer:
#   - poll_events(self) -> Tuple[bool, bool]: (running, resized).
#   - present(self) -> None: copies the canvas to the window and flips.


class Canvas:
    """
    A resizable drawing surface in logical pixels with a trail overlay.
    """
    def __init__(
        self, width: int, height: int,
        pixel_ratio: float = DEFAULT_PIXEL_RATIO, trail_alpha: int = MOTION_BLUR_ALPHA
    ):
        self.trail_alpha = int(trail_alpha)
        self.pixel_ratio = float(pixel_ratio) if pixel_ratio and pixel_ratio > 0 else 1.0
        self.surface: Optional[pygame.Surface] = None
        self.blur_surface: Optional[pygame.Surface] = None
        self.resize(width, height)

    def resize(self, width: int, height: int, pixel_ratio: Optional[float] = None) -> None:
        """Recreates the surfaces for a new logical size."""
        if pixel_ratio is not None and pixel_ratio > 0:
            self.pixel_ratio = float(pixel_ratio)
        self.width = max(0, int(width))
        self.height = max(0, int(height))

        if self.width == 0 or self.height == 0:
            logging.warning(f"Canvas has no drawable area ({self.width}x{self.height}).")
            self.surface = None
            self.blur_surface = None
            return

        self.surface = pygame.Surface((self.width, self.height))
        self.surface.fill(BACKGROUND_COLOR)
        # Blitted every frame to fade what was drawn before.
        self.blur_surface = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        self.blur_surface.fill((BACKGROUND_COLOR[0], BACKGROUND_COLOR[1], BACKGROUND_COLOR[2], self.trail_alpha))
        logging.debug(f"Canvas sized to {self.width}x{self.height} (pixel ratio {self.pixel_ratio}).")

    @property
    def pixel_size(self) -> Tuple[int, int]:
        """Size of the backing window in device pixels."""
        return (
            int(math.floor(self.width * self.pixel_ratio)),
            int(math.floor(self.height * self.pixel_ratio)),
        )

    def fade(self) -> bool:
        if self.surface is None:
            return False
        self.surface.blit(self.blur_surface, (0, 0))
        return True


def draw_particle(surface: pygame.Surface, particle: "Particle", draw_as_points: bool) -> None:
    """
    Advances the particle's color blend and paints it.

    Point mode draws a small filled square; otherwise a filled circle whose
    diameter is the particle size.
    """
    color = advance_color(particle).rounded()
    x, y = particle.pos.x, particle.pos.y
    if draw_as_points:
        surface.fill(color, (math.floor(x), math.floor(y), POINT_SIZE, POINT_SIZE))
        return
    pygame.draw.circle(surface, color, (x, y), particle.size / 2)


class FrameScheduler:
    """
    Runs registered callbacks once per display frame, capped at `fps`.
    """
    def __init__(self, fps: int = FPS):
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._callbacks: Dict[int, Callable[[], None]] = {}
        self._next_handle = 0

    def request_frame(self, callback: Callable[[], None]) -> int:
        self._next_handle += 1
        self._callbacks[self._next_handle] = callback
        return self._next_handle

    def cancel(self, handle: Optional[int]) -> None:
        if handle is not None:
            self._callbacks.pop(handle, None)

    @property
    def has_pending(self) -> bool:
        return bool(self._callbacks)

    def run_frame(self) -> int:
        callbacks, self._callbacks = self._callbacks, {}
        for callback in callbacks.values():
            callback()
        self.clock.tick(self.fps)
        return len(callbacks)


class Visualizer:
    """
    Owns the Pygame window the canvas is presented in.
    """
    def __init__(self, params: Optional[Dict[str, Any]] = None, trail_alpha: int = MOTION_BLUR_ALPHA):
        """
        Initializes Pygame and the display window.

        Args:
            params (Dict[str, Any]): The `display` section of the config.
            trail_alpha (int): Alpha of the motion blur overlay.
        """
        params = params if params is not None else {}
        pygame.init()
        pygame.font.init()

        self.pixel_ratio = float(params.get('pixel_ratio', DEFAULT_PIXEL_RATIO)) or 1.0
        self.flags = pygame.RESIZABLE if params.get('resizable', True) else 0

        if params.get('fullscreen', FULLSCREEN):
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            pixel_w, pixel_h = self.screen.get_size()
            width = int(pixel_w / self.pixel_ratio)
            height = int(pixel_h / self.pixel_ratio)
            self.canvas = Canvas(width, height, self.pixel_ratio, trail_alpha)
        else:
            width = params.get('width', DEFAULT_WIDTH)
            height = params.get('height', DEFAULT_HEIGHT)
            self.canvas = Canvas(width, height, self.pixel_ratio, trail_alpha)
            self.screen = pygame.display.set_mode(self.canvas.pixel_size, self.flags)

        pygame.display.set_caption(params.get('title', WINDOW_TITLE))
        logging.info(
            f"Visualizer initialized with Pygame display {self.screen.get_size()} "
            f"(logical {self.canvas.width}x{self.canvas.height})."
        )

    def resize(self, pixel_width: int, pixel_height: int) -> None:
        """Resizes the canvas to match a new window size in device pixels."""
        self.screen = pygame.display.get_surface()
        self.canvas.resize(int(pixel_width / self.pixel_ratio), int(pixel_height / self.pixel_ratio))
        logging.info(f"Window resized to {pixel_width}x{pixel_height}.")

    def poll_events(self) -> Tuple[bool, bool]:
        """
        Handles pending Pygame events.

        Returns:
            Tuple[bool, bool]: (running, resized). running is False once
            the user has quit.
        """
        resized = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logging.info("Quit event received. Shutting down visualizer.")
                return False, resized

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logging.info("ESC key pressed. Shutting down visualizer.")
                return False, resized

            if event.type == pygame.VIDEORESIZE:
                self.resize(event.w, event.h)
                resized = True
        return True, resized

    def present(self) -> None:
        """Copies the canvas onto the window, scaling by the pixel ratio."""
        surface = self.canvas.surface
        if surface is None:
            self.screen.fill(BACKGROUND_COLOR)
        elif surface.get_size() == self.screen.get_size():
            self.screen.blit(surface, (0, 0))
        else:
            self.screen.blit(pygame.transform.smoothscale(surface, self.screen.get_size()), (0, 0))
        pygame.display.flip()

    def close(self):
        """Shuts down Pygame."""
        pygame.font.quit()
        pygame.quit()
