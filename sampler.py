# sampler.py
"""
Turns a word into a set of particle targets.

The word is rendered with a Pygame font onto an offscreen surface the size
of the logical canvas. The alpha channel is read back through
`pygame.surfarray` and walked with a fixed stride; every opaque sample
becomes a target coordinate.
"""
import logging
from typing import Any, Dict

import numpy as np
import pygame

from constants import FONT_NAME, FONT_SCALE, PIXEL_STEPS, TEXT_COLOR

# --- Data Contracts ---
#
# class TargetSampler:
#   - __init__(self, params: Dict[str, Any], rng: np.random.Generator):
#     - Inputs:
#       - params: The `animation` section of config.json.
#         - "pixel_steps": int, stride over the flattened pixel index.
#         - "font_scale": float, glyph size as a fraction of min(w, h).
#         - "font_name": str, system font to look up.
#       - rng: Generator used to shuffle the targets.
#
#   - sample(self, word: str, width: int, height: int) -> np.ndarray:
#     - Outputs: int32 array of shape (N, 2) holding (x, y) targets.
#     - Invariants: 0 <= x < width, 0 <= y < height. Every target lies on a
#       pixel with alpha > 0 and its flat index (y * width + x) is a
#       multiple of pixel_steps. N <= ceil(width * height / pixel_steps).
#       The same word and size always give the same set of targets; only
#       the order changes.
#     - Failure: returns an empty (0, 2) array when the area is empty or
#       the offscreen surface/font cannot be created.


def _empty_targets() -> np.ndarray:
    return np.empty((0, 2), dtype=np.int32)


class TargetSampler:
    """
    Samples opaque glyph pixels of a rendered word in random order.
    """
    def __init__(self, params: Dict[str, Any], rng: np.random.Generator):
        self.pixel_steps = max(1, int(params.get('pixel_steps', PIXEL_STEPS)))
        self.font_scale = float(params.get('font_scale', FONT_SCALE))
        self.font_name = params.get('font_name', FONT_NAME)
        self.rng = rng
        # Fonts are cached per pixel size; resizes are rare.
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _get_font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is not None:
            return font

        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.SysFont(self.font_name, size, bold=True)
        except pygame.error:
            logging.warning(f"Font '{self.font_name}' not available, falling back to default font.")
            font = pygame.font.Font(None, size)
        self._fonts[size] = font
        logging.debug(f"Loaded font '{self.font_name}' at {size}px.")
        return font

    def render(self, word: str, width: int, height: int) -> pygame.Surface:
        """Renders `word` centered on a transparent surface of the given size."""
        size = max(1, int(min(width, height) * self.font_scale))
        raster = pygame.Surface((width, height), pygame.SRCALPHA)
        raster.fill((0, 0, 0, 0))
        text_surf = self._get_font(size).render(word, True, TEXT_COLOR)
        raster.blit(text_surf, text_surf.get_rect(center=(width / 2, height / 2)))
        return raster

    def sample(self, word: str, width: int, height: int) -> np.ndarray:
        """
        Returns shuffled target coordinates for `word` on a width x height canvas.
        """
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            logging.debug(f"Empty viewport ({width}x{height}); no targets for '{word}'.")
            return _empty_targets()

        try:
            raster = self.render(word, width, height)
            # surfarray is indexed [x, y]; transpose to row-major so the flat
            # index is y * width + x.
            alpha = pygame.surfarray.array_alpha(raster).T.ravel()
        except pygame.error as e:
            logging.warning(f"Could not rasterize '{word}' at {width}x{height}: {e}")
            return _empty_targets()

        indices = np.arange(0, alpha.size, self.pixel_steps)
        opaque = indices[alpha[indices] > 0]
        opaque = self.rng.permutation(opaque)

        targets = np.column_stack((opaque % width, opaque // width)).astype(np.int32)
        logging.debug(f"Sampled {len(targets)} targets for '{word}' at {width}x{height}.")
        return targets
