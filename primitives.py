# primitives.py
"""
Plain 2D vector and RGB color helpers shared by the simulation and the
renderer.

Vectors are pygame's `Vector2`; colors are immutable float triples so that
a blend can be frozen mid-way without losing precision.
"""
from typing import NamedTuple, Tuple

import numpy as np
from pygame.math import Vector2

__all__ = ["Vector2", "Color", "BLACK", "random_far_point"]


class Color(NamedTuple):
    """An RGB triple with channels in 0-255, fractional while blending."""
    r: float
    g: float
    b: float

    def lerp(self, other: "Color", weight: float) -> "Color":
        """Linear interpolation from this color towards `other`."""
        return Color(
            self.r + (other.r - self.r) * weight,
            self.g + (other.g - self.g) * weight,
            self.b + (other.b - self.b) * weight,
        )

    def rounded(self) -> Tuple[int, int, int]:
        """Integer channels suitable for drawing (round half up)."""
        return (int(self.r + 0.5), int(self.g + 0.5), int(self.b + 0.5))

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Color":
        r, g, b = rng.uniform(0.0, 255.0, size=3)
        return cls(float(r), float(g), float(b))


BLACK = Color(0.0, 0.0, 0.0)


def random_far_point(
    width: float, height: float, rng: np.random.Generator, oversize: float = 1.0
) -> Vector2:
    """
    Returns a point outside the canvas, along a random direction from its center.

    A point is drawn uniformly from the canvas rectangle grown by `oversize`
    canvas sizes on each side. The direction from the center to that point is
    scaled to (width + height) / 2, which is always beyond the half-diagonal,
    so the result lies strictly outside the canvas for any non-empty area.
    """
    center = Vector2(width / 2, height / 2)
    sample = Vector2(
        rng.uniform(-oversize * width, (1.0 + oversize) * width),
        rng.uniform(-oversize * height, (1.0 + oversize) * height),
    )
    direction = sample - center
    magnitude = (width + height) / 2
    if direction.length_squared() > 0 and magnitude > 0:
        direction.scale_to_length(magnitude)
    else:
        direction = Vector2(0, 0)
    return center + direction
