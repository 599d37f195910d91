# particle.py
"""
Defines the per-particle state record.

A Particle is a plain mutable record: all behaviour (steering, color
blending, the kill transition) lives in `simulation.py` as explicit
functions acting on it. The record carries an explicit lifecycle tag,
`Phase`, instead of a bare killed flag.
"""
import enum
from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np

from constants import (
    CLOSE_ENOUGH_RADIUS, COLOR_BLEND_RATE_RANGE, MAX_FORCE_RATIO,
    MAX_SPEED_RANGE, SIZE_RANGE, SPAWN_OVERSIZE
)
from primitives import BLACK, Color, Vector2, random_far_point

# --- Data Contracts ---
#
# class Particle:
#   - pos, vel, acc, target: Vector2 (logical canvas pixels).
#   - close_enough_radius, max_speed, max_force, size, color_blend_rate:
#     floats fixed at creation.
#   - phase: Phase.SEEKING while it holds a glyph target,
#     Phase.DISSOLVING after a kill until it is pruned.
#   - start_color, target_color: Color; color_weight: float in [0, 1].
#
# spawn_particle(width, height, rng, params) -> Particle:
#   - Outputs: a new SEEKING particle placed outside the canvas, with tuning
#     constants drawn from the configured ranges.
#   - Invariants: max_force == max_speed * max_force_ratio.


class Phase(enum.Enum):
    SEEKING = "seeking"
    DISSOLVING = "dissolving"


@dataclass(eq=False)
class Particle:
    pos: Vector2 = field(default_factory=Vector2)
    vel: Vector2 = field(default_factory=Vector2)
    acc: Vector2 = field(default_factory=Vector2)
    target: Vector2 = field(default_factory=Vector2)

    close_enough_radius: float = CLOSE_ENOUGH_RADIUS
    max_speed: float = 1.0
    max_force: float = 0.1
    size: float = 10.0
    color_blend_rate: float = 0.01

    phase: Phase = Phase.SEEKING
    start_color: Color = BLACK
    target_color: Color = BLACK
    color_weight: float = 0.0

    @property
    def is_killed(self) -> bool:
        return self.phase is Phase.DISSOLVING

    def current_color(self) -> Color:
        """The blended color at the current weight, unrounded."""
        return self.start_color.lerp(self.target_color, self.color_weight)

    def is_outside(self, width: float, height: float) -> bool:
        return (
            self.pos.x < 0 or self.pos.x > width
            or self.pos.y < 0 or self.pos.y > height
        )


def spawn_particle(
    width: float, height: float, rng: np.random.Generator, params: Dict[str, Any]
) -> Particle:
    """
    Creates a particle at a random point outside the canvas.

    Args:
        width (float): Logical canvas width.
        height (float): Logical canvas height.
        rng (np.random.Generator): Source of all randomness.
        params (Dict[str, Any]): The `particles` section of the config.
    """
    speed_low, speed_high = params.get('max_speed_range', MAX_SPEED_RANGE)
    size_low, size_high = params.get('size_range', SIZE_RANGE)
    blend_low, blend_high = params.get('color_blend_rate_range', COLOR_BLEND_RATE_RANGE)

    max_speed = float(rng.uniform(speed_low, speed_high))
    return Particle(
        pos=random_far_point(width, height, rng, params.get('spawn_oversize', SPAWN_OVERSIZE)),
        close_enough_radius=float(params.get('close_enough_radius', CLOSE_ENOUGH_RADIUS)),
        max_speed=max_speed,
        max_force=max_speed * params.get('max_force_ratio', MAX_FORCE_RATIO),
        size=float(rng.uniform(size_low, size_high)),
        color_blend_rate=float(rng.uniform(blend_low, blend_high)),
    )
