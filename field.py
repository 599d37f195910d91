# field.py
"""
Manages the reusable pool of particles.

Pool slots are reused across words: each new target set is spread over the
existing particles first, the pool grows only when a word needs more
targets than there are particles, and surplus particles are killed so they
dissolve under the normal physics. Entries are removed only once they are
dissolving and have left the canvas.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pygame

from constants import SPAWN_OVERSIZE
from particle import Particle, Phase, spawn_particle
from primitives import Color
from simulation import kill, move, retarget
from visualization import draw_particle

# --- Data Contracts ---
#
# class ParticleField:
#   - __init__(self, params: Dict[str, Any], rng: np.random.Generator):
#     - Inputs:
#       - params: The `particles` section of config.json.
#       - rng: Generator for spawn points, tuning constants, colors and
#         kill destinations.
#
#   - assign(self, targets: np.ndarray, width: float, height: float) -> Tuple[int, int, int]:
#     - Inputs: (T, 2) array of target coordinates for the new word.
#     - Outputs: (reused, spawned, killed) counts.
#     - Invariants: Afterwards len(self) == max(P, T) where P is the pool
#       size before the call. Slot i < T seeks targets[i]; slots >= T are
#       dissolving.
#
#   - update(self, surface, width, height, draw_as_points) -> int:
#     - Side Effects: moves and draws every particle from the last slot to
#       the first, removing dissolving particles that are outside the canvas.
#     - Outputs: number of removed particles.


class ParticleField:
    """
    An ordered pool of Particles reassigned on every word.
    """
    def __init__(self, params: Dict[str, Any], rng: np.random.Generator):
        self.params = params
        self.rng = rng
        self.oversize = params.get('spawn_oversize', SPAWN_OVERSIZE)
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    @property
    def dissolving_count(self) -> int:
        return sum(1 for p in self.particles if p.phase is Phase.DISSOLVING)

    def assign(self, targets: np.ndarray, width: float, height: float) -> Tuple[int, int, int]:
        """
        Distributes a new target set over the pool.

        Args:
            targets (np.ndarray): Target coordinates, one row per target.
            width (float): Logical canvas width.
            height (float): Logical canvas height.
        """
        coords = np.asarray(targets).reshape(-1, 2).tolist()
        color = Color.random(self.rng)
        pool_size = len(self.particles)
        target_count = len(coords)

        for particle, (x, y) in zip(self.particles, coords):
            retarget(particle, x, y, color)

        for x, y in coords[pool_size:]:
            particle = spawn_particle(width, height, self.rng, self.params)
            retarget(particle, x, y, color)
            self.particles.append(particle)

        killed = 0
        for particle in self.particles[target_count:pool_size]:
            if kill(particle, width, height, self.rng, self.oversize):
                killed += 1

        reused = min(pool_size, target_count)
        spawned = max(0, target_count - pool_size)
        logging.debug(
            f"Assigned {target_count} targets: {reused} reused, "
            f"{spawned} spawned, {killed} killed."
        )
        return reused, spawned, killed

    def update(
        self, surface: Optional[pygame.Surface], width: float, height: float,
        draw_as_points: bool
    ) -> int:
        """
        Runs one simulation and draw tick over the whole pool.

        Drawing is skipped when no surface is available; movement and
        pruning still happen.
        """
        removed = 0
        # Walk backwards so deleting a slot never skips an unvisited one.
        for i in range(len(self.particles) - 1, -1, -1):
            particle = self.particles[i]
            move(particle)
            if surface is not None:
                draw_particle(surface, particle, draw_as_points)

            if particle.phase is Phase.DISSOLVING and particle.is_outside(width, height):
                del self.particles[i]
                removed += 1
        return removed
