# simulation.py
"""
Handles the per-particle physics and color state transitions.

The steering kernel is a pure Numba-jitted function of the particle's
position, velocity, target and tuning constants. `move` integrates its
output with semi-implicit Euler; there is no drag term and no fixed
timestep, so one call corresponds to one displayed frame.

Particles are stepped one at a time through the jitted kernel rather than
as whole arrays: the pool is a list of records that is reordered, grown
and pruned every word, and packing it into arrays each frame would cost
as much as the per-call dispatch. `_steer_numba.py_func` is the same
kernel uncompiled, should a profile ever show the dispatch dominating.
"""
import numpy as np
from numba import jit

from constants import SPAWN_OVERSIZE
from particle import Particle, Phase
from primitives import BLACK, Color, Vector2, random_far_point

# --- Data Contracts ---
#
# steering_force(pos, vel, target, radius, max_speed, max_force) -> Vector2:
#   - Outputs: the arrival-steering force for one tick.
#   - Invariants: |force| <= max_force. Desired speed is max_speed, scaled
#     by distance / radius only while distance < radius. A target
#     coincident with pos desires zero velocity.
#
# move(particle) -> None:
#   - Side Effects: acc += force; vel += acc; pos += vel; acc reset to 0.
#
# advance_color(particle) -> Color:
#   - Side Effects: color_weight grows by color_blend_rate, capped at 1.0.
#
# kill(particle, width, height, rng) -> bool:
#   - Side Effects: the particle is sent towards a point outside the canvas
#     and fades to black from its current color. No-op when already killed.
#
# retarget(particle, x, y, color) -> None:
#   - Side Effects: the particle seeks (x, y) and blends into `color`.
#     Position and velocity are untouched.


@jit(nopython=True)
def _steer_numba(px, py, vx, vy, tx, ty, radius, max_speed, max_force):
    """
    Numba-jitted arrival steering.

    Returns the steering force as an (x, y) tuple. Both normalisations are
    guarded so a zero-length vector contributes nothing.
    """
    dx = tx - px
    dy = ty - py
    distance = np.sqrt(dx * dx + dy * dy)

    speed = max_speed
    if distance < radius:
        speed = max_speed * distance / radius

    desired_x = 0.0
    desired_y = 0.0
    if distance > 0.0:
        desired_x = dx / distance * speed
        desired_y = dy / distance * speed

    steer_x = desired_x - vx
    steer_y = desired_y - vy
    steer_magnitude = np.sqrt(steer_x * steer_x + steer_y * steer_y)
    if steer_magnitude > max_force:
        steer_x = steer_x / steer_magnitude * max_force
        steer_y = steer_y / steer_magnitude * max_force
    return steer_x, steer_y


def steering_force(
    pos: Vector2, vel: Vector2, target: Vector2,
    radius: float, max_speed: float, max_force: float
) -> Vector2:
    fx, fy = _steer_numba(
        float(pos.x), float(pos.y), float(vel.x), float(vel.y),
        float(target.x), float(target.y),
        float(radius), float(max_speed), float(max_force)
    )
    return Vector2(fx, fy)


def move(particle: Particle) -> None:
    """Advances one particle by one tick towards its target."""
    force = steering_force(
        particle.pos, particle.vel, particle.target,
        particle.close_enough_radius, particle.max_speed, particle.max_force
    )
    particle.acc += force
    particle.vel += particle.acc
    particle.pos += particle.vel
    particle.acc.update(0, 0)


def advance_color(particle: Particle) -> Color:
    """Steps the color blend and returns the color to draw this frame."""
    if particle.color_weight < 1.0:
        particle.color_weight = min(particle.color_weight + particle.color_blend_rate, 1.0)
    return particle.current_color()


def kill(
    particle: Particle, width: float, height: float,
    rng: np.random.Generator, oversize: float = SPAWN_OVERSIZE
) -> bool:
    """
    Sends a particle off the canvas and starts its fade to black.

    Returns:
        bool: True if the particle was killed by this call, False if it
        was already dissolving.
    """
    if particle.phase is Phase.DISSOLVING:
        return False

    particle.target = random_far_point(width, height, rng, oversize)
    particle.start_color = particle.current_color()
    particle.target_color = BLACK
    particle.color_weight = 0.0
    particle.phase = Phase.DISSOLVING
    return True


def retarget(particle: Particle, x: float, y: float, color: Color) -> None:
    """Points a particle at a new glyph target and restarts its color blend."""
    particle.phase = Phase.SEEKING
    particle.start_color = particle.current_color()
    particle.target_color = color
    particle.color_weight = 0.0
    particle.target.update(float(x), float(y))
