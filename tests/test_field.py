import numpy as np
import pygame

from field import ParticleField
from particle import Phase
from primitives import Vector2

WIDTH, HEIGHT = 160, 120


def grid_targets(count):
    xs = np.arange(count) % 40 + 60
    ys = np.arange(count) // 40 + 50
    return np.column_stack((xs, ys)).astype(np.int32)


def settle(field, frames, surface=None):
    for _ in range(frames):
        field.update(surface, WIDTH, HEIGHT, True)


def test_first_assignment_spawns_one_particle_per_target(rng):
    field = ParticleField({}, rng)
    targets = grid_targets(30)
    assert field.assign(targets, WIDTH, HEIGHT) == (0, 30, 0)
    assert len(field) == 30
    for particle, (x, y) in zip(field.particles, targets.tolist()):
        assert particle.target == Vector2(x, y)
        assert particle.phase is Phase.SEEKING
        assert particle.is_outside(WIDTH, HEIGHT)


def test_assignment_shares_one_color_per_word(rng):
    field = ParticleField({}, rng)
    field.assign(grid_targets(10), WIDTH, HEIGHT)
    assert len({p.target_color for p in field.particles}) == 1


def test_reassignment_reuses_slots_in_place(rng):
    field = ParticleField({}, rng)
    field.assign(grid_targets(20), WIDTH, HEIGHT)
    settle(field, 50)
    before = list(field.particles)
    positions = [Vector2(p.pos) for p in before]

    new_targets = grid_targets(20)[::-1]
    assert field.assign(new_targets, WIDTH, HEIGHT) == (20, 0, 0)
    assert field.particles == before
    assert [p.pos for p in field.particles] == positions
    assert all(p.color_weight == 0.0 for p in field.particles)


def test_shrinking_kills_surplus_then_converges(rng):
    field = ParticleField({}, rng)
    field.assign(grid_targets(50), WIDTH, HEIGHT)
    settle(field, 200)
    assert len(field) == 50

    assert field.assign(grid_targets(20), WIDTH, HEIGHT) == (20, 0, 30)
    assert len(field) == max(50, 20)
    assert field.dissolving_count == 30
    assert all(p.phase is Phase.SEEKING for p in field.particles[:20])

    settle(field, 600)
    assert len(field) == 20
    assert field.dissolving_count == 0


def test_growing_appends_new_particles(rng):
    field = ParticleField({}, rng)
    field.assign(grid_targets(10), WIDTH, HEIGHT)
    settle(field, 20)
    first = list(field.particles)

    assert field.assign(grid_targets(25), WIDTH, HEIGHT) == (10, 15, 0)
    assert len(field) == max(10, 25)
    assert field.particles[:10] == first


def test_empty_target_set_dissolves_everything(rng):
    field = ParticleField({}, rng)
    field.assign(grid_targets(15), WIDTH, HEIGHT)
    settle(field, 100)

    assert field.assign(np.empty((0, 2), dtype=np.int32), WIDTH, HEIGHT) == (0, 0, 15)
    assert field.dissolving_count == 15
    settle(field, 600)
    assert len(field) == 0


def test_seeking_particles_are_never_pruned(rng):
    field = ParticleField({}, rng)
    field.assign(grid_targets(10), WIDTH, HEIGHT)
    # Freshly spawned particles start off canvas but must not be removed.
    assert field.update(None, WIDTH, HEIGHT, True) == 0
    assert len(field) == 10


def test_update_draws_onto_surface(rng):
    surface = pygame.Surface((WIDTH, HEIGHT))
    surface.fill((0, 0, 0))
    field = ParticleField({'color_blend_rate_range': [0.5, 0.5]}, rng)
    field.assign(grid_targets(40), WIDTH, HEIGHT)
    settle(field, 300, surface)

    pixels = pygame.surfarray.array3d(surface)
    assert pixels.any()
    assert all(p.color_weight == 1.0 for p in field.particles)


def test_circle_mode_draws(rng):
    surface = pygame.Surface((WIDTH, HEIGHT))
    surface.fill((0, 0, 0))
    field = ParticleField({}, rng)
    field.assign(grid_targets(5), WIDTH, HEIGHT)
    for _ in range(300):
        field.update(surface, WIDTH, HEIGHT, False)
    assert pygame.surfarray.array3d(surface).any()


def test_point_mode_floors_negative_coordinates():
    from particle import Particle
    from primitives import Color
    from visualization import draw_particle

    surface = pygame.Surface((10, 10))
    surface.fill((0, 0, 0))
    particle = Particle(pos=Vector2(-1.5, 4.2), start_color=Color(255, 255, 255),
                        target_color=Color(255, 255, 255))
    draw_particle(surface, particle, True)
    # Covers columns -2 and -1 only; column 0 stays untouched.
    assert tuple(surface.get_at((0, 4)))[:3] == (0, 0, 0)

    particle.pos = Vector2(3.7, 4.2)
    draw_particle(surface, particle, True)
    assert tuple(surface.get_at((3, 4)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((4, 5)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((5, 4)))[:3] == (0, 0, 0)
