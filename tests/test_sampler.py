import numpy as np
import pygame
import pytest

from sampler import TargetSampler


@pytest.fixture(scope="module", autouse=True)
def pygame_fonts():
    pygame.font.init()
    yield
    pygame.font.quit()


def as_set(targets):
    return {tuple(t) for t in targets.tolist()}


def test_warp_targets_within_bounds(rng):
    sampler = TargetSampler({}, rng)
    targets = sampler.sample("WARP", 800, 600)
    assert targets.shape[1] == 2
    assert len(targets) > 0
    assert targets[:, 0].min() >= 0 and targets[:, 0].max() < 800
    assert targets[:, 1].min() >= 0 and targets[:, 1].max() < 600


def test_resampling_gives_same_set_in_different_order(rng):
    sampler = TargetSampler({}, rng)
    first = sampler.sample("WARP", 800, 600)
    second = sampler.sample("WARP", 800, 600)
    assert as_set(first) == as_set(second)
    assert len(first) == len(second)
    assert not np.array_equal(first, second)


def test_targets_follow_stride_and_lie_on_glyph(rng):
    sampler = TargetSampler({'pixel_steps': 6}, rng)
    targets = sampler.sample("WARP", 400, 300)
    assert len(targets) <= 400 * 300 // 6
    flat = targets[:, 1] * 400 + targets[:, 0]
    assert np.all(flat % 6 == 0)

    alpha = pygame.surfarray.array_alpha(sampler.render("WARP", 400, 300))
    assert all(alpha[x, y] > 0 for x, y in targets.tolist())


def test_glyph_is_centered(rng):
    targets = TargetSampler({}, rng).sample("WARP", 800, 600)
    cx, cy = targets.mean(axis=0)
    assert abs(cx - 400) < 80
    assert abs(cy - 300) < 60


def test_smaller_stride_yields_more_targets(rng):
    coarse = TargetSampler({'pixel_steps': 12}, rng).sample("WARP", 800, 600)
    fine = TargetSampler({'pixel_steps': 3}, rng).sample("WARP", 800, 600)
    assert len(fine) > len(coarse)


@pytest.mark.parametrize("size", [(0, 0), (0, 600), (800, 0), (-5, 10)])
def test_empty_viewport_gives_no_targets(rng, size):
    targets = TargetSampler({}, rng).sample("WARP", *size)
    assert targets.shape == (0, 2)


def test_blank_word_gives_no_targets(rng):
    assert len(TargetSampler({}, rng).sample(" ", 200, 100)) == 0


def test_raster_failure_gives_no_targets(rng, monkeypatch):
    def no_surface(*args, **kwargs):
        raise pygame.error("no surface")

    monkeypatch.setattr(pygame, "Surface", no_surface)
    targets = TargetSampler({}, rng).sample("WARP", 100, 100)
    assert targets.shape == (0, 2)


def test_font_failure_gives_no_targets(rng, monkeypatch):
    sampler = TargetSampler({}, rng)

    def broken_render(word, width, height):
        raise pygame.error("font unavailable")

    monkeypatch.setattr(sampler, "render", broken_render)
    assert sampler.sample("WARP", 800, 600).shape == (0, 2)
