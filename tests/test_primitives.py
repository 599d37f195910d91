import numpy as np
import pytest

from primitives import BLACK, Color, Vector2, random_far_point


def test_color_lerp_endpoints_and_midpoint():
    start = Color(0.0, 100.0, 200.0)
    end = Color(255.0, 100.0, 0.0)
    assert start.lerp(end, 0.0) == start
    assert start.lerp(end, 1.0) == end
    assert start.lerp(end, 0.5) == Color(127.5, 100.0, 100.0)


def test_color_rounded_rounds_half_up():
    assert Color(127.5, 0.49, 254.6).rounded() == (128, 0, 255)


def test_random_color_in_byte_range(rng):
    for _ in range(50):
        c = Color.random(rng)
        assert all(0.0 <= channel <= 255.0 for channel in c)


def test_far_point_lies_outside_canvas(rng):
    width, height = 800, 600
    center = Vector2(width / 2, height / 2)
    for _ in range(200):
        p = random_far_point(width, height, rng)
        assert (p - center).length() == pytest.approx((width + height) / 2)
        assert p.x < 0 or p.x > width or p.y < 0 or p.y > height


def test_far_point_is_reproducible_with_seed():
    a = random_far_point(320, 240, np.random.default_rng(7))
    b = random_far_point(320, 240, np.random.default_rng(7))
    assert a == b


def test_far_point_on_empty_canvas_collapses_to_center(rng):
    assert random_far_point(0, 0, rng) == Vector2(0, 0)


def test_black_is_zero():
    assert BLACK.rounded() == (0, 0, 0)
