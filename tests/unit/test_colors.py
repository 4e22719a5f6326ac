import random

from grid_walk.colors import (
    TRAIL_ALPHA,
    initial_colors,
    random_color_pair,
    random_opaque_color,
    trail_variant,
)
from grid_walk.components import Color
from tests.test_utils import FixedRandom


def test_random_opaque_color_uses_three_bytes() -> None:
    color = random_opaque_color(FixedRandom(ints=[0, 128, 255]))
    assert color == Color(0, 128, 255, 255)


def test_random_opaque_color_channels_in_range() -> None:
    rng = random.Random(99)
    for _ in range(200):
        color = random_opaque_color(rng)
        assert all(0 <= c <= 255 for c in (color.r, color.g, color.b))
        assert color.a == 255


def test_trail_variant_keeps_rgb_and_lowers_alpha() -> None:
    trail = trail_variant(Color(1, 2, 3))
    assert trail == Color(1, 2, 3, TRAIL_ALPHA)
    assert trail_variant(Color(1, 2, 3), alpha=40).a == 40


def test_random_color_pair() -> None:
    color, trail = random_color_pair(FixedRandom(ints=[9, 8, 7]))
    assert color == Color(9, 8, 7)
    assert trail == Color(9, 8, 7, TRAIL_ALPHA)


def test_initial_colors_are_independent_draws() -> None:
    rng = FixedRandom(ints=[1, 2, 3, 4, 5, 6])
    assert initial_colors(rng) == (Color(1, 2, 3), Color(4, 5, 6))
    assert rng.ints == []
