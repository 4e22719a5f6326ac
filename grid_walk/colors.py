"""Color assignment.

Tokens get a random opaque marker color and a faint trail variant of it. The
same pair is reassigned to both tokens whenever the grid grows.
"""

from typing import Tuple

from grid_walk.components import Color
from grid_walk.rng import RandomSource

TRAIL_ALPHA = 15
"""Alpha of permanent trail marks (about 6% opacity)."""

BACKGROUND_COLOR = Color(47, 47, 47, 255)
"""Color of a cell that has not been painted since the last reset."""

CLASSIC_COLORS: Tuple[Color, Color] = (Color(235, 65, 55), Color(0, 155, 240))
"""Red / blue starting pair, usable via ``WalkConfig.initial_colors``."""


def random_opaque_color(rng: RandomSource) -> Color:
    """Three independent uniform bytes, fully opaque."""
    return Color(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))


def trail_variant(color: Color, alpha: int = TRAIL_ALPHA) -> Color:
    """Same RGB as ``color`` with the low trail alpha."""
    return color.with_alpha(alpha)


def random_color_pair(
    rng: RandomSource, alpha: int = TRAIL_ALPHA
) -> Tuple[Color, Color]:
    """Return ``(color, trail_color)`` for one token."""
    color = random_opaque_color(rng)
    return color, trail_variant(color, alpha)


def initial_colors(rng: RandomSource) -> Tuple[Color, Color]:
    """Two independent random opaque colors, one per token."""
    return random_opaque_color(rng), random_opaque_color(rng)
