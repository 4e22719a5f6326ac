"""Sub-tick motion easing.

Between two ticks a token is shown sliding from its committed cell toward
its planned one. The slide follows a quadratic ease-in/ease-out curve:
accelerating up to the halfway point, then decelerating.
"""

from typing import Tuple

from grid_walk.components import Position
from grid_walk.state import State
from grid_walk.types import Point


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in/ease-out remapping of ``t`` in ``[0, 1]``."""
    if t < 0.5:
        return 2.0 * t * t
    return -1.0 + (4.0 - 2.0 * t) * t


def interpolate(pos: Position, next_pos: Position, t: float) -> Point:
    """Eased point between ``pos`` and ``next_pos`` at tick fraction ``t``.

    Each axis is interpolated independently; ``t = 0`` returns ``pos``
    exactly and ``t = 0.5`` the exact midpoint.
    """
    factor = ease_in_out_quad(t)
    return (
        pos.x + (next_pos.x - pos.x) * factor,
        pos.y + (next_pos.y - pos.y) * factor,
    )


def tick_fraction(state: State, elapsed: float) -> float:
    """Fraction of the tick period elapsed since the last tick, clamped to [0, 1]."""
    fraction = (elapsed - state.last_tick) / state.tick_period
    return min(max(fraction, 0.0), 1.0)


def token_positions_at(state: State, elapsed: float) -> Tuple[Point, ...]:
    """Presentation positions of every token at ``elapsed`` seconds."""
    t = tick_fraction(state, elapsed)
    return tuple(
        interpolate(token.position, token.next_position, t) for token in state.tokens
    )
