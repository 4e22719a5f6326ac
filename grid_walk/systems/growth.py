"""Growth system.

Runs after a commit. If the two tokens' moves collided or crossed, the grid
grows by one, every trail is cleared, and both tokens restart from fresh
random cells with fresh random colors. Otherwise the state is returned as is.
"""

import logging
from dataclasses import replace
from typing import Sequence

from pyrsistent import pvector

from grid_walk.collision import collided
from grid_walk.colors import random_color_pair
from grid_walk.components import Position, Token
from grid_walk.grid import grow, paint
from grid_walk.moves import random_position
from grid_walk.rng import RandomSource
from grid_walk.state import State

logger = logging.getLogger(__name__)


def has_collided(state: State, prev_positions: Sequence[Position]) -> bool:
    """Return True if the moves from ``prev_positions`` to the current ones collide."""
    (a, b), (a_next, b_next) = prev_positions, state.positions
    return collided(a, a_next, b, b_next)


def growth_system(
    state: State, prev_positions: Sequence[Position], rng: RandomSource
) -> State:
    """Grow and reseed the walk if the last commit was a collision.

    Args:
        state (State): State right after the commit system ran.
        prev_positions (Sequence[Position]): Token positions before the commit.
        rng (RandomSource): Source for new positions and colors.

    Returns:
        State: Unchanged state, or a grown one with relocated, recolored
            tokens whose new cells are already painted.
    """
    if not has_collided(state, prev_positions):
        return state

    grid = grow(state.grid)
    relocated = [random_position(grid.size, rng) for _ in state.tokens]
    tokens = []
    for token, pos in zip(state.tokens, relocated):
        color, trail_color = random_color_pair(rng, state.trail_alpha)
        # next_position is re-planned by the planning system
        tokens.append(Token(pos, pos, color, trail_color))
        grid = paint(grid, pos, trail_color)

    logger.info(
        "Crossing at tick %d: grid grows to %d", state.tick + 1, grid.size
    )
    return replace(
        state, grid=grid, tokens=pvector(tokens), growths=state.growths + 1
    )
