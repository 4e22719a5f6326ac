"""Initial state construction.

Both tokens start on uniformly random cells of the starting grid (they may
coincide), each with its cell already painted and a first move planned.
"""

from pyrsistent import pvector

from grid_walk.colors import initial_colors, trail_variant
from grid_walk.components import Token
from grid_walk.config import WalkConfig
from grid_walk.grid import new_grid, paint
from grid_walk.moves import random_position
from grid_walk.rng import RandomSource
from grid_walk.state import State
from grid_walk.systems.planning import planning_system


def create_state(
    config: WalkConfig, rng: RandomSource, start_time: float = 0.0
) -> State:
    """Build the initial ``State`` for ``config``.

    Args:
        config (WalkConfig): Grid size, timing and color settings.
        rng (RandomSource): Source for positions, colors and first moves.
        start_time (float): Elapsed time treated as the last tick.

    Returns:
        State: Fresh state with both next moves planned.
    """
    grid = new_grid(config.initial_size, config.background)
    first, second = random_position(grid.size, rng), random_position(grid.size, rng)
    colors = config.initial_colors or initial_colors(rng)

    tokens = []
    for pos, color in zip((first, second), colors):
        trail_color = trail_variant(color, config.trail_alpha)
        tokens.append(Token(pos, pos, color, trail_color))
        grid = paint(grid, pos, trail_color)

    state = State(
        grid=grid,
        tokens=pvector(tokens),
        tick_period=config.tick_period,
        trail_alpha=config.trail_alpha,
        last_tick=start_time,
    )
    return planning_system(state, rng)
