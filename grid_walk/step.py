"""State reducer and tick orchestration.

A tick is the only transition of the walk. :func:`step` commits one tick
unconditionally; :func:`advance` is the entry point for a frame driver and
only calls :func:`step` once a full tick period has elapsed since the last
commit. Both are pure: they return a new :class:`grid_walk.state.State`.

Ordering:

1. ``commit_system`` moves tokens onto their planned cells and paints trails.
2. ``growth_system`` compares the moves against the pre-commit positions and,
    on a collision or crossing, grows the grid and reseeds both tokens.
3. ``planning_system`` picks the next destination of each token using the
    (possibly grown) grid size.
4. The tick clock and counters advance.
"""

import logging
from dataclasses import replace

from grid_walk.rng import RandomSource
from grid_walk.state import State, is_valid_state
from grid_walk.systems.commit import commit_system
from grid_walk.systems.growth import growth_system
from grid_walk.systems.planning import planning_system

logger = logging.getLogger(__name__)


def is_tick_due(state: State, elapsed: float) -> bool:
    """Return True once ``tick_period`` has passed since the last committed tick."""
    return elapsed - state.last_tick >= state.tick_period


def step(state: State, now: float, rng: RandomSource) -> State:
    """Commit exactly one tick.

    Args:
        state (State): Current state.
        now (float): Elapsed time recorded as the new ``last_tick``.
        rng (RandomSource): Source for relocation, recoloring and planning.

    Returns:
        State: State after the tick.

    Raises:
        ValueError: If ``state`` is malformed or ``now`` precedes the last tick.
    """
    if not is_valid_state(state):
        raise ValueError("State must hold two on-grid tokens with adjacent plans")
    if now < state.last_tick:
        raise ValueError(f"Tick time {now} precedes last tick at {state.last_tick}")

    prev_positions = state.positions

    state = commit_system(state)
    state = growth_system(state, prev_positions, rng)
    state = planning_system(state, rng)

    state = replace(state, last_tick=now, tick=state.tick + 1)
    logger.debug(
        "Tick %d at %.3fs: size=%d positions=%s",
        state.tick,
        now,
        state.grid.size,
        state.positions,
    )
    return state


def advance(state: State, elapsed: float, rng: RandomSource) -> State:
    """Frame-driver entry point: tick at most once if a tick is due.

    Frames between tick boundaries return ``state`` itself; they only read it
    through :mod:`grid_walk.interpolate`.
    """
    if not is_tick_due(state, elapsed):
        return state
    return step(state, elapsed, rng)
