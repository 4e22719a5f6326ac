"""Planning system: choose every token's destination for the next tick."""

from dataclasses import replace

from pyrsistent import pvector

from grid_walk.moves import plan_next
from grid_walk.rng import RandomSource
from grid_walk.state import State


def planning_system(state: State, rng: RandomSource) -> State:
    size = state.grid.size
    tokens = [
        replace(token, next_position=plan_next(token.position, size, rng))
        for token in state.tokens
    ]
    return replace(state, tokens=pvector(tokens))
