"""Commit system.

Moves every token onto its planned cell and paints its trail color there.
Tokens are painted in id order, so if both land on the same cell the second
token's trail is the one left in the grid.
"""

from dataclasses import replace

from pyrsistent import pvector

from grid_walk.grid import paint
from grid_walk.state import State


def commit_system(state: State) -> State:
    grid = state.grid
    tokens = []
    for token in state.tokens:
        token = replace(token, position=token.next_position)
        grid = paint(grid, token.position, token.trail_color)
        tokens.append(token)
    return replace(state, grid=grid, tokens=pvector(tokens))
