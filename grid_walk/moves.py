"""Random-walk move planning.

A token moves one cell per tick in one of the eight king-move directions.
Only directions that keep it on the grid are candidates, and one of those is
picked uniformly. Every cell of a grid of size two or more has at least one
in-bounds neighbor, so the candidate list is never empty for a valid
position.
"""

from typing import Tuple

from grid_walk.components import Position
from grid_walk.grid import MIN_GRID_SIZE, is_in_bounds
from grid_walk.rng import RandomSource
from grid_walk.types import Direction

DIRECTIONS: Tuple[Direction, ...] = (
    (-1, 1),
    (0, 1),
    (1, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


def offset(pos: Position, direction: Direction) -> Position:
    dx, dy = direction
    return Position(pos.x + dx, pos.y + dy)


def can_move(pos: Position, direction: Direction, size: int) -> bool:
    """Return True if stepping from ``pos`` by ``direction`` stays on the grid."""
    return is_in_bounds(offset(pos, direction), size)


def legal_moves(pos: Position, size: int) -> Tuple[Direction, ...]:
    """All directions from ``DIRECTIONS`` that keep ``pos`` within the grid.

    Order follows ``DIRECTIONS`` so a scripted random source picks predictably.
    """
    return tuple(d for d in DIRECTIONS if can_move(pos, d, size))


def plan_next(pos: Position, size: int, rng: RandomSource) -> Position:
    """Pick the destination of the next tick for a token at ``pos``.

    Raises:
        ValueError: If ``pos`` is off the grid or no legal move exists.
    """
    if not is_in_bounds(pos, size):
        raise ValueError(f"Cannot plan a move from {pos} on a grid of size {size}")
    moves = legal_moves(pos, size)
    if not moves:
        raise ValueError(f"No legal moves from {pos} on a grid of size {size}")
    return offset(pos, rng.choice(moves))


def random_position(size: int, rng: RandomSource) -> Position:
    """Uniform cell of a ``size x size`` grid (x drawn first, then y)."""
    if size < MIN_GRID_SIZE:
        raise ValueError(f"Grid size must be at least {MIN_GRID_SIZE}, got {size}")
    return Position(rng.randint(1, size), rng.randint(1, size))
