from typing import Tuple

import pytest

from grid_walk.collision import ccw, collided, segments_intersect
from grid_walk.components import Position

Move = Tuple[Tuple[int, int], Tuple[int, int]]

CASES = [
    # same destination
    ((((1, 1), (2, 2)), ((5, 5), (2, 2))), True),
    # diagonals crossing at (2, 2)
    ((((1, 1), (3, 3)), ((1, 3), (3, 1))), True),
    # unit diagonals crossing between cells
    ((((1, 1), (2, 2)), ((2, 1), (1, 2))), True),
    # parallel vertical moves
    ((((1, 1), (1, 2)), ((3, 3), (3, 2))), False),
    # far apart
    ((((1, 1), (2, 1)), ((4, 4), (5, 5))), False),
    # one token follows the other along a row
    ((((1, 1), (2, 1)), ((2, 1), (3, 1))), False),
]


def _collided(first: Move, second: Move) -> bool:
    (a, a_next), (b, b_next) = first, second
    return collided(Position(*a), Position(*a_next), Position(*b), Position(*b_next))


@pytest.mark.parametrize("moves, expected", CASES)
def test_collided(moves: Tuple[Move, Move], expected: bool) -> None:
    assert _collided(*moves) is expected


@pytest.mark.parametrize("moves, expected", CASES)
def test_collided_is_symmetric(moves: Tuple[Move, Move], expected: bool) -> None:
    first, second = moves
    assert _collided(first, second) == _collided(second, first) == expected


def test_head_on_swap_is_not_detected() -> None:
    """Known gap: collinear overlapping moves fail the strict orientation test."""
    assert not _collided(((1, 1), (2, 2)), ((2, 2), (1, 1)))
    assert not _collided(((1, 1), (2, 1)), ((2, 1), (1, 1)))


def test_ccw_orientation() -> None:
    a, b = Position(0, 0), Position(1, 0)
    assert ccw(a, b, Position(1, 1))
    assert not ccw(a, b, Position(1, -1))
    assert not ccw(a, b, Position(2, 0))  # collinear


def test_segments_intersect_requires_proper_crossing() -> None:
    p = Position
    assert segments_intersect(p(1, 1), p(3, 3), p(1, 3), p(3, 1))
    assert not segments_intersect(p(1, 1), p(2, 2), p(3, 3), p(4, 4))
