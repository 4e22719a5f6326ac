import random

from grid_walk.colors import CLASSIC_COLORS, trail_variant
from grid_walk.components import Color, Position
from grid_walk.config import WalkConfig
from grid_walk.factory import create_state
from grid_walk.grid import is_in_bounds
from grid_walk.state import is_valid_state
from grid_walk.step import advance, step
from tests.test_utils import FixedRandom, make_state, painted_cells


def test_crossing_on_smallest_grid_grows_exactly_once() -> None:
    """
    On the 2x2 grid, token A moves (1,1)->(2,2) while token B moves (2,1)->(1,2).
    The diagonals cross in the middle of the grid, so the tick grows the grid
    to 3, wipes every trail and leaves just the two fresh marks.
    """
    state = make_state(
        size=2, positions=((1, 1), (2, 1)), next_positions=((2, 2), (1, 2))
    )
    rng = FixedRandom(
        ints=[1, 1, 3, 3, 10, 20, 30, 40, 50, 60],
        choices=[(1, 1), (-1, -1)],
    )

    state = step(state, 1.0, rng)

    assert state.grid.size == 3
    assert state.growths == 1
    assert painted_cells(state) == {
        Position(1, 1): Color(10, 20, 30, 15),
        Position(3, 3): Color(40, 50, 60, 15),
    }
    assert state.token(0).next_position == Position(2, 2)
    assert state.token(1).next_position == Position(2, 2)

    # both planned into (2, 2): the following tick collides again
    rng = FixedRandom(ints=[1, 1, 4, 4] + [0] * 6, choices=[(1, 0), (0, -1)])
    state = step(state, 2.0, rng)
    assert state.grid.size == 4
    assert state.growths == 2


def test_head_on_swap_does_not_grow() -> None:
    """Tokens swapping cells move along the same line; this goes undetected."""
    state = make_state(
        size=2, positions=((1, 1), (2, 2)), next_positions=((2, 2), (1, 1))
    )
    state = step(state, 1.0, FixedRandom(choices=[(-1, 0), (1, 0)]))
    assert state.grid.size == 2
    assert state.growths == 0
    assert state.positions == (Position(2, 2), Position(1, 1))


def test_trails_accumulate_between_growths() -> None:
    state = make_state(
        size=4, positions=((1, 1), (4, 4)), next_positions=((1, 2), (4, 3))
    )
    rng = FixedRandom(choices=[(0, 1), (0, -1), (0, 1), (0, -1)])
    state = step(state, 1.0, rng)
    state = step(state, 2.0, rng)
    assert state.grid.size == 4
    assert set(painted_cells(state)) == {
        Position(1, 1),
        Position(1, 2),
        Position(1, 3),
        Position(4, 4),
        Position(4, 3),
        Position(4, 2),
    }


def test_create_state_paints_starts_and_plans() -> None:
    rng = FixedRandom(ints=[1, 2, 2, 1, 5, 6, 7, 8, 9, 10], choices=[(1, 0), (-1, 0)])
    state = create_state(WalkConfig(), rng, start_time=3.0)
    assert state.grid.size == 2
    assert state.positions == (Position(1, 2), Position(2, 1))
    assert state.token(0).color == Color(5, 6, 7)
    assert state.token(1).color == Color(8, 9, 10)
    assert state.token(0).next_position == Position(2, 2)
    assert state.token(1).next_position == Position(1, 1)
    assert set(painted_cells(state)) == {Position(1, 2), Position(2, 1)}
    assert state.last_tick == 3.0
    assert state.tick == 0
    assert is_valid_state(state)


def test_create_state_with_classic_colors() -> None:
    rng = FixedRandom(ints=[1, 1, 2, 2], choices=[(1, 0), (-1, 0)])
    state = create_state(WalkConfig(initial_colors=CLASSIC_COLORS), rng)
    assert state.token(0).color == CLASSIC_COLORS[0]
    assert state.token(1).trail_color == trail_variant(CLASSIC_COLORS[1])


def test_long_random_walk_keeps_invariants() -> None:
    rng = random.Random(2024)
    state = create_state(WalkConfig(), rng)
    sizes = [state.grid.size]
    for n in range(1, 400):
        prev = state
        state = step(state, float(n), rng)
        assert is_valid_state(state)
        assert all(is_in_bounds(p, state.grid.size) for p in state.positions)
        if state.growths > prev.growths:
            assert state.grid.size == prev.grid.size + 1
            assert len(painted_cells(state)) in (1, 2)
        else:
            assert state.grid.size == prev.grid.size
        sizes.append(state.grid.size)
    assert sizes == sorted(sizes)
    assert state.grid.size == 2 + state.growths
    assert state.growths > 0


def test_frame_driven_run_ticks_once_per_period() -> None:
    rng = random.Random(5)
    state = create_state(WalkConfig(tick_period=0.5), rng)
    for frame in range(1, 121):
        state = advance(state, frame / 60, rng)
    assert state.tick == 4
    assert state.last_tick == 2.0
