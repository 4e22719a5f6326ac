"""Immutable simulation ``State``.

The whole simulation is one frozen value: the trail grid, the pair of tokens
and the tick clock. :func:`grid_walk.step.step` is the only transition; it
takes a ``State`` and returns a new one, so a driver can hold the current
value and swap it each frame without any shared mutable globals.

Design notes:

* ``tokens`` is a persistent vector of exactly two :class:`Token` values,
    indexed by ``TokenID`` (0 and 1). Collision is defined between the two.
* ``last_tick`` is measured in seconds since the driver started; it only
    advances when a tick is committed.
* ``tick`` and ``growths`` are diagnostics and never influence the walk.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap, PVector

from grid_walk.colors import TRAIL_ALPHA
from grid_walk.components import Position, Token
from grid_walk.config import DEFAULT_TICK_PERIOD
from grid_walk.grid import Grid, is_in_bounds
from grid_walk.types import TokenID

TOKEN_COUNT = 2


@dataclass(frozen=True)
class State:
    """Immutable walk state.

    Attributes:
        grid (Grid): Trail buffer and its current size.
        tokens (PVector[Token]): The two walkers.
        tick_period (float): Seconds between committed ticks.
        trail_alpha (int): Alpha used for trail colors assigned on growth.
        last_tick (float): Elapsed time at which the last tick was committed.
        tick (int): Number of committed ticks.
        growths (int): Number of collision-triggered growths.
    """

    grid: Grid
    tokens: PVector[Token]
    tick_period: float = DEFAULT_TICK_PERIOD
    trail_alpha: int = TRAIL_ALPHA
    last_tick: float = 0.0
    tick: int = 0
    growths: int = 0

    @property
    def size(self) -> int:
        return self.grid.size

    def token(self, token_id: TokenID) -> Token:
        return self.tokens[token_id]

    @property
    def positions(self) -> Tuple[Position, ...]:
        return tuple(token.position for token in self.tokens)

    @property
    def description(self) -> PMap[str, Any]:
        """Compact diagnostic view of the state.

        Grid cells are summarized as the painted positions only (cells that
        differ from the background), which keeps the output readable for
        large grids.

        Returns:
            PMap[str, Any]: Persistent map suitable for JSON display.
        """
        painted = {
            f"{pos.x},{pos.y}": color.rgba
            for pos, color in self.grid.cells.items()
            if color != self.grid.background
        }
        tokens = [
            {
                "position": (token.position.x, token.position.y),
                "next_position": (token.next_position.x, token.next_position.y),
                "color": token.color.rgba,
            }
            for token in self.tokens
        ]
        return pmap(
            {
                "size": self.grid.size,
                "tick": self.tick,
                "growths": self.growths,
                "last_tick": self.last_tick,
                "tokens": tokens,
                "painted": painted,
            }
        )


def is_valid_state(state: State) -> bool:
    """Return True if the state holds two on-grid tokens with adjacent plans."""
    if len(state.tokens) != TOKEN_COUNT:
        return False
    size = state.grid.size
    for token in state.tokens:
        for pos in (token.position, token.next_position):
            if not is_in_bounds(pos, size):
                return False
        if max(
            abs(token.next_position.x - token.position.x),
            abs(token.next_position.y - token.position.y),
        ) != 1:
            return False
    return True
