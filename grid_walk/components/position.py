"""Position component.

Immutable one-based integer grid coordinates. A token's committed cell and its
planned destination are both ``Position`` values; cells of the trail grid are
keyed by them as well.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (1 at left).
        y: Row index (1 at bottom).
    """

    x: int
    y: int
