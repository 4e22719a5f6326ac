"""Token component.

One of the two walkers. ``position`` is the cell committed at the last tick,
``next_position`` the cell it will commit at the upcoming tick. ``color`` is
the opaque marker color and ``trail_color`` the faint variant painted into
the grid.
"""

from dataclasses import dataclass

from grid_walk.components.color import Color
from grid_walk.components.position import Position


@dataclass(frozen=True)
class Token:
    position: Position
    next_position: Position
    color: Color
    trail_color: Color
