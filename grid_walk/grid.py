"""Trail grid.

The grid is a square ``size x size`` map from one-based ``Position`` to the
``Color`` currently shown in that cell. It only changes in two ways: a single
cell is painted with a trail color, or the whole grid is replaced by a larger
one reset to the background color.
"""

from dataclasses import dataclass, replace
from typing import Iterator

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_walk.colors import BACKGROUND_COLOR
from grid_walk.components import Color, Position

MIN_GRID_SIZE = 2


@dataclass(frozen=True)
class Grid:
    """Square trail buffer.

    Attributes:
        size (int): Side length; cells span ``[1, size]`` on both axes.
        cells (PMap[Position, Color]): Color of every cell in the grid.
        background (Color): Color cells are reset to on creation and growth.
    """

    size: int
    cells: PMap[Position, Color]
    background: Color = BACKGROUND_COLOR

    def __getitem__(self, pos: Position) -> Color:
        return self.cells[pos]


def positions(size: int) -> Iterator[Position]:
    """Yield every cell of a ``size x size`` grid, column by column."""
    for x in range(1, size + 1):
        for y in range(1, size + 1):
            yield Position(x, y)


def new_grid(size: int, background: Color = BACKGROUND_COLOR) -> Grid:
    """Create a grid with every cell set to ``background``.

    Raises:
        ValueError: If ``size`` is smaller than ``MIN_GRID_SIZE``.
    """
    if size < MIN_GRID_SIZE:
        raise ValueError(f"Grid size must be at least {MIN_GRID_SIZE}, got {size}")
    return Grid(
        size=size,
        cells=pmap({pos: background for pos in positions(size)}),
        background=background,
    )


def is_in_bounds(pos: Position, size: int) -> bool:
    """Return True if ``pos`` lies within ``[1, size]`` on both axes."""
    return 1 <= pos.x <= size and 1 <= pos.y <= size


def paint(grid: Grid, pos: Position, color: Color) -> Grid:
    """Return ``grid`` with the cell at ``pos`` set to ``color``.

    Raises:
        ValueError: If ``pos`` lies outside the grid.
    """
    if not is_in_bounds(pos, grid.size):
        raise ValueError(f"Cannot paint {pos} outside a grid of size {grid.size}")
    return replace(grid, cells=grid.cells.set(pos, color))


def grow(grid: Grid) -> Grid:
    """Return a grid one cell larger on each side, with all trails discarded."""
    return new_grid(grid.size + 1, grid.background)
