"""Canvas rendering with Pillow.

The canvas is divided into ``size + 1`` equal spans per axis and grid
coordinate ``(i, j)`` sits at ``i`` spans from the left and ``j`` spans from
the bottom, so cells form an evenly spaced lattice inset from the edges. The
vertical axis is flipped because image rows grow downward.

Trail colors carry a low alpha; drawing goes through an ``RGBA`` draw context
on an ``RGB`` canvas so they blend over the canvas color instead of replacing
it.
"""

from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from grid_walk.components import Color
from grid_walk.interpolate import token_positions_at
from grid_walk.state import State
from grid_walk.types import Point

DEFAULT_RESOLUTION = 750
DEFAULT_RADIUS = 7.5
CANVAS_COLOR: Tuple[int, int, int] = (21, 21, 21)

UInt8Array = npt.NDArray[np.uint8]


def coord_to_point(coord: Point, size: int, resolution: int) -> Point:
    """Map a (possibly fractional) grid coordinate to image pixel coordinates."""
    i, j = coord
    tile = resolution / (size + 1)
    return tile * i, resolution - tile * j


def draw_circle(
    draw: ImageDraw.ImageDraw, center: Point, radius: float, color: Color
) -> None:
    x, y = center
    draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color.rgba)


def render(
    state: State,
    elapsed: float,
    resolution: int = DEFAULT_RESOLUTION,
    radius: float = DEFAULT_RADIUS,
    canvas_color: Tuple[int, int, int] = CANVAS_COLOR,
) -> Image.Image:
    """Draw the grid and both tokens at ``elapsed`` seconds.

    Args:
        state (State): Snapshot to draw.
        elapsed (float): Time used to place tokens between ticks.
        resolution (int): Width and height of the square image in pixels.
        radius (float): Circle radius of cells and tokens.
        canvas_color (Tuple[int, int, int]): Color behind the grid.

    Returns:
        Image.Image: ``RGB`` image of ``resolution x resolution`` pixels.
    """
    image = Image.new("RGB", (resolution, resolution), canvas_color)
    draw = ImageDraw.Draw(image, "RGBA")
    size = state.grid.size

    for pos, color in state.grid.cells.items():
        center = coord_to_point((pos.x, pos.y), size, resolution)
        draw_circle(draw, center, radius, color)

    for token, point in zip(state.tokens, token_positions_at(state, elapsed)):
        draw_circle(draw, coord_to_point(point, size, resolution), radius, token.color)

    return image


def render_array(
    state: State,
    elapsed: float,
    resolution: int = DEFAULT_RESOLUTION,
    radius: float = DEFAULT_RADIUS,
    canvas_color: Tuple[int, int, int] = CANVAS_COLOR,
) -> UInt8Array:
    """Same as :func:`render` but returned as an ``(H, W, 3)`` uint8 array."""
    image = render(state, elapsed, resolution, radius, canvas_color)
    return np.array(image, dtype=np.uint8)
