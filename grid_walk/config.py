"""Simulation configuration."""

from dataclasses import dataclass
from typing import Optional, Tuple

from grid_walk.colors import BACKGROUND_COLOR, TRAIL_ALPHA
from grid_walk.components import Color
from grid_walk.grid import MIN_GRID_SIZE

DEFAULT_TICK_PERIOD = 1.0


@dataclass(frozen=True)
class WalkConfig:
    """Parameters for building an initial ``State``.

    Attributes:
        initial_size (int): Starting grid side length.
        tick_period (float): Seconds between two committed ticks.
        background (Color): Color of unpainted cells.
        trail_alpha (int): Alpha of trail marks.
        initial_colors (Tuple[Color, Color] | None): Opaque colors of the two
            tokens at start. ``None`` draws two random colors.
        seed (int | None): Seed for the random source. ``None`` means a
            different run every time.
    """

    initial_size: int = MIN_GRID_SIZE
    tick_period: float = DEFAULT_TICK_PERIOD
    background: Color = BACKGROUND_COLOR
    trail_alpha: int = TRAIL_ALPHA
    initial_colors: Optional[Tuple[Color, Color]] = None
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.initial_size < MIN_GRID_SIZE:
            raise ValueError(
                f"initial_size must be at least {MIN_GRID_SIZE}, got {self.initial_size}"
            )
        if self.tick_period <= 0:
            raise ValueError(f"tick_period must be positive, got {self.tick_period}")
        if not 0 <= self.trail_alpha <= 255:
            raise ValueError(f"trail_alpha must be within 0-255, got {self.trail_alpha}")
