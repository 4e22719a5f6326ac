"""Frame driver wrapper.

``Simulation`` owns the current :class:`State` and its random source and is
meant to be called once per presentation frame with the elapsed time since
the driver started. It ticks at most once per call and renders the frame in
between.

Usage:

``sim = Simulation(WalkConfig(seed=7))``
``sim.update(elapsed); image = sim.render(elapsed)``
"""

import logging
import random
from typing import Optional

from PIL import Image

from grid_walk.config import WalkConfig
from grid_walk.factory import create_state
from grid_walk.renderer.canvas import (
    DEFAULT_RADIUS,
    DEFAULT_RESOLUTION,
    UInt8Array,
    render,
    render_array,
)
from grid_walk.rng import make_rng
from grid_walk.state import State
from grid_walk.step import advance

logger = logging.getLogger(__name__)


class Simulation:
    """Frame-driven wrapper around the walk ``State``.

    Owns the current state and the random source feeding it. Call
    :meth:`update` once per frame with the elapsed time since start, then
    :meth:`render` (or :meth:`render_array`) to draw that frame.

    Attributes:
        config (WalkConfig): Settings used by :meth:`reset`.
        resolution (int): Side length of rendered frames in pixels.
        radius (float): Circle radius of cells and tokens.
        rng (random.Random): Random source of the current run.
        state (State): Current simulation state.
    """

    def __init__(
        self,
        config: Optional[WalkConfig] = None,
        resolution: int = DEFAULT_RESOLUTION,
        radius: float = DEFAULT_RADIUS,
    ) -> None:
        self.config: WalkConfig = config or WalkConfig()
        self.resolution = resolution
        self.radius = radius
        self.rng: random.Random = make_rng(self.config.seed)
        self.state: State = create_state(self.config, self.rng)

    def reset(self, seed: Optional[int] = None, start_time: float = 0.0) -> State:
        """Start over from a fresh initial state.

        Args:
            seed (int | None): Overrides the configured seed when given.
            start_time (float): Elapsed time the new clock starts from.
        """
        self.rng = make_rng(seed if seed is not None else self.config.seed)
        self.state = create_state(self.config, self.rng, start_time=start_time)
        logger.info("Simulation reset: size=%d", self.state.grid.size)
        return self.state

    def update(self, elapsed: float) -> State:
        """Commit a tick if one is due at ``elapsed`` seconds.

        Returns:
            State: The current state, unchanged between tick boundaries.
        """
        self.state = advance(self.state, elapsed, self.rng)
        return self.state

    def render(self, elapsed: float) -> Image.Image:
        """Draw the current state with tokens eased to ``elapsed`` seconds."""
        return render(self.state, elapsed, self.resolution, self.radius)

    def render_array(self, elapsed: float) -> UInt8Array:
        """Same as :meth:`render` as an ``(H, W, 3)`` uint8 array."""
        return render_array(
            self.state, elapsed, resolution=self.resolution, radius=self.radius
        )
