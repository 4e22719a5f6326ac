"""Two tokens random-walking on a square grid that grows when their paths cross.

The walk is an immutable :class:`~grid_walk.state.State` advanced by the pure
reducer :func:`~grid_walk.step.step`; :class:`~grid_walk.simulation.Simulation`
wraps it for frame-based drivers.
"""

from grid_walk.config import WalkConfig
from grid_walk.factory import create_state
from grid_walk.simulation import Simulation
from grid_walk.state import State
from grid_walk.step import advance, step

__all__ = [
    "Simulation",
    "State",
    "WalkConfig",
    "advance",
    "create_state",
    "step",
]
