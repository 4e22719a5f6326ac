"""Headless recording of a walk to an animated GIF.

Runs the simulation on a simulated clock (no real-time waiting) and saves
every frame.

    grid-walk-record --seconds 30 --fps 15 --seed 7 --output walk.gif
"""

import argparse
import logging
from typing import List, Optional, Sequence

from PIL import Image

from grid_walk.config import WalkConfig
from grid_walk.log import configure_logging
from grid_walk.simulation import Simulation

logger = logging.getLogger(__name__)

RECORD_RESOLUTION = 400


def record_frames(sim: Simulation, seconds: float, fps: int) -> List[Image.Image]:
    """Drive ``sim`` for ``seconds`` of simulated time at ``fps`` frames per second."""
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    frames: List[Image.Image] = []
    for frame in range(int(seconds * fps)):
        elapsed = frame / fps
        sim.update(elapsed)
        frames.append(sim.render(elapsed).convert("P"))
    return frames


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a grid walk to a GIF")
    parser.add_argument("--seconds", type=float, default=15.0)
    parser.add_argument("--fps", type=int, default=15)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--tick-period", type=float, default=1.0)
    parser.add_argument("--resolution", type=int, default=RECORD_RESOLUTION)
    parser.add_argument("--output", default="walk.gif")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level.upper())

    config = WalkConfig(seed=args.seed, tick_period=args.tick_period)
    sim = Simulation(config, resolution=args.resolution)
    frames = record_frames(sim, args.seconds, args.fps)
    if not frames:
        raise SystemExit("Nothing to record: --seconds * --fps is below one frame")

    frames[0].save(
        args.output,
        save_all=True,
        append_images=frames[1:],
        duration=int(1000 / args.fps),
        loop=0,
    )
    logger.info(
        "Saved %d frames to %s (final size %d, %d growths)",
        len(frames),
        args.output,
        sim.state.grid.size,
        sim.state.growths,
    )


if __name__ == "__main__":
    main()
