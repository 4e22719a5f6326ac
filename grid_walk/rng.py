"""Randomness capability.

The simulation never reaches for module-level randomness; every consumer
receives a ``RandomSource`` explicitly. ``random.Random`` already satisfies
the protocol, so production code passes one in and tests pass a scripted
fake instead.
"""

import random
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Uniform sampling primitives used by the planner and color assigner."""

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer ``n`` with ``a <= n <= b``."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of the non-empty ``seq``."""
        ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a ``random.Random``; unseeded when ``seed`` is ``None``."""
    return random.Random(seed)
