"""Common type aliases."""

from typing import Tuple

TokenID = int

Direction = Tuple[int, int]
"""Integer offset ``(dx, dy)`` with each component in ``{-1, 0, 1}``."""

Point = Tuple[float, float]
"""Continuous coordinate, used for interpolated and on-canvas positions."""
