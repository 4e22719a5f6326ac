"""Component dataclasses.

All components are immutable; a tick produces new instances instead of
mutating old ones.
"""

from .color import Color
from .position import Position
from .token import Token

__all__ = [
    "Color",
    "Position",
    "Token",
]
