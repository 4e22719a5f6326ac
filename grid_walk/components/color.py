"""Color component.

RGBA byte quadruple used for grid cells, token markers and trail marks. Token
markers are fully opaque; trail marks share the token's RGB with a low alpha.
"""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 channels.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
        a: Alpha channel (255 is fully opaque).
    """

    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, alpha: int) -> "Color":
        return replace(self, a=alpha)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)
