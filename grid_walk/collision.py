"""Collision detection between the two tokens' moves of a single tick.

Two moves collide when both tokens land on the same cell, or when the straight
segments from their old to their new cells properly cross. The crossing test
uses strict orientation predicates: collinear segments are never reported,
including two tokens swapping cells head-on.
"""

from grid_walk.components import Position


def ccw(a: Position, b: Position, c: Position) -> bool:
    """Return True if ``a``, ``b``, ``c`` turn strictly counter-clockwise."""
    return (c.y - a.y) * (b.x - a.x) > (b.y - a.y) * (c.x - a.x)


def segments_intersect(a: Position, b: Position, c: Position, d: Position) -> bool:
    """Return True if segment ``ab`` properly crosses segment ``cd``."""
    return ccw(a, c, d) != ccw(b, c, d) and ccw(a, b, c) != ccw(a, b, d)


def same_cell(a_next: Position, b_next: Position) -> bool:
    return a_next == b_next


def collided(a: Position, a_next: Position, b: Position, b_next: Position) -> bool:
    """Return True if moves ``a -> a_next`` and ``b -> b_next`` collide.

    Args:
        a (Position): First token's position before the tick.
        a_next (Position): First token's position after the tick.
        b (Position): Second token's position before the tick.
        b_next (Position): Second token's position after the tick.
    """
    return same_cell(a_next, b_next) or segments_intersect(a, a_next, b, b_next)
