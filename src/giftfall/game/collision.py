"""Collision detection and bounds helpers."""

from giftfall.game.entities import Box


def check_collision(a: Box, b: Box) -> bool:
    """Strict AABB overlap test.

    Boxes that only share an edge do not collide.

    Args:
        a: First box
        b: Second box

    Returns:
        True if the boxes overlap
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]. An empty range pins to low."""
    return max(low, min(high, value))
