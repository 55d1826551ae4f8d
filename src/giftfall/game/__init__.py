"""Game logic for GIFTFALL."""

from giftfall.game.collision import check_collision, clamp
from giftfall.game.entities import Box, EntityKind, FallingEntity, Player, Snowflake
from giftfall.game.session import GameSession

__all__ = [
    "Box",
    "EntityKind",
    "FallingEntity",
    "GameSession",
    "Player",
    "Snowflake",
    "check_collision",
    "clamp",
]
