"""Game entities: the player, falling gifts and obstacles, snowflakes."""

from dataclasses import dataclass
from enum import Enum


@dataclass
class Box:
    """Axis-aligned bounding box, top-left origin."""
    x: float
    y: float
    width: float
    height: float


class EntityKind(Enum):
    """Falling entity variants."""
    GIFT = "gift"
    OBSTACLE = "obstacle"


@dataclass
class Player:
    """Player sprite. Speed is horizontal pixels per frame."""
    box: Box
    speed: float

    @classmethod
    def for_playfield(cls, width: float, height: float) -> "Player":
        """Bottom-center player sized to the playfield."""
        size = min(width * 0.1, 64)
        return cls(
            box=Box(
                x=width / 2 - size / 2,
                y=height - size - 20,
                width=size,
                height=size,
            ),
            speed=width * 0.005,
        )


@dataclass
class FallingEntity:
    """A gift or obstacle. Speed is vertical pixels per frame."""
    box: Box
    speed: float
    kind: EntityKind

    def fall(self) -> None:
        self.box.y += self.speed


@dataclass
class Snowflake:
    """A decorative snowflake. Size is the circle radius."""
    x: float
    y: float
    size: float
    speed: float
    wind: float

    def fall(self) -> None:
        self.y += self.speed
        self.x += self.wind


def entity_size(playfield_width: float) -> float:
    """Side length of gifts and obstacles."""
    return min(playfield_width * 0.05, 30)


GIFT_SPEED_FACTOR = 0.003
OBSTACLE_SPEED_FACTOR = 0.004

SPEED_FACTORS = {
    EntityKind.GIFT: GIFT_SPEED_FACTOR,
    EntityKind.OBSTACLE: OBSTACLE_SPEED_FACTOR,
}
