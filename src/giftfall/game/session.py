"""Game session: catch the gifts, dodge the obstacles.

One GameSession owns every piece of mutable game state. The host calls
`frame(delta_ms)` once per display frame; the session advances its spawn
timers, drains queued events, updates and draws. Input arrives as events
on the bus, and score and end-of-session notices leave the same way.

Flow:
    IDLE --start()--> RUNNING --obstacle hit--> GAME_OVER --start()--> RUNNING
"""

from typing import Optional
import logging
import random

from giftfall.core.events import Event, EventBus, EventType
from giftfall.core.scheduler import Scheduler
from giftfall.core.state import State, StateMachine
from giftfall.game.collision import check_collision, clamp
from giftfall.game.entities import (
    Box,
    EntityKind,
    FallingEntity,
    Player,
    SPEED_FACTORS,
    Snowflake,
    entity_size,
)
from giftfall.graphics.images import SpriteSet
from giftfall.graphics.surface import DrawingSurface
from giftfall.storage.highscore import HighScoreStorage

logger = logging.getLogger(__name__)

SNOW_COLOR = (255, 255, 255)


class GameSession:
    """Authoritative game state plus its update and render steps.

    Usage:
        session = GameSession(bus, surface, sprites, store)
        session.start()

        # Host frame callback:
        session.frame(delta_ms)
    """

    GIFT_POINTS = 10
    GIFT_INTERVAL_MS = 1000
    OBSTACLE_INTERVAL_MS = 1500
    SNOWFLAKE_CHANCE = 0.1

    def __init__(
        self,
        event_bus: EventBus,
        surface: DrawingSurface,
        sprites: SpriteSet,
        high_score_store: HighScoreStorage,
        rng: Optional[random.Random] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        gift_interval_ms: float = GIFT_INTERVAL_MS,
        obstacle_interval_ms: float = OBSTACLE_INTERVAL_MS,
    ):
        self.event_bus = event_bus
        self.surface = surface
        self.sprites = sprites
        self.store = high_score_store
        self.rng = rng or random.Random()
        self.state_machine = StateMachine()
        self.scheduler = Scheduler(event_bus)

        self.width = float(width if width is not None else surface.width)
        self.height = float(height if height is not None else surface.height)
        self.gift_interval_ms = gift_interval_ms
        self.obstacle_interval_ms = obstacle_interval_ms

        self.score = 0
        self.high_score = self.store.read()

        self.left_held = False
        self.right_held = False

        self.player = Player.for_playfield(self.width, self.height)
        self.gifts: list[FallingEntity] = []
        self.obstacles: list[FallingEntity] = []
        self.snowflakes: list[Snowflake] = []

        self._gift_timer: Optional[int] = None
        self._obstacle_timer: Optional[int] = None

        self._unsubscribers = [
            event_bus.subscribe(EventType.GIFT_TIMER, lambda e: self.spawn_gift()),
            event_bus.subscribe(EventType.OBSTACLE_TIMER, lambda e: self.spawn_obstacle()),
        ]
        for event_type in (
            EventType.ARCADE_LEFT,
            EventType.ARCADE_RIGHT,
            EventType.ARCADE_LEFT_RELEASE,
            EventType.ARCADE_RIGHT_RELEASE,
            EventType.POINTER_DRAG,
            EventType.BUTTON_PRESS,
        ):
            self._unsubscribers.append(event_bus.subscribe(event_type, self.handle_input))

        logger.info(
            f"GameSession created: playfield {self.width:.0f}x{self.height:.0f}, "
            f"high score {self.high_score}"
        )

    @property
    def state(self) -> State:
        return self.state_machine.state

    @property
    def running(self) -> bool:
        return self.state_machine.state == State.RUNNING

    def close(self) -> None:
        """Detach from the bus and stop the timers."""
        self.scheduler.cancel_all()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    # Lifecycle

    def start(self) -> None:
        """Begin a new session from any state, fully resetting entities."""
        self.state_machine.transition(State.RUNNING)
        self.score = 0

        self.player = Player.for_playfield(self.width, self.height)
        self.gifts = []
        self.obstacles = []
        self.snowflakes = []

        # Restarting while running must not stack a second pair of timers
        self.scheduler.cancel(self._gift_timer)
        self.scheduler.cancel(self._obstacle_timer)
        self._gift_timer = self.scheduler.every(self.gift_interval_ms, EventType.GIFT_TIMER)
        self._obstacle_timer = self.scheduler.every(self.obstacle_interval_ms, EventType.OBSTACLE_TIMER)

        logger.info("Session started")
        self._emit(EventType.SESSION_STARTED, score=self.score, high_score=self.high_score)
        self._emit(EventType.SCORE_CHANGED, score=self.score, high_score=self.high_score)

    def game_over(self) -> None:
        """End the session. Only the first call per session has any effect."""
        if not self.running:
            return

        self.state_machine.transition(State.GAME_OVER)

        if self.score > self.high_score:
            self.high_score = self.score
            self.store.write(self.high_score)

        self.scheduler.cancel(self._gift_timer)
        self.scheduler.cancel(self._obstacle_timer)
        self._gift_timer = None
        self._obstacle_timer = None

        logger.info(f"Game over: score {self.score}, high score {self.high_score}")
        self._emit(EventType.GAME_OVER, final_score=self.score, high_score=self.high_score)

    def frame(self, delta_ms: float) -> bool:
        """Per-frame callback.

        Does nothing once the session is no longer running, which is how
        the frame loop stops: it is not interrupted, it just finds the
        flag cleared on its next call.

        Returns:
            True while the session is still running
        """
        if not self.running:
            return False

        self.scheduler.advance(delta_ms)
        self.event_bus.process_queue()
        self.update()
        self.draw()
        return self.running

    # Spawning

    def spawn_gift(self) -> None:
        self._spawn(EntityKind.GIFT, self.gifts)

    def spawn_obstacle(self) -> None:
        self._spawn(EntityKind.OBSTACLE, self.obstacles)

    def _spawn(self, kind: EntityKind, into: list[FallingEntity]) -> None:
        if not self.running:
            return

        size = entity_size(self.width)
        into.append(FallingEntity(
            box=Box(
                x=self.rng.random() * (self.width - size),
                y=-size,
                width=size,
                height=size,
            ),
            speed=self.height * SPEED_FACTORS[kind],
            kind=kind,
        ))
        logger.debug(f"Spawned {kind.value}, {len(into)} on field")

    def _spawn_snowflake(self) -> None:
        self.snowflakes.append(Snowflake(
            x=self.rng.random() * self.width,
            y=-10,
            size=self.rng.random() * 3 + 1,
            speed=self.rng.random() * 2 + 1,
            wind=self.rng.random() * 0.5 - 0.25,
        ))

    # Update

    def update(self) -> None:
        """Advance the game by one frame."""
        if not self.running:
            return

        self._move_player()

        # Back to front so removal doesn't skip the next entity
        for i in range(len(self.gifts) - 1, -1, -1):
            gift = self.gifts[i]
            gift.fall()

            if self.check_collision(self.player.box, gift.box):
                self.score += self.GIFT_POINTS
                del self.gifts[i]
                self._emit(EventType.SCORE_CHANGED, score=self.score, high_score=self.high_score)
            elif gift.box.y > self.height:
                del self.gifts[i]

        for i in range(len(self.obstacles) - 1, -1, -1):
            obstacle = self.obstacles[i]
            obstacle.fall()

            if self.check_collision(self.player.box, obstacle.box):
                self.game_over()
                return
            if obstacle.box.y > self.height:
                del self.obstacles[i]

        if self.rng.random() < self.SNOWFLAKE_CHANCE:
            self._spawn_snowflake()

        for i in range(len(self.snowflakes) - 1, -1, -1):
            flake = self.snowflakes[i]
            flake.fall()
            if flake.y > self.height:
                del self.snowflakes[i]

    def _move_player(self) -> None:
        box = self.player.box
        if self.left_held:
            box.x = max(0.0, box.x - self.player.speed)
        if self.right_held:
            box.x = min(self.width - box.width, box.x + self.player.speed)
        box.x = clamp(box.x, 0.0, self.width - box.width)

    def move_player_by(self, dx: float) -> None:
        """Apply a pointer drag delta with the keyboard clamp."""
        box = self.player.box
        box.x = clamp(box.x + dx, 0.0, self.width - box.width)

    @staticmethod
    def check_collision(a: Box, b: Box) -> bool:
        return check_collision(a, b)

    # Render

    def draw(self) -> None:
        """Render snowflakes, player, gifts, obstacles, in that order."""
        surface = self.surface
        surface.clear()

        for flake in self.snowflakes:
            surface.fill_circle(flake.x, flake.y, flake.size, SNOW_COLOR)

        box = self.player.box
        surface.draw_image(self.sprites.player, box.x, box.y, box.width, box.height)

        for gift in self.gifts:
            b = gift.box
            surface.draw_image(self.sprites.gift, b.x, b.y, b.width, b.height)

        for obstacle in self.obstacles:
            b = obstacle.box
            surface.draw_image(self.sprites.obstacle, b.x, b.y, b.width, b.height)

    # Host integration

    def resize(self, width: float, height: float) -> None:
        """Adopt a new playfield size.

        Existing entities keep their sizes and speeds; new ones use the
        new size from the next spawn or start.
        """
        self.width = float(width)
        self.height = float(height)
        box = self.player.box
        box.x = clamp(box.x, 0.0, self.width - box.width)
        logger.debug(f"Playfield resized to {self.width:.0f}x{self.height:.0f}")

    def handle_input(self, event: Event) -> bool:
        """Process an input event.

        Returns:
            True if event was handled
        """
        if event.type == EventType.ARCADE_LEFT:
            self.left_held = True
        elif event.type == EventType.ARCADE_LEFT_RELEASE:
            self.left_held = False
        elif event.type == EventType.ARCADE_RIGHT:
            self.right_held = True
        elif event.type == EventType.ARCADE_RIGHT_RELEASE:
            self.right_held = False
        elif event.type == EventType.POINTER_DRAG:
            self.move_player_by(float(event.data.get("dx", 0.0)))
        elif event.type == EventType.BUTTON_PRESS:
            self.start()
        else:
            return False
        return True

    def _emit(self, event_type: EventType, **data) -> None:
        self.event_bus.emit(Event(event_type, data=data, source="session"))
